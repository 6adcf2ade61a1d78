#!/usr/bin/env python3

import argparse
from argparse import HelpFormatter, ArgumentDefaultsHelpFormatter
from operator import attrgetter


DEFAULT_FORMATS = ["Standard", "Modern", "Legacy", "Vintage"]


# https://stackoverflow.com/questions/
# 12268602/sort-argparse-help-alphabetically
class SortingHelpFormatter(ArgumentDefaultsHelpFormatter, HelpFormatter):
    def add_arguments(self, actions):
        actions = sorted(actions, key=attrgetter('option_strings'))
        super(SortingHelpFormatter, self).add_arguments(actions)


def _add_deck_arguments(sp):
    sp.add_argument(
        '--main', type=int, default=60, dest='main',
        help='Number of cards in the main deck.'
    )
    sp.add_argument(
        '--side', type=int, default=15, dest='side',
        help='Number of cards in the sideboard.'
    )
    sp.add_argument(
        '--strategy', type=str, default='tabulated', dest='strategy',
        choices=['tabulated', 'memoized'],
        help='Counting strategy. Both are exact; tabulated fills the table '
        'of subproblems bottom-up and is faster for large catalogs, memoized '
        'recurses top-down over the cards.'
    )


def global_parser(sys_argv):

    ap = argparse.ArgumentParser(formatter_class=SortingHelpFormatter)

    ap.add_argument(
        '--debug', default=False, dest='debug', action='store_true',
        help='Enables the debug logging stream to stdout.'
    )

    subparsers = ap.add_subparsers(
        help='Count decks from a card catalog or from an explicit list of '
        'per-card limits.', dest='protocol'
    )

    # (1) ---------------------------------------------------------------------
    catalog_sp = subparsers.add_parser(
        "catalog", formatter_class=SortingHelpFormatter,
        description='Reads a card catalog with per-format legalities and '
        'counts the legal decks in each requested format.'
    )
    catalog_sp.add_argument(
        '-i', '--input', type=str, required=True, dest='inp',
        help='Catalog file: .json, .json.gz or a .zip holding one JSON file.'
    )
    catalog_sp.add_argument(
        '-f', '--formats', type=str, nargs='+', default=DEFAULT_FORMATS,
        dest='formats', help='Formats to count.'
    )
    catalog_sp.add_argument(
        '--policy', type=str, default=None, dest='policy',
        help='Optional YAML file overriding the copy limits (keys legal, '
        'restricted, basic_land, basic_land_prefix).'
    )
    catalog_sp.add_argument(
        '--pbar', default=False, dest='pbar', action='store_true',
        help='Show a progress bar over the cards (tabulated strategy only).'
    )
    catalog_sp.add_argument(
        '-o', '--output', type=str, default=None, dest='output',
        help='Optional YAML file to write the results to.'
    )
    _add_deck_arguments(catalog_sp)

    # (2) ---------------------------------------------------------------------
    limits_sp = subparsers.add_parser(
        "limits", formatter_class=SortingHelpFormatter,
        description='Counts decks directly from a list of per-card limits.'
    )
    limits_sp.add_argument(
        'limits', type=int, nargs='*', default=[],
        help='Maximum number of copies of each card, main and side combined.'
    )
    _add_deck_arguments(limits_sp)

    args = ap.parse_args(sys_argv)

    return args
