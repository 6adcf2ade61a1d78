from deckcount.logger import logger, DEBUG
from deckcount.counter import COUNTERS
from deckcount.limits import LimitPolicy, load_catalog, format_limits
from deckcount.report import FormatResult, save_results
from deckcount.utils import parser


def get_counter(args):
    if args.strategy == "tabulated":
        return COUNTERS["tabulated"](pbar=getattr(args, "pbar", False))
    return COUNTERS[args.strategy]()


def count_format(counter, name, main, side, limits):
    """Counts the decks for one list of limits and packages the result."""

    n, dt = counter.count_timed(main, side, limits)
    return FormatResult(name, main, side, len(limits), n, elapsed=dt)


def run_catalog(args):
    """Loads the catalog, derives the limits of every format and counts the
    requested formats, printing one line per format."""

    policy = LimitPolicy()
    if args.policy is not None:
        policy = LimitPolicy.from_yaml(args.policy)

    cards = load_catalog(args.inp)
    logger.info(f"Loaded {len(cards)} cards from {args.inp}")
    limits = format_limits(cards, policy)

    counter = get_counter(args)
    results = []
    for fmt in args.formats:
        if fmt not in limits:
            logger.error(f"Unknown format {fmt}, skipping")
            continue
        result = count_format(counter, fmt, args.main, args.side, limits[fmt])
        print(result)
        results.append(result)

    if args.output is not None:
        save_results(results, args.output)
        logger.info(f"Results saved to {args.output}")

    return results


def run_limits(args):
    counter = get_counter(args)
    result = count_format(counter, "limits", args.main, args.side, args.limits)
    print(result)
    return [result]


def main(sys_argv):
    args = parser.global_parser(sys_argv)

    if args.debug:
        DEBUG()

    try:
        if args.protocol == 'catalog':
            return run_catalog(args)
        elif args.protocol == 'limits':
            return run_limits(args)
    except (ValueError, FileNotFoundError) as err:
        logger.critical(str(err))
        return None

    raise RuntimeError(f"Unknown protocol {args.protocol}")
