"""Turns a card catalog with per-format legalities into the ordered lists of
per-card caps consumed by :func:`deckcount.counter.count`."""

import gzip
import json
from pathlib import Path
import zipfile

from monty.json import MSONable
import yaml

from deckcount.logger import logger


LEGAL = "Legal"
RESTRICTED = "Restricted"


class LimitPolicy(MSONable):
    """Maps the legality of a card in a format to the maximum number of
    copies allowed across the main deck and sideboard combined.

    Attributes
    ----------
    legal : int
        Cap for an ordinary legal card (the default is 4).
    restricted : int
        Cap for a restricted card (the default is 1).
    basic_land : int
        Cap for a legal basic land. Large enough to never bind for usual deck
        sizes (the default is 1000).
    basic_land_prefix : str
        A card is a basic land if its type line starts with this prefix (the
        default is "Basic Land").
    """

    @property
    def legal(self):
        return self._legal

    @legal.setter
    def legal(self, x):
        self._legal = self._check_cap("legal", x)

    @property
    def restricted(self):
        return self._restricted

    @restricted.setter
    def restricted(self, x):
        self._restricted = self._check_cap("restricted", x)

    @property
    def basic_land(self):
        return self._basic_land

    @basic_land.setter
    def basic_land(self, x):
        self._basic_land = self._check_cap("basic_land", x)

    @property
    def basic_land_prefix(self):
        return self._basic_land_prefix

    @basic_land_prefix.setter
    def basic_land_prefix(self, x):
        if not isinstance(x, str):
            raise ValueError(f"basic_land_prefix={x!r} must be a string")
        self._basic_land_prefix = x

    @staticmethod
    def _check_cap(name, x):
        if isinstance(x, bool) or not isinstance(x, int):
            raise ValueError(f"{name}={x!r} must be an integer")
        if x < 0:
            raise ValueError(f"{name}={x} must be non-negative")
        return x

    def __init__(
        self,
        legal=4,
        restricted=1,
        basic_land=1000,
        basic_land_prefix="Basic Land",
    ):
        self.legal = legal
        self.restricted = restricted
        self.basic_land = basic_land
        self.basic_land_prefix = basic_land_prefix

    @classmethod
    def from_yaml(cls, path):
        """Loads a policy from a YAML file. Keys that are not given keep their
        default values.

        Parameters
        ----------
        path : os.PathLike
            The YAML file, e.g. containing ``legal: 4`` and ``restricted: 1``.

        Returns
        -------
        LimitPolicy
        """

        with open(path, "r") as f:
            d = yaml.safe_load(f)
        if d is None:
            d = dict()
        if not isinstance(d, dict):
            raise ValueError(f"Policy file {path} must contain a mapping")
        policy = cls(**d)
        logger.debug(f"Loaded {policy} from {path}")
        return policy

    def cap(self, card_type, legality):
        """Returns the cap for a single card in a single format. Zero means
        that the card cannot be played in that format at all."""

        if legality == LEGAL:
            if card_type.startswith(self.basic_land_prefix):
                return self.basic_land
            return self.legal
        elif legality == RESTRICTED:
            return self.restricted
        return 0

    def __str__(self):
        return (
            f"LimitPolicy(legal={self.legal}, restricted={self.restricted}, "
            f"basic_land={self.basic_land})"
        )

    def __repr__(self):
        return self.__str__()


class Card:
    """A single catalog entry: a name, a type line and the card's legality in
    every format it is listed for.

    Parameters
    ----------
    name : str
    card_type : str
        The full type line, e.g. "Legendary Creature".
    legalities : dict or list
        Either a mapping ``{format: legality}`` or a list of objects with
        ``format`` and ``legality`` keys.
    """

    def __init__(self, name, card_type="", legalities=None):
        self.name = name
        self.card_type = card_type if card_type is not None else ""
        self.legalities = self._parse_legalities(legalities)

    @staticmethod
    def _parse_legalities(legalities):
        if legalities is None:
            return dict()
        if isinstance(legalities, dict):
            return {str(k): str(v) for k, v in legalities.items()}
        d = dict()
        for entry in legalities:
            try:
                d[entry["format"]] = entry["legality"]
            except (KeyError, TypeError):
                raise ValueError(f"Malformed legality entry {entry!r}")
        return d

    @classmethod
    def from_dict(cls, d, name=None):
        """Builds a card from one catalog record. Keys are matched without
        regard to case, so both ``legalities`` and ``Legalities`` work."""

        if not isinstance(d, dict):
            raise ValueError(f"Card record {d!r} is not a mapping")
        lower = {str(k).lower(): v for k, v in d.items()}
        if name is None:
            name = lower.get("name")
        return cls(name, lower.get("type"), lower.get("legalities"))

    def __repr__(self):
        return f"Card({self.name!r}, {self.card_type!r})"


def _read_catalog_text(path):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog {path} does not exist")

    if zipfile.is_zipfile(path):
        with zipfile.ZipFile(path) as archive:
            names = [
                n for n in archive.namelist() if n.lower().endswith(".json")
            ]
            if len(names) != 1:
                raise ValueError(
                    f"Expected exactly one JSON file in {path}, found "
                    f"{len(names)}"
                )
            return archive.read(names[0]).decode("utf-8")

    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as f:
            return f.read()

    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def parse_catalog(data):
    """Converts decoded catalog JSON into a list of cards, preserving the
    catalog order.

    Parameters
    ----------
    data : dict or list
        Either a mapping of card name to card record (the layout of
        AllCards-x.json) or a list of card records.

    Returns
    -------
    list of Card
    """

    if isinstance(data, dict):
        return [Card.from_dict(v, name=k) for k, v in data.items()]
    elif isinstance(data, list):
        return [Card.from_dict(v) for v in data]
    raise ValueError(f"Unrecognized catalog of type {type(data).__name__}")


def load_catalog(path):
    """Reads a catalog from a ``.json`` file, a gzipped ``.json.gz`` file or a
    ``.zip`` archive containing a single JSON file.

    Parameters
    ----------
    path : os.PathLike

    Returns
    -------
    list of Card

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the contents are not a card catalog.
    """

    text = _read_catalog_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        raise ValueError(f"Catalog {path} is not valid JSON: {err}")
    cards = parse_catalog(data)
    logger.debug(f"Loaded {len(cards)} cards from {path}")
    return cards


def format_limits(cards, policy=None):
    """Builds the list of caps for every format mentioned in the catalog.

    Cards which cannot be played in a format are left out of that format's
    list entirely; every format that appears in any card's legalities gets a
    key, even if its list is empty.

    Parameters
    ----------
    cards : iterable of Card
    policy : LimitPolicy, optional
        The cap policy (the default is None, which uses ``LimitPolicy()``).

    Returns
    -------
    dict
        Format name to the list of caps, in catalog order.
    """

    if policy is None:
        policy = LimitPolicy()

    limits = dict()
    for card in cards:
        for fmt, legality in card.legalities.items():
            caps = limits.setdefault(fmt, [])
            cap = policy.cap(card.card_type, legality)
            if cap > 0:
                caps.append(cap)

    for fmt, caps in limits.items():
        logger.debug(f"{fmt}: {len(caps)} playable cards")
    return limits
