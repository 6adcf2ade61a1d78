from monty.json import MSONable
import yaml


def scientific(value, precision=3):
    """Formats an exact integer like ``%.3g`` would, e.g. ``1.89e+152``.
    Values with at most ``precision`` digits are written out in full (``6``).
    Rounding is half-to-even and done on the integer itself, so the value
    never passes through a ``float``, which would overflow above ~1e308.

    Parameters
    ----------
    value : int
    precision : int, optional
        Number of significant digits (the default is 3).

    Returns
    -------
    str
    """

    if precision < 1:
        raise ValueError(f"precision={precision} must be positive")

    value = int(value)
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    digits = str(magnitude)
    if len(digits) <= precision:
        return f"{sign}{digits}"

    exponent = len(digits) - 1
    scale = 10 ** (len(digits) - precision)
    mantissa, remainder = divmod(magnitude, scale)
    if 2 * remainder > scale or (2 * remainder == scale and mantissa % 2):
        mantissa += 1
    if mantissa == 10 ** precision:  # Rounded up into the next decade
        mantissa //= 10
        exponent += 1

    mantissa = str(mantissa).rstrip("0")
    if len(mantissa) > 1:
        mantissa = f"{mantissa[0]}.{mantissa[1:]}"
    return f"{sign}{mantissa}e+{exponent:02d}"


class FormatResult(MSONable):
    """The number of legal decks in a single format.

    Attributes
    ----------
    format_name : str
        The format, e.g. "Standard".
    main_size : int
    side_size : int
    n_kinds : int
        The number of distinct cards that may be played in the format.
    count : int
        The exact number of legal (main, side) decks.
    elapsed : float
        The time in seconds taken to count.
    """

    def __init__(
        self, format_name, main_size, side_size, n_kinds, count, elapsed=0.0
    ):
        self.format_name = format_name
        self.main_size = main_size
        self.side_size = side_size
        self.n_kinds = n_kinds
        self.count = int(count)
        self.elapsed = elapsed

    @property
    def scientific(self):
        return scientific(self.count)

    @property
    def exact(self):
        return str(self.count)

    @property
    def digits(self):
        return len(self.exact)

    def to_record(self):
        """Plain-type representation for YAML output. The exact count is kept
        as a string since it routinely has hundreds of digits."""

        return {
            "main": self.main_size,
            "side": self.side_size,
            "kinds": self.n_kinds,
            "count": self.exact,
            "scientific": self.scientific,
            "digits": self.digits,
            "elapsed": float(self.elapsed),
        }

    def __str__(self):
        return f"{self.format_name:>8}: {self.scientific} ({self.exact})"

    def __repr__(self):
        return self.__str__()


def save_results(results, path):
    """Writes a list of :class:`FormatResult` to a YAML file, keyed by format
    name."""

    d = {result.format_name: result.to_record() for result in results}
    with open(path, "w") as outfile:
        yaml.dump(d, outfile, default_flow_style=False)
