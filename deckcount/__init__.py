from .logger import logger  # noqa
from .counter import count, MemoizedCounter, TabulatedCounter  # noqa
from .limits import LimitPolicy, load_catalog, format_limits  # noqa
from .report import FormatResult, scientific  # noqa

# DO NOT CHANGE ANYTHING BELOW THIS
__version__ = '0.dev' # version placeholder for editable installs
# DO NOT CHANGE ANYTHING ABOVE THIS
