from contextlib import contextmanager
import sys

from loguru import logger


def generic_filter(names):
    if names == "all":
        return None

    def f(record):
        return record["level"].name in names

    return f


DEBUG_FMT = (
    "<fg #808080>{time:YYYY-MM-DD HH:mm:ss.SSS} "
    "{name}:{function}:{line}</> "
    "|<lvl>{level: <10}</>| <lvl>{message}</>"
)

STDOUT_FMT = "<fg #808080>{time:YYYY-MM-DD HH:mm:ss}</> <lvl>{message}</>"

WARN_FMT = (
    "<fg #808080>{time:YYYY-MM-DD HH:mm:ss.SSS} "
    "{name}:{function}:{line}</> "
    "|<lvl>{level: <10}</>| <lvl>{message}</>"
)


def configure_loggers(
    stdout_filter=["INFO", "SUCCESS"],
    stdout_debug_fmt=DEBUG_FMT,
    stderr_filter_warnings=["WARNING"],
    stderr_filter=["ERROR", "CRITICAL"],
    stdout_fmt=STDOUT_FMT,
    stderr_fmt=WARN_FMT,
):
    """Configures the ``loguru`` loggers. Note that the loggers are initialized
    using the default values by default.

    .. important::

        ``logger.critical`` `always` terminates the program through
        ``sys.exit(1)``.

    Parameters
    ----------
    stdout_filter : list of str, optional
        List of logging levels to include in the standard output stream.
    stdout_debug_fmt : str, optional
        Loguru format for the special debug stream.
    stderr_filter_warnings : list of str, optional
        Warning levels, which are written to standard output using the
        ``stderr_fmt`` format.
    stderr_filter : list, optional
        List of logging levels to include in the standard error stream.
    stdout_fmt : str, optional
        Loguru format for the rest of the standard output stream.
    stderr_fmt : str, optional
        Loguru format for the rest of the standard error stream.
    """

    logger.remove(None)  # Remove ALL handlers

    if "DEBUG" in stdout_filter:
        stdout_filter = [xx for xx in stdout_filter if xx != "DEBUG"]
        logger.add(
            sys.stdout,
            colorize=True,
            filter=generic_filter(["DEBUG"]),
            format=stdout_debug_fmt,
        )

    logger.add(
        sys.stdout,
        colorize=True,
        filter=generic_filter(stdout_filter),
        format=stdout_fmt,
    )
    logger.add(
        sys.stdout,
        colorize=True,
        filter=generic_filter(stderr_filter_warnings),
        format=stderr_fmt,
    )
    logger.add(
        sys.stderr,
        colorize=True,
        filter=generic_filter(stderr_filter),
        format=stderr_fmt,
    )

    # We always exit on critical
    logger.add(lambda _: sys.exit(1), level="CRITICAL")


def DEBUG():
    """Quick helper to enable DEBUG mode."""

    configure_loggers(stdout_filter=["DEBUG", "INFO", "SUCCESS"])


def DISABLE_DEBUG():
    """Quick helper to disable DEBUG mode."""

    configure_loggers(stdout_filter=["INFO", "SUCCESS"])


@contextmanager
def disable_logger():
    """Context manager for disabling the logger."""

    logger.disable("")
    try:
        yield None
    finally:
        logger.enable("")


@contextmanager
def debug():
    DEBUG()
    try:
        yield None
    finally:
        DISABLE_DEBUG()


DISABLE_DEBUG()
