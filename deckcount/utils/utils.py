from contextlib import contextmanager
import sys
import time


def _elapsed_time_str(dt):
    """Returns the elapsed time in variable format depending on how long
    the calculation took.

    Parameters
    ----------
    dt : {float}
        The elapsed time in seconds.

    Returns
    -------
    float, str
        The elapsed time in the format given by the second returned value.
        Either seconds, minutes, hours or days.
    """

    if dt < 10.0:
        return dt, "s"
    elif 10.0 <= dt < 600.0:  # 10 s <= dt < 10 m
        return dt / 60.0, "m"
    elif 600.0 <= dt < 36000.0:  # 10 m <= dt < 10 h
        return dt / 3600.0, "h"
    else:
        return dt / 86400.0, "d"


def _adjust_log_msg_for_time(msg, elapsed):
    if elapsed is None:
        return msg
    (elapsed, units) = _elapsed_time_str(elapsed)
    return f"[{elapsed:.02f} {units}] {msg}"


@contextmanager
def timeit(stream, msg):
    """A simple utility for timing how long a certain block of code will take.

    .. hint::

        Here's an example::

            with timeit(logger.debug, "Counted decks"):
                foo()

    Parameters
    ----------
    stream : callable
        The callable function/method which must take only a string as an
        argument. Usually something like ``logger.info``.
    msg : str
        The message to pass to the ``stream``.

    Yields
    ------
    dict
        A record whose ``"elapsed"`` entry holds the elapsed time in seconds
        once the block exits.
    """

    record = {"elapsed": None}
    t0 = time.time()
    try:
        yield record
    finally:
        dt = time.time() - t0
        record["elapsed"] = dt
        stream(_adjust_log_msg_for_time(msg, dt))


@contextmanager
def recursion_limit(depth):
    """Temporarily raises the interpreter recursion limit so that ``depth``
    further nested calls fit on top of the current one. The limit is never
    lowered, and the previous value is restored on exit.

    Parameters
    ----------
    depth : int
        The number of additional nested calls required.
    """

    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, previous + depth))
    try:
        yield None
    finally:
        sys.setrecursionlimit(previous)
