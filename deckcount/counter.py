from abc import ABC, abstractmethod
from numbers import Integral

import numpy as np
from tqdm import tqdm

from deckcount.logger import logger
from deckcount.utils.utils import timeit, recursion_limit
from deckcount.utils.combinatorics import total_states


def _check_non_negative_integer(name, x):
    if isinstance(x, bool) or not isinstance(x, Integral):
        raise ValueError(f"{name}={x!r} must be an integer")
    if x < 0:
        raise ValueError(f"{name}={x} must be non-negative")
    return int(x)


def validate_arguments(main_size, side_size, limits):
    """Checks the arguments of a counting call and returns them in the form
    used internally.

    Parameters
    ----------
    main_size : int
        Number of items in the main group.
    side_size : int
        Number of items in the side group.
    limits : iterable of int
        The per-kind combined caps.

    Returns
    -------
    int, int, tuple of int
        The sizes as plain integers and the caps frozen into a tuple, so that
        the sequence cannot change while it is being consumed.

    Raises
    ------
    ValueError
        If any size or cap is negative or not an integer.
    """

    main_size = _check_non_negative_integer("main_size", main_size)
    side_size = _check_non_negative_integer("side_size", side_size)
    if isinstance(limits, (str, bytes)):
        raise ValueError("limits must be a sequence of integers")
    try:
        limits = tuple(limits)
    except TypeError:
        raise ValueError(f"limits={limits!r} is not iterable") from None
    limits = tuple(
        _check_non_negative_integer(f"limits[{ii}]", cap)
        for ii, cap in enumerate(limits)
    )
    return main_size, side_size, limits


class Counter(ABC):
    """Counts the (main, side) pairs of multisets with exactly ``main_size``
    and ``side_size`` items, where the copies of kind ``i`` used across both
    groups combined never exceed ``limits[i]``.

    Both subclasses evaluate the same recurrence,

    .. math::

        f(m, s, k) = \\sum_{c_m = 0}^{\\min(m, L_k)}
            \\sum_{c_s = 0}^{\\min(s, L_k - c_m)} f(m - c_m, s - c_s, k + 1)

    with :math:`f(0, 0, k) = 1` and :math:`f(m, s, N) = 0` otherwise, and
    differ only in the order in which the states are filled. Instances hold
    no state between calls.
    """

    @abstractmethod
    def _count(self, main_size, side_size, limits):
        """Takes validated arguments and returns the exact count."""
        ...

    def count(self, main_size, side_size, limits):
        """Returns the exact number of valid (main, side) compositions.

        Parameters
        ----------
        main_size : int
            Number of items in the main group. Must be non-negative.
        side_size : int
            Number of items in the side group. Must be non-negative.
        limits : iterable of int
            The combined cap for every kind, in a fixed order. Kinds with a
            cap of zero contribute nothing, exactly as if they were absent.

        Returns
        -------
        int
            The exact count.

        Raises
        ------
        ValueError
            If any argument is negative or not an integer.
        """

        return self.count_timed(main_size, side_size, limits)[0]

    def count_timed(self, main_size, side_size, limits):
        """Same as :meth:`count`, but also returns the time in seconds spent
        counting.

        Returns
        -------
        int, float
        """

        main_size, side_size, limits = validate_arguments(
            main_size, side_size, limits
        )
        n_states = total_states(main_size, side_size, len(limits))
        name = self.__class__.__name__
        logger.debug(
            f"{name}: main={main_size}, side={side_size}, "
            f"kinds={len(limits)}, states<={n_states}"
        )
        with timeit(logger.debug, f"{name} finished") as timer:
            result = self._count(main_size, side_size, limits)
        return result, timer["elapsed"]


class MemoizedCounter(Counter):
    """Top-down recursion memoized on the state

    (remaining main, remaining side, kinds not yet considered).

    Within a single call the number of kinds not yet considered fixes which
    suffix of ``limits`` is in play, so this triple is a sufficient key. The
    cache is created for each call and discarded when it returns; it is never
    shared between calls, since the same triple means something else for a
    different ``limits``.

    The recursion is as deep as ``limits`` is long, so the interpreter
    recursion limit is raised for the duration of the call.
    """

    def _count(self, main_size, side_size, limits):
        cache = dict()
        n_kinds = len(limits)

        def f(main, side, index):
            if main + side == 0:
                return 1
            if index == n_kinds:
                return 0

            key = (main, side, n_kinds - index)
            if key in cache:
                return cache[key]

            cap = limits[index]
            total = 0
            for c_main in range(min(main, cap) + 1):
                for c_side in range(min(side, cap - c_main) + 1):
                    total += f(main - c_main, side - c_side, index + 1)

            cache[key] = total
            return total

        with recursion_limit(n_kinds + 10):
            result = f(main_size, side_size, 0)

        logger.debug(f"{len(cache)} states cached")
        return result


class TabulatedCounter(Counter):
    """Bottom-up fill of the state lattice, processing kinds from the last to
    the first.

    ``table[m, s]`` holds :math:`f(m, s, k)` for the suffix of kinds starting
    at ``k``. Before any kind is processed only the empty assignment exists,
    so ``table[0, 0] = 1``. Processing kind ``k`` with cap ``L`` sums, for
    every split ``(c_m, c_s)`` with ``c_m + c_s <= L``, the previous table
    shifted by ``(c_m, c_s)``. The table is a ``numpy`` array of
    ``dtype=object`` so that every entry stays an exact Python integer.

    Parameters
    ----------
    pbar : bool, optional
        If True, shows a ``tqdm`` progress bar over the kinds (the default is
        False).
    """

    def __init__(self, pbar=False):
        self.pbar = pbar

    def _count(self, main_size, side_size, limits):
        M = main_size
        S = side_size

        table = np.zeros((M + 1, S + 1), dtype=object)
        table[0, 0] = 1

        for cap in tqdm(limits[::-1], disable=not self.pbar):
            if cap == 0:
                continue

            new_table = np.zeros((M + 1, S + 1), dtype=object)
            for c_main in range(min(M, cap) + 1):
                for c_side in range(min(S, cap - c_main) + 1):
                    new_table[c_main:, c_side:] += \
                        table[:M + 1 - c_main, :S + 1 - c_side]
            table = new_table

        return int(table[M, S])


def count(main_size, side_size, limits, pbar=False):
    """Returns the exact number of ways to build a main group of
    ``main_size`` items and a side group of ``side_size`` items such that
    every kind ``i`` is used at most ``limits[i]`` times across both.

    .. hint::

        With cards a, b, c allowed 1, 2 and 3 copies::

            count(3, 0, [1, 2, 3])  # 6: abb abc acc bbc bcc ccc
            count(3, 1, [1, 2, 3])  # 12
            count(60, 15, [75])  # 1, the "all islands" deck

    Parameters
    ----------
    main_size : int
        Number of items in the main group.
    side_size : int
        Number of items in the side group.
    limits : iterable of int
        The per-kind combined caps.
    pbar : bool, optional
        Shows a progress bar over the kinds (the default is False).

    Returns
    -------
    int
    """

    return TabulatedCounter(pbar=pbar).count(main_size, side_size, limits)


COUNTERS = {
    "tabulated": TabulatedCounter,
    "memoized": MemoizedCounter,
}
