import sys

import pytest
from scipy.special import comb

from deckcount.utils import combinatorics
from deckcount.utils.utils import (
    _adjust_log_msg_for_time,
    _elapsed_time_str,
    recursion_limit,
    timeit,
)


@pytest.mark.parametrize("n,k", [(1, 0), (3, 2), (10, 4), (300, 60)])
def test_multichoose(n, k):
    assert combinatorics.multichoose(n, k) == comb(n + k - 1, k, exact=True)


def test_multichoose_no_kinds():
    assert combinatorics.multichoose(0, 3) == 0


def test_unrestricted_count():
    # 3 kinds: 10 multisets of size 3, 3 of size 1
    assert combinatorics.unrestricted_count(3, 1, 3) == 30
    assert combinatorics.unrestricted_count(0, 0, 0) == 1


def test_total_states():
    assert combinatorics.total_states(60, 15, 0) == 976
    assert combinatorics.total_states(0, 0, 9) == 10


@pytest.mark.parametrize(
    "dt,units", [(1.0, "s"), (30.0, "m"), (1200.0, "h"), (1e6, "d")]
)
def test_elapsed_time_str(dt, units):
    assert _elapsed_time_str(dt)[1] == units


def test_adjust_log_msg_for_time():
    assert _adjust_log_msg_for_time("hi", None) == "hi"
    assert _adjust_log_msg_for_time("hi", 1.0) == "[1.00 s] hi"


def test_timeit():
    messages = []
    with timeit(messages.append, "block"):
        pass
    assert len(messages) == 1
    assert messages[0].endswith("block")


def test_timeit_records_elapsed():
    messages = []
    with timeit(messages.append, "block") as timer:
        assert timer["elapsed"] is None
    assert isinstance(timer["elapsed"], float)
    assert timer["elapsed"] >= 0.0
    assert messages[0] == _adjust_log_msg_for_time("block", timer["elapsed"])


def test_recursion_limit():
    before = sys.getrecursionlimit()
    with recursion_limit(5000):
        assert sys.getrecursionlimit() == before + 5000
    assert sys.getrecursionlimit() == before


def test_recursion_limit_restored_on_error():
    before = sys.getrecursionlimit()
    with pytest.raises(KeyError):
        with recursion_limit(10):
            raise KeyError
    assert sys.getrecursionlimit() == before
