from scipy.special import comb


def multichoose(n, k):
    """The number of multisets of size ``k`` drawn from ``n`` distinct kinds,

    n multichoose k = (n + k - 1) choose k

    with the convention that there is exactly one empty multiset, even over
    zero kinds.
    """

    if k == 0:
        return 1
    if n == 0:
        return 0
    return comb(n + k - 1, k, exact=True)


def unrestricted_count(main_size, side_size, n_kinds):
    """The number of (main, side) pairs when no per-kind cap binds. Since the
    two groups are then independent, this is simply the product of the two
    multiset counts. It bounds the capped count from above, and equals it
    whenever every cap is at least ``main_size + side_size``.
    """

    return multichoose(n_kinds, main_size) * multichoose(n_kinds, side_size)


def total_states(main_size, side_size, n_kinds):
    """Upper bound on the number of distinct subproblems

    (remaining main, remaining side, kinds not yet considered)

    visited while counting.
    """

    return (main_size + 1) * (side_size + 1) * (n_kinds + 1)
