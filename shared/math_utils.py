"""
Mathematical Utilities
======================

Combinatorics and descriptive statistics used by the cryptogram
toolkit's diagnostics, backed by NumPy.

References:
    [1] de Montmort, P. R. (1713). Essay d'analyse sur les jeux de hazard.
        (The problème des rencontres.)
    [2] Graham, R. L., Knuth, D. E. & Patashnik, O. (1994). Concrete
        Mathematics (2nd ed.), Section 5.3. Addison-Wesley.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import numpy as np
from numpy.typing import NDArray


FloatArray = NDArray[np.floating]


# ========================== Combinatorics ==================================


def derangement_count(n: int) -> int:
    """Number of derangements of *n* elements, the subfactorial !n.

    Uses the recurrence

    .. math::

        !n = (n - 1) (!(n - 1) + !(n - 2)),\\quad !0 = 1,\\ !1 = 0

    Reference:
        Graham, Knuth & Patashnik (1994), Concrete Mathematics, 5.3.

    Args:
        n: Number of elements (>= 0).

    Returns:
        Exact count of permutations of *n* elements with no fixed point.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return 1
    prev, curr = 1, 0
    for k in range(2, n + 1):
        prev, curr = curr, (k - 1) * (curr + prev)
    return curr


def expected_shuffle_attempts(n: int) -> float:
    """Expected number of uniform shuffles until one is a derangement.

    Attempts are geometric with success probability ``!n / n!``, so the
    mean is ``n! / !n``. For n = 26 this equals e to better than 1e-20.

    Args:
        n: Alphabet size (>= 2).

    Returns:
        Expected attempt count.
    """
    if n < 2:
        raise ValueError(f"A derangement needs at least 2 elements, got {n}")
    return math.factorial(n) / derangement_count(n)


# ========================== Descriptive Statistics =========================


class Summary(NamedTuple):
    """Descriptive statistics of a numeric sample."""

    count: int
    mean: float
    std_dev: float
    minimum: float
    maximum: float


def describe(data: Sequence[float] | FloatArray) -> Summary:
    """Compute count, mean, sample standard deviation, min and max.

    Args:
        data: 1-D numeric sample, at least one element.

    Returns:
        A :class:`Summary`. ``std_dev`` is 0.0 for a single observation.

    Raises:
        ValueError: If *data* is empty.
    """
    arr = np.asarray(data, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("Cannot describe an empty sample")

    std = float(np.std(arr, ddof=1)) if arr.size > 1 else 0.0
    return Summary(
        count=int(arr.size),
        mean=float(np.mean(arr)),
        std_dev=std,
        minimum=float(np.min(arr)),
        maximum=float(np.max(arr)),
    )
