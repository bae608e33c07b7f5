"""
Majority check over an already sorted sequence via equal-range lookup.
Sortedness is the caller's job; it is only verified when asked to.
"""
from __future__ import annotations

import operator
from typing import Any, Callable, Optional, Sequence

import numpy as np

from majority.config import check_sorted_enabled

Less = Callable[[Any, Any], bool]


def lower_bound(values: Sequence, x: Any, less: Optional[Less] = None) -> int:
    """First index whose element is not less than ``x``."""
    less = less or operator.lt
    lo, hi = 0, len(values)
    while lo < hi:
        mid = (lo + hi) // 2
        if less(values[mid], x):
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(values: Sequence, x: Any, less: Optional[Less] = None) -> int:
    """First index whose element is greater than ``x``."""
    less = less or operator.lt
    lo, hi = 0, len(values)
    while lo < hi:
        mid = (lo + hi) // 2
        if less(x, values[mid]):
            hi = mid
        else:
            lo = mid + 1
    return lo


def _searchsorted_ok(values: Any, x: Any) -> bool:
    # numpy sorts NaN last; under ``<`` NaN is equivalent to everything
    if not (isinstance(values, np.ndarray) and values.ndim == 1):
        return False
    if values.dtype.kind == "f" and np.isnan(values).any():
        return False
    return not (isinstance(x, (float, np.floating)) and np.isnan(x))


def equal_range(values: Sequence, x: Any, less: Optional[Less] = None) -> tuple[int, int]:
    """Return (first, last) bounding the run of elements equivalent to ``x``."""
    if less is None and _searchsorted_ok(values, x):
        first = int(np.searchsorted(values, x, side="left"))
        last = int(np.searchsorted(values, x, side="right"))
        return first, last
    return lower_bound(values, x, less), upper_bound(values, x, less)


def _is_sorted(values: Sequence, less: Less) -> bool:
    return not any(less(values[i + 1], values[i]) for i in range(len(values) - 1))


def is_majority_element(
    values: Sequence,
    x: Any,
    less: Optional[Less] = None,
    check_sorted: Optional[bool] = None,
) -> bool:
    """Return True if ``x`` fills strictly more than half of the sorted ``values``.

    ``values`` must be sorted non-descending under ``less`` (default ``<``).
    With ``check_sorted`` (or MAJORITY_CHECK_SORTED) an unsorted input raises
    ValueError instead of producing an arbitrary answer.
    """
    if check_sorted is None:
        check_sorted = check_sorted_enabled()
    if check_sorted and not _is_sorted(values, less or operator.lt):
        raise ValueError("is_majority_element() requires values sorted in non-descending order")

    first, last = equal_range(values, x, less)
    return (last - first) > (len(values) // 2)
