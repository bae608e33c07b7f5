"""
Boyer-Moore majority vote over any re-iterable collection.
A majority element occupies strictly more than half the positions.
Positions are zero-based indices; ``None`` means "no majority".
"""
from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional

Equal = Callable[[Any, Any], bool]


def _scan(values: Iterable, equal: Equal) -> tuple[Optional[int], Any]:
    candidate: Optional[int] = None
    candidate_value = None
    confidence = 0

    for index, value in enumerate(values):
        if confidence == 0:
            candidate, candidate_value = index, value
            confidence = 1
        elif equal(candidate_value, value):
            confidence += 1
        else:
            confidence -= 1

    return candidate, candidate_value


def majority_vote(values: Iterable, equal: Optional[Equal] = None) -> Optional[int]:
    """Return the index of the only element that could be a majority, or None if empty.

    Single pass, so one-shot iterators are fine. The survivor is not
    guaranteed to be a majority; use majority_element() for that.
    """
    candidate, _ = _scan(values, equal or operator.eq)
    return candidate


def count_matches(values: Iterable, value: Any, equal: Optional[Equal] = None) -> tuple[int, int]:
    """Return (nmatches, ntotal) for ``value`` over ``values``."""
    equal = equal or operator.eq
    nmatches = 0
    ntotal = 0
    for item in values:
        if equal(value, item):
            nmatches += 1
        ntotal += 1
    return nmatches, ntotal


def _confirmed(values: Iterable, equal: Optional[Equal], caller: str) -> tuple[Optional[int], Any]:
    if iter(values) is values:
        raise TypeError(f"{caller}() needs a re-iterable collection, not a one-shot iterator")

    equal = equal or operator.eq
    candidate, candidate_value = _scan(values, equal)
    if candidate is None:
        return None, None

    nmatches, ntotal = count_matches(values, candidate_value, equal)
    if (ntotal // 2) < nmatches:
        return candidate, candidate_value
    return None, None


def majority_element(values: Iterable, equal: Optional[Equal] = None) -> Optional[int]:
    """Return the index of the majority element of ``values``, or None when there is none.

    Two passes: a vote to pick the candidate, then a count to confirm it.
    Ties at exactly half are rejected.
    """
    index, _ = _confirmed(values, equal, "majority_element")
    return index


def majority_value(values: Iterable, equal: Optional[Equal] = None, default: Any = None) -> Any:
    """Return the majority element's value, or ``default``."""
    index, value = _confirmed(values, equal, "majority_value")
    return default if index is None else value
