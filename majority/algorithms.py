"""Majority-finding algorithms for equality-only element types.

Implements:
- Boyer-Moore majority vote (cancellation + confirmation pass)
- Fischer-Salzberg MJRTY (run collapsing + backward pairing pass)
- Matula tournament (reserved slot, not implemented)
- Brute-force reference checks used as an oracle

Every algorithm compares elements with ``==`` only, so elements need not be
hashable or orderable. Results refer to positions in the caller's sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

import pandas as pd

logger = logging.getLogger(__name__)

Method = Literal["boyer_moore", "fischer_salzberg", "matula_tournament"]


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MajorityResult:
    """Result of a majority search.

    Attributes
    ----------
    index : int | None
        Position of one occurrence of the majority element, or None.
    element : object | None
        The input's own object at ``index`` (not a copy), or None.
    found : bool
        Whether a strict majority element exists.
    """

    index: int | None
    element: Any
    found: bool


# ---------------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------------

def _as_sequence(stream: Iterable) -> Sequence:
    """Return a positionally indexable view of ``stream``."""
    if isinstance(stream, (pd.Series, pd.Index)):
        return stream.to_numpy()
    if hasattr(stream, "__getitem__") and hasattr(stream, "__len__"):
        return stream
    return list(stream)


def _element_at(stream: Sequence, index: int | None) -> Any:
    return None if index is None else stream[index]


# ---------------------------------------------------------------------------
# Boyer-Moore majority vote
# ---------------------------------------------------------------------------

def boyer_moore_index(stream: Iterable) -> int | None:
    """Find the majority element with the Boyer-Moore vote.

    A forward pass pairs off each candidate occurrence against a different
    element; whatever survives is the only possible majority. A second pass
    counts the survivor and stops as soon as the count either clears
    ``n // 2`` or can no longer do so.

    Parameters
    ----------
    stream : sequence
        Elements supporting ``==``.

    Returns
    -------
    int | None
        Index of the surviving candidate if it occurs more than ``n / 2``
        times, otherwise None.
    """
    stream = _as_sequence(stream)
    n = len(stream)
    if n == 0:
        return None

    candidate = 0
    count = 1
    for i in range(1, n):
        if count == 0:
            candidate = i
            count = 1
            continue

        if stream[i] == stream[candidate]:
            count += 1
        else:
            count -= 1

    if count == 0:
        return None

    half = n // 2
    total = 0
    for i in range(n):
        if stream[i] == stream[candidate]:
            total += 1
            if total > half:
                return candidate
            continue

        # Candidate can no longer reach the threshold.
        if total + (n - i - 1) <= half:
            return None

    return None


def boyer_moore(stream: Iterable) -> Any:
    """Return the Boyer-Moore majority element of ``stream``, or None."""
    stream = _as_sequence(stream)
    return _element_at(stream, boyer_moore_index(stream))


# ---------------------------------------------------------------------------
# Fischer-Salzberg (MJRTY)
# ---------------------------------------------------------------------------

class _Bucket:
    """Holds deferred copies of a single value, stored as one input index."""

    def __init__(self) -> None:
        self.index: int | None = None
        self.count = 0

    def push(self, index: int, stream: Sequence) -> None:
        if self.index is None:
            self.index = index
            self.count = 1
            return
        if stream[index] != stream[self.index]:
            raise RuntimeError(
                "invalid push: element being pushed is not equal to the "
                "current element of the bucket"
            )
        self.count += 1

    def pop(self) -> int:
        if self.index is None:
            raise RuntimeError("cannot pop an element from an empty bucket")
        index = self.index
        self.count -= 1
        if self.count == 0:
            self.index = None
        return index

    def empty(self) -> bool:
        return self.index is None

    def __repr__(self) -> str:
        return f"_Bucket(index={self.index!r}, count={self.count})"


def collapse_runs(stream: Iterable) -> tuple[list[int], _Bucket]:
    """Forward pass of MJRTY.

    Builds a list of input indices in which no two adjacent entries hold
    equal elements. Elements equal to the list's tail are deferred into the
    bucket, and one deferred copy is re-inserted after every differing
    element, so the bucket only ever holds copies of the list's last value.

    Returns
    -------
    aux : list of int
        Indices into ``stream``.
    bucket : _Bucket
        Leftover copies of ``stream[aux[-1]]``.
    """
    stream = _as_sequence(stream)
    aux: list[int] = []
    bucket = _Bucket()

    for i in range(len(stream)):
        if aux and stream[i] == stream[aux[-1]]:
            bucket.push(i, stream)
            continue

        aux.append(i)
        if not bucket.empty():
            aux.append(bucket.pop())

    return aux, bucket


def fischer_salzberg_index(stream: Iterable) -> int | None:
    """Find the majority element with the Fischer-Salzberg algorithm.

    After :func:`collapse_runs` the last aux entry is the only possible
    majority. Walking the aux list backwards, each copy of the candidate is
    paired with the entry before it (which always differs), and every other
    unpaired entry consumes one copy from the bucket. The candidate wins
    only if a copy is left over once everything else has been paired.

    Returns
    -------
    int | None
        Index of the candidate if it occurs more than ``n / 2`` times,
        otherwise None.
    """
    stream = _as_sequence(stream)
    if len(stream) == 0:
        return None

    aux, bucket = collapse_runs(stream)
    candidate = aux[-1]

    skip_next = False
    for i in reversed(aux):
        if skip_next:
            skip_next = False
            continue

        if stream[i] == stream[candidate]:
            skip_next = True
            continue

        if bucket.empty():
            return None
        bucket.pop()

    # A perfect pairing is a tie, not a majority.
    if skip_next or not bucket.empty():
        return candidate
    return None


def fischer_salzberg(stream: Iterable) -> Any:
    """Return the Fischer-Salzberg majority element of ``stream``, or None."""
    stream = _as_sequence(stream)
    return _element_at(stream, fischer_salzberg_index(stream))


# ---------------------------------------------------------------------------
# Matula tournament
# ---------------------------------------------------------------------------

def matula_tournament_index(stream: Iterable) -> int | None:
    """Reserved for Matula's tournament algorithm; always returns None."""
    # TODO: implement the pairwise tournament rounds and confirm the winner.
    return None


def matula_tournament(stream: Iterable) -> Any:
    """Reserved for Matula's tournament algorithm; always returns None."""
    stream = _as_sequence(stream)
    return _element_at(stream, matula_tournament_index(stream))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

METHODS: dict[str, Callable[[Iterable], int | None]] = {
    "boyer_moore": boyer_moore_index,
    "fischer_salzberg": fischer_salzberg_index,
    "matula_tournament": matula_tournament_index,
}

IMPLEMENTED_METHODS: tuple[str, ...] = ("boyer_moore", "fischer_salzberg")


def find_majority(
    stream: Iterable,
    method: Method = "boyer_moore",
) -> MajorityResult:
    """Find the strict majority element of ``stream`` with ``method``.

    Parameters
    ----------
    stream : sequence
        Elements supporting ``==``. A ``pandas.Series`` is read positionally.
    method : {"boyer_moore", "fischer_salzberg", "matula_tournament"}
        Algorithm to run.

    Returns
    -------
    MajorityResult
    """
    try:
        find_index = METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown majority method: {method!r}") from None

    stream = _as_sequence(stream)
    index = find_index(stream)
    logger.debug(
        "%s on %d elements: %s",
        method, len(stream), "no majority" if index is None else f"index {index}",
    )
    return MajorityResult(
        index=index,
        element=_element_at(stream, index),
        found=index is not None,
    )


# ---------------------------------------------------------------------------
# Reference checks
# ---------------------------------------------------------------------------

def count_occurrences(stream: Iterable, element: Any) -> int:
    """Count positions of ``stream`` equal to ``element`` (``==`` only)."""
    return sum(1 for current in _as_sequence(stream) if current == element)


def is_majority(stream: Iterable, element: Any) -> bool:
    """Whether ``element`` occurs in strictly more than half of ``stream``."""
    stream = _as_sequence(stream)
    return count_occurrences(stream, element) > len(stream) // 2


def brute_force_index(stream: Iterable) -> int | None:
    """Quadratic reference search; index of the first majority occurrence."""
    stream = _as_sequence(stream)
    for i in range(len(stream)):
        if is_majority(stream, stream[i]):
            return i
    return None
