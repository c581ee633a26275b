"""Stream generation and inspection for majority experiments.

Provides functions for:
- Generating random streams with and without a planted majority
- Building adversarial shapes (exact ties, alternating patterns, long runs)
- Inspecting streams (run counts, frequency tables)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
import pandas as pd


# ---------------------------------------------------------------------------
# Random streams
# ---------------------------------------------------------------------------

def gen_stream(n: int, k: int) -> np.ndarray:
    """Generate ``n`` symbols drawn uniformly from ``range(k)``."""
    return np.random.randint(low=0, high=k, size=n)


def gen_majority_stream(n: int, k: int, share: float) -> np.ndarray:
    """Generate a shuffled stream in which symbol ``0`` is a strict majority.

    Parameters
    ----------
    n : int
        Stream length (≥ 1).
    k : int
        Alphabet size (≥ 2). Non-majority positions are drawn from
        ``1 .. k-1``.
    share : float
        Target fraction of majority positions, in ``(0.5, 1]``. The count
        is rounded up and never drops below ``n // 2 + 1``.

    Returns
    -------
    stream : ndarray of shape (n,)
    """
    if not 0.5 < share <= 1.0:
        raise ValueError(f"Majority share must be in (0.5, 1]: {share!r}")
    if n < 1:
        raise ValueError(f"Stream length must be positive: {n!r}")

    count = min(n, max(n // 2 + 1, math.ceil(share * n)))
    others = np.random.randint(low=1, high=max(k, 2), size=n - count)
    stream = np.concatenate([np.zeros(count, dtype=int), others])
    np.random.shuffle(stream)
    return stream


def gen_tied_stream(n: int) -> np.ndarray:
    """Generate a shuffled stream where symbol ``0`` fills exactly half.

    No element is a strict majority: symbol ``0`` sits on the threshold and
    the other half is made of distinct symbols.
    """
    if n % 2:
        raise ValueError(f"A tie needs an even stream length: {n!r}")
    stream = np.concatenate([np.zeros(n // 2, dtype=int), np.arange(1, n // 2 + 1)])
    np.random.shuffle(stream)
    return stream


def gen_alternating_stream(n: int, first: int = 1, second: int = 2) -> list[int]:
    """Return ``[first, second, first, ...]`` of length ``n``.

    ``first`` is a majority exactly when ``n`` is odd.
    """
    return [first if i % 2 == 0 else second for i in range(n)]


def gen_runs_stream(n_runs: int, k: int, max_run: int) -> np.ndarray:
    """Generate ``n_runs`` runs of equal symbols from ``range(k)``.

    Run lengths are uniform on ``1 .. max_run`` and adjacent runs always use
    different symbols, so the stream has exactly ``n_runs`` runs.
    """
    if k < 2 and n_runs > 1:
        raise ValueError(f"Adjacent runs need at least two symbols: {k!r}")

    runs = []
    prev = -1
    for _ in range(n_runs):
        symbol = np.random.randint(0, k)
        while symbol == prev:
            symbol = np.random.randint(0, k)
        runs.append(np.full(np.random.randint(1, max_run + 1), symbol))
        prev = symbol

    if not runs:
        return np.array([], dtype=int)
    return np.concatenate(runs)


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------

def count_runs(stream: Sequence) -> int:
    """Count maximal blocks of equal adjacent elements (``==`` only)."""
    runs = 0
    for i in range(len(stream)):
        if i == 0 or stream[i] != stream[i - 1]:
            runs += 1
    return runs


def frequency_table(stream: Sequence) -> pd.Series:
    """Return occurrence counts per value, most frequent first.

    Hashes the elements, so it is only meant for analysing experiment
    output; the majority algorithms never rely on it.
    """
    return pd.Series(list(stream)).value_counts()
