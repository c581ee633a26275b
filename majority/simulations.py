"""Simulation harness for studying empirical behaviour of majority algorithms.

Provides functions to repeatedly run the algorithms on random streams and
collect summary statistics on agreement with a brute-force oracle, runtime,
and the auxiliary memory used by run collapsing.
"""

from __future__ import annotations

import logging
import timeit

import numpy as np
import pandas as pd
from scipy import stats

from . import data as dg
from . import algorithms as ma

logger = logging.getLogger(__name__)


def _random_instance(n: int, k: int) -> np.ndarray:
    """Draw a stream that has a planted majority about half of the time."""
    if np.random.uniform() < 0.5:
        return dg.gen_majority_stream(n, k, np.random.uniform(0.51, 0.75))
    return dg.gen_stream(n, k)


def sim_agreement(
    times: int,
    max_n: int = 50,
    k: int = 3,
) -> pd.DataFrame:
    """Cross-check every implemented method against the brute-force oracle.

    Returns a DataFrame with columns:
    ``n``, ``truth``, one column per implemented method, and ``agree``.
    Result columns hold the majority value, or NaN when there is none.
    """
    records = []
    for _ in range(times):
        n = np.random.randint(1, max_n + 1)
        stream = _random_instance(n, k)

        truth = ma.brute_force_index(stream)
        record = {"n": n, "truth": np.nan if truth is None else stream[truth]}
        agree = True
        for method in ma.IMPLEMENTED_METHODS:
            result = ma.find_majority(stream, method)
            record[method] = result.element if result.found else np.nan
            if result.found != (truth is not None) or (
                result.found and not ma.is_majority(stream, result.element)
            ):
                agree = False
        record["agree"] = agree

        if not agree:
            logger.warning("Methods disagree on stream %s", list(stream))
        records.append(record)

    df = pd.DataFrame(records)
    logger.info(
        "Agreement over %d streams: %.3f",
        times, df["agree"].mean() if len(df) else float("nan"),
    )
    return df


def sim_runtime(
    times: int,
    method: ma.Method,
    n_range: tuple[int, int] = (10, 1000),
) -> pd.DataFrame:
    """Benchmark one method on random streams.

    Returns a DataFrame with columns:
    ``time``, ``found``, ``no_elements``, ``no_symbols``.
    """
    if method not in ma.METHODS:
        raise ValueError(f"Unknown majority method: {method!r}")

    records = []
    for _ in range(times):
        n = np.random.randint(n_range[0], n_range[1] + 1)
        k = np.random.randint(2, 10)
        stream = _random_instance(n, k)

        start = timeit.default_timer()
        index = ma.METHODS[method](stream)
        elapsed = timeit.default_timer() - start

        records.append({
            "time": elapsed,
            "found": index is not None,
            "no_elements": n,
            "no_symbols": k,
        })

    return pd.DataFrame(records)


def compare_runtime(
    times: int,
    n_range: tuple[int, int] = (10, 1000),
) -> tuple[pd.DataFrame, float]:
    """Time Boyer-Moore and Fischer-Salzberg on the same streams.

    Returns the per-stream timings and the p-value of a paired Wilcoxon
    signed-rank test on the time differences (NaN if the test is undefined).
    """
    records = []
    for _ in range(times):
        n = np.random.randint(n_range[0], n_range[1] + 1)
        k = np.random.randint(2, 10)
        stream = _random_instance(n, k)

        start = timeit.default_timer()
        ma.boyer_moore_index(stream)
        time_bm = timeit.default_timer() - start

        start = timeit.default_timer()
        ma.fischer_salzberg_index(stream)
        time_fs = timeit.default_timer() - start

        records.append({
            "time_boyer_moore": time_bm,
            "time_fischer_salzberg": time_fs,
            "no_elements": n,
            "no_symbols": k,
        })

    df = pd.DataFrame(records)
    if len(df) < 2 or (df["time_boyer_moore"] == df["time_fischer_salzberg"]).all():
        p_val = float("nan")
    else:
        p_val = float(stats.wilcoxon(df["time_boyer_moore"], df["time_fischer_salzberg"]).pvalue)
    logger.info("Runtime comparison over %d streams: p=%.4g", times, p_val)
    return df, p_val


def aux_memory_profile(
    times: int,
    max_runs: int = 50,
    max_run: int = 5,
) -> pd.DataFrame:
    """Measure the auxiliary list left by run collapsing.

    Returns a DataFrame with columns:
    ``no_elements``, ``no_runs``, ``aux_len``, ``bucket``, ``aux_ratio``.
    """
    records = []
    for _ in range(times):
        n_runs = np.random.randint(1, max_runs + 1)
        k = np.random.randint(2, 6)
        stream = dg.gen_runs_stream(n_runs, k, max_run)

        aux, bucket = ma.collapse_runs(stream)
        records.append({
            "no_elements": len(stream),
            "no_runs": dg.count_runs(stream),
            "aux_len": len(aux),
            "bucket": bucket.count,
            "aux_ratio": len(aux) / len(stream),
        })

    return pd.DataFrame(records)
