# tests/utils.py
"""
Small, reusable helpers used across the Lloyd test suite.

Functions:
- label_agreement(y_pred, y_true): best accuracy over relabelings of y_pred.
- mean_1d(config, cluster): centroid update for plain-float objects.
- squared_gap(a, b): squared difference of two floats.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict, Sequence

import numpy as np


def label_agreement(y_pred: Sequence[int], y_true: Sequence[int]) -> float:
    """
    Best accuracy of y_pred against y_true over all permutations of the
    predicted labels. Keep the number of clusters small; this is O(K!).
    """
    y_pred = np.asarray([int(v) for v in y_pred])
    y_true = np.asarray([int(v) for v in y_true])
    if y_pred.shape != y_true.shape:
        raise ValueError(f"Shape mismatch: {y_pred.shape} vs {y_true.shape}")

    labels = sorted(set(y_true.tolist()) | set(y_pred.tolist()))
    best = 0.0
    for perm in itertools.permutations(labels):
        mapping = dict(zip(labels, perm))
        mapped = np.asarray([mapping[v] for v in y_pred.tolist()])
        best = max(best, float(np.mean(mapped == y_true)))
    return best


def squared_gap(a: float, b: float) -> float:
    return (a - b) ** 2


def mean_1d(config, cluster: int) -> None:
    """Mean of the float objects assigned to ``cluster``; no members, no change."""
    members = config.members(cluster)
    if members:
        config.centroids[cluster] = sum(members) / len(members)


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] run {"n":400,"d":2,"K":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
