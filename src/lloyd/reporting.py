"""
Text reporting of clustering results.

Per-cluster counts, a short run summary, and CSV export of the labelled
objects. Absent objects are exported with an ``X`` in every coordinate
column and the sentinel in the cluster column.
"""

import csv
from typing import List, Optional, Sequence, TextIO

import numpy as np
from torch import Tensor

from .base.data_structures import KMeansResult

_HYPERPOINT_COLUMNS = ['S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z']


def default_columns(dimension: int) -> List[str]:
    """Coordinate column names for points of the given dimension."""
    if dimension == 2:
        return ['X', 'Y']
    if dimension == len(_HYPERPOINT_COLUMNS):
        return list(_HYPERPOINT_COLUMNS)
    return [f'x{i}' for i in range(dimension)]


def cluster_sizes(assignments: Sequence[int], n_clusters: int) -> List[int]:
    """Number of objects in each cluster. Sentinel entries are not counted."""
    labels = np.asarray([int(a) for a in assignments], dtype=np.int64)
    labels = labels[(labels >= 0) & (labels < n_clusters)]
    return np.bincount(labels, minlength=n_clusters).tolist()


def summarize(result: KMeansResult, n_clusters: int,
              duration: Optional[float] = None) -> str:
    """Human-readable summary of a finished run."""
    lines = [
        f"Status: {result.status.name}",
        f"Iteration count: {result.iterations_used}",
    ]
    if duration is not None:
        pace = result.iterations_used / duration if duration > 0 else float(result.iterations_used)
        lines.append(f"Duration: {duration:.3f}s")
        lines.append(f"Pace: {pace:.3f} iterations every second")

    lines.append("Points per cluster:")
    for cluster, count in enumerate(cluster_sizes(result.assignments, n_clusters)):
        lines.append(f"\tcentroid[{cluster}]: {count}")

    return "\n".join(lines)


def write_csv(stream: TextIO,
              objects: Sequence[Optional[Tensor]],
              assignments: Sequence[int],
              columns: Optional[Sequence[str]] = None) -> int:
    """Write one row per object: coordinates followed by its cluster.

    Args:
        stream: Text stream to write to
        objects: Clustered objects (None for absent)
        assignments: Cluster index per object
        columns: Coordinate column names; inferred from the first present
            object when omitted

    Returns:
        Number of data rows written
    """
    if len(objects) != len(assignments):
        raise ValueError(f"Expected {len(objects)} assignments, got {len(assignments)}")

    if columns is None:
        first = next((obj for obj in objects if obj is not None), None)
        if first is None:
            raise ValueError("Cannot infer columns without a present object")
        columns = default_columns(first.numel())

    writer = csv.writer(stream)
    writer.writerow(list(columns) + ['Cluster'])

    for obj, label in zip(objects, assignments):
        if obj is None:
            coords = ['X'] * len(columns)
        else:
            values = obj.detach().cpu().numpy().ravel()
            if values.size != len(columns):
                raise ValueError(f"Expected {len(columns)} coordinates, got {values.size}")
            coords = [f"{v:f}" for v in values]
        writer.writerow(coords + [int(label)])

    return len(objects)
