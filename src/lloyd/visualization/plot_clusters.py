"""
Cluster visualization utilities.

Scatter plots of 2-D clustering results with optional centroid markers.
Absent objects have no coordinates and are left out of the plot.
"""

from typing import List, Optional, Sequence
import matplotlib.pyplot as plt
import numpy as np
import torch
from torch import Tensor

from ..base.data_structures import UNASSIGNED


def plot_clusters_2d(objects: Sequence[Optional[Tensor]],
                     assignments: Sequence[int],
                     centroids: Optional[Sequence[Tensor]] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        objects: Clustered 2-D points (None entries are skipped)
        assignments: Cluster index per object
        centroids: Optional cluster centroids
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if len(objects) != len(assignments):
        raise ValueError(f"Expected {len(objects)} assignments, got {len(assignments)}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    present = [i for i, obj in enumerate(objects) if obj is not None]
    if present:
        X_np = torch.stack([objects[i] for i in present]).detach().cpu().numpy()
        labels_np = np.asarray([int(assignments[i]) for i in present])
    else:
        X_np = np.zeros((0, 2))
        labels_np = np.zeros(0, dtype=np.int64)

    if X_np.shape[1] != 2:
        raise ValueError(f"Expected 2D points, got dimension {X_np.shape[1]}")

    unique_labels = [label for label in np.unique(labels_np) if label != UNASSIGNED]
    n_clusters = len(unique_labels)

    # Default colors
    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i / max(n_clusters, 1)) for i in range(n_clusters)]

    # Plot each cluster
    for i, label in enumerate(unique_labels):
        mask = labels_np == label
        ax.scatter(X_np[mask, 0], X_np[mask, 1],
                   c=[colors[i % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    # Plot centroids
    if centroids is not None and len(centroids) > 0:
        centers_np = torch.stack(list(centroids)).detach().cpu().numpy()
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids',
                   zorder=10)

    ax.set_xlabel('X')
    ax.set_ylabel('Y')

    if title:
        ax.set_title(title)

    if show_legend and (unique_labels or centroids is not None):
        ax.legend()

    return ax
