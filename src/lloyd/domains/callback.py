"""
ClusterDomain built from two plain callables.
"""

from typing import Callable

from ..base.interfaces import ClusterDomain


class CallbackDomain(ClusterDomain):
    """Adapts a distance function and a centroid function to ClusterDomain."""

    def __init__(self, distance_fn: Callable, centroid_fn: Callable):
        if not callable(distance_fn):
            raise TypeError(f"distance_fn must be callable, got {type(distance_fn)}")
        if not callable(centroid_fn):
            raise TypeError(f"centroid_fn must be callable, got {type(centroid_fn)}")
        self.distance_fn = distance_fn
        self.centroid_fn = centroid_fn

    def distance(self, left, right) -> float:
        return self.distance_fn(left, right)

    def update_centroid(self, config, cluster: int) -> None:
        self.centroid_fn(config, cluster)
