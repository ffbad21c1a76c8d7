"""
Euclidean point domains.

Objects are 1-D tensors, centroids are means, and closeness is measured
with the (squared) Euclidean distance.
"""

from typing import Optional

from torch import Tensor

from ..base.data_structures import KMeansConfig
from ..base.interfaces import ClusterDomain
from ..distances.euclidean import EuclideanDistance
from ..updates.mean import MeanUpdater


class EuclideanDomain(ClusterDomain[Tensor]):
    """Points in R^d of any dimension.

    Args:
        squared: Use squared distances (default), which is what K-means
            minimizes and avoids a square root per comparison
        dimension: If given, every point handed to ``distance`` must have
            exactly this many coordinates
    """

    def __init__(self, squared: bool = True, dimension: Optional[int] = None):
        self.metric = EuclideanDistance(squared=squared)
        self.updater = MeanUpdater()
        self.dimension = dimension

    def distance(self, left: Tensor, right: Tensor) -> float:
        if self.dimension is not None:
            self._check_point_shape(left)
            self._check_point_shape(right)
        return self.metric(left, right)

    def update_centroid(self, config: KMeansConfig[Tensor], cluster: int) -> None:
        self.updater(config, cluster)

    def _check_point_shape(self, point: Tensor):
        """Validate shape of a single point."""
        if point.dim() != 1:
            raise ValueError(f"Expected 1D point, got {point.dim()}D")
        if point.shape[0] != self.dimension:
            raise ValueError(f"Expected dimension {self.dimension}, got {point.shape[0]}")

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(squared={self.metric.squared}, "
                f"dimension={self.dimension})")


class Point2DDomain(EuclideanDomain):
    """Planar (x, y) points."""

    def __init__(self, squared: bool = True):
        super().__init__(squared=squared, dimension=2)


class HyperpointDomain(EuclideanDomain):
    """Eight-dimensional (s, t, u, v, w, x, y, z) points."""

    def __init__(self, squared: bool = True):
        super().__init__(squared=squared, dimension=8)
