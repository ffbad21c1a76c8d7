"""
Mean update strategy for centroid-based clustering.
"""

import torch

from ..base.data_structures import KMeansConfig


class MeanUpdater:
    """Replaces a centroid with the mean of the objects assigned to it.

    Absent objects never contribute. A cluster with no members keeps its
    current centroid.
    """

    def __call__(self, config: KMeansConfig, cluster: int) -> None:
        members = config.members(cluster)

        if len(members) == 0:
            # No points assigned - keep current centroid
            return

        points = torch.stack(members)
        if not points.is_floating_point():
            points = points.float()
        config.centroids[cluster] = points.mean(dim=0)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
