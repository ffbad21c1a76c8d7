"""
Random initialization strategy.

Selects random present objects as initial centroids.
"""

from typing import List, Optional, Sequence
import torch
from torch import Tensor


class RandomInit:
    """Random initialization by selecting objects from the dataset.

    Picks ``n_clusters`` distinct present objects uniformly at random and
    returns clones, so centroid updates never write through to the data.
    """

    def __init__(self, random_state: Optional[int] = None):
        """
        Args:
            random_state: Random seed for reproducibility
        """
        self.random_state = random_state

    def initialize(self, objects: Sequence[Optional[Tensor]],
                   n_clusters: int) -> List[Tensor]:
        """Initialize centroids with random objects.

        Args:
            objects: Objects to sample from; None entries are skipped
            n_clusters: Number of clusters

        Returns:
            List of ``n_clusters`` centroid tensors
        """
        present = [i for i, obj in enumerate(objects) if obj is not None]

        if n_clusters < 1:
            raise ValueError(f"n_clusters must be >= 1, got {n_clusters}")
        if n_clusters > len(present):
            raise ValueError(f"Cannot create {n_clusters} clusters from "
                             f"{len(present)} present objects")

        generator = None
        if self.random_state is not None:
            generator = torch.Generator()
            generator.manual_seed(self.random_state)

        # Select random indices without replacement
        order = torch.randperm(len(present), generator=generator)[:n_clusters]

        return [objects[present[idx]].clone() for idx in order.tolist()]
