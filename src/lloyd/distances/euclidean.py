"""
Euclidean distances between single points.

Points are 1-D tensors of equal length. Distances come back as Python floats
because the engine only ever compares them.
"""

import torch
from torch import Tensor


class EuclideanDistance:
    """Euclidean distance between two points.

    Computes ||a - b||² by default, or ||a - b|| when ``squared`` is False.
    The squared form orders points identically and skips the square root.
    """

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
        """
        self.squared = squared

    def __call__(self, left: Tensor, right: Tensor) -> float:
        if left.shape != right.shape:
            raise ValueError(f"Shape mismatch: {tuple(left.shape)} vs {tuple(right.shape)}")

        diff = left - right.to(left.device)
        squared_distance = torch.sum(diff * diff)

        if self.squared:
            return squared_distance.item()
        else:
            return torch.sqrt(squared_distance).item()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(squared={self.squared})"


class SquaredEuclideanDistance(EuclideanDistance):
    """Squared Euclidean distance, the classic K-means cost."""

    def __init__(self):
        super().__init__(squared=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
