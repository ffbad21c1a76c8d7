"""Distance measures for point domains."""

from .euclidean import EuclideanDistance, SquaredEuclideanDistance

__all__ = [
    'EuclideanDistance',
    'SquaredEuclideanDistance'
]
