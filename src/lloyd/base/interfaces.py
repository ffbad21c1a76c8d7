"""
Core interfaces for the Lloyd clustering engine.

The engine itself never looks inside the objects it clusters. Everything
geometric is supplied through a ClusterDomain: one operation measuring the
dissimilarity of two objects, and one recomputing a centroid from the
objects currently assigned to it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .data_structures import KMeansConfig


T = TypeVar('T')


class ClusterDomain(ABC, Generic[T]):
    """Abstract base class for the two capabilities a clustering run needs.

    Different domains represent objects differently:
    - 2-D points: tensors of shape (2,)
    - 8-D hyperpoints: tensors of shape (8,)
    - anything else the caller can measure and average
    """

    @abstractmethod
    def distance(self, left: T, right: T) -> float:
        """Dissimilarity between two present objects.

        Only used for arg-min comparison, so it need not be a true metric,
        but it must be non-negative.

        Args:
            left: An object (never None)
            right: A centroid

        Returns:
            Non-negative scalar
        """
        pass

    @abstractmethod
    def update_centroid(self, config: 'KMeansConfig[T]', cluster: int) -> None:
        """Recompute ``config.centroids[cluster]`` in place.

        Reads ``config.objects`` and ``config.assignments``. When no object is
        currently mapped to ``cluster`` the centroid must be left unchanged.

        Args:
            config: Configuration being clustered
            cluster: Index of the centroid to rewrite
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
