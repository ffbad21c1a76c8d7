"""
Core data structures for the Lloyd clustering engine.

This module provides the mutable configuration record a run operates on,
the status codes a run can finish with, and the result record handed back
by ``ClusteringEngine.fit``.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import (
    Any, Callable, Dict, Generic, List, MutableSequence, Optional, Sequence,
    TypeVar
)

from .interfaces import ClusterDomain


T = TypeVar('T')

# Assignment value held by every absent (None) object.
UNASSIGNED = -1


class KMeansStatus(IntEnum):
    """Outcome codes of a clustering run.

    Only OK and LIMIT are returned by a well-formed run. The remaining codes
    classify precondition violations and travel on ConfigurationError.
    """

    OK = 0
    NO_DATA = -1
    BAD_LENGTH = -2
    MALFORMED_INPUT = -3
    LIMIT = -4


@dataclass
class KMeansConfig(Generic[T]):
    """Everything a single run reads and writes.

    The caller owns all of it. The engine rewrites ``assignments`` and,
    through ``domain.update_centroid``, the entries of ``centroids``. It
    never replaces the sequences themselves.
    """

    objects: Sequence[Optional[T]]          # N objects, None marks an absent one
    centroids: MutableSequence[T]           # K centroids
    domain: Optional[ClusterDomain[T]] = None
    iteration_budget: int = 1000
    assignments: Optional[MutableSequence[int]] = None  # allocated as [0] * N if omitted
    iterations_used: int = 0

    def __post_init__(self):
        if self.assignments is None:
            self.assignments = [0] * len(self.objects)

    @classmethod
    def from_callbacks(cls,
                       objects: Sequence[Optional[T]],
                       centroids: MutableSequence[T],
                       distance_fn: Callable[[T, T], float],
                       centroid_fn: Callable[['KMeansConfig[T]', int], None],
                       **kwargs) -> 'KMeansConfig[T]':
        """Build a configuration from two plain callables."""
        from ..domains.callback import CallbackDomain
        return cls(objects=objects,
                   centroids=centroids,
                   domain=CallbackDomain(distance_fn, centroid_fn),
                   **kwargs)

    @property
    def n_objects(self) -> int:
        return len(self.objects)

    @property
    def n_clusters(self) -> int:
        return len(self.centroids)

    @property
    def distance_fn(self) -> Callable[[T, T], float]:
        return self.domain.distance

    @property
    def centroid_fn(self) -> Callable[['KMeansConfig[T]', int], None]:
        return self.domain.update_centroid

    def members(self, cluster: int) -> List[T]:
        """Present objects currently assigned to ``cluster``."""
        return [
            obj for obj, label in zip(self.objects, self.assignments)
            if obj is not None and label == cluster
        ]


@dataclass
class KMeansResult:
    """Snapshot of a finished run."""

    status: KMeansStatus
    iterations_used: int
    assignments: List[int]
    centroids: List[Any]
    history: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.status == KMeansStatus.OK
