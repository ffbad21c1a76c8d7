"""Base classes and interfaces for the Lloyd clustering engine."""

from .interfaces import (
    ClusterDomain,
    ConvergenceCriterion
)

from .data_structures import (
    UNASSIGNED,
    KMeansStatus,
    KMeansConfig,
    KMeansResult
)

from .clustering_base import ClusteringEngine, nearest_cluster

__all__ = [
    # Interfaces
    'ClusterDomain',
    'ConvergenceCriterion',

    # Data structures
    'UNASSIGNED',
    'KMeansStatus',
    'KMeansConfig',
    'KMeansResult',

    # Engine
    'ClusteringEngine',
    'nearest_cluster'
]
