"""
Lloyd: nearest-centroid clustering over any domain.

The engine runs Lloyd's algorithm without knowing what it clusters. The
caller supplies objects, initial centroids and a ClusterDomain that can
measure dissimilarity and recompute a centroid. Ready-made Euclidean
domains, random initialization, synthetic data and reporting helpers are
included.

Example usage:
    >>> import torch
    >>> from lloyd import ClusteringEngine, KMeansConfig, EuclideanDomain
    >>>
    >>> objects = list(torch.tensor([[0., 0.], [0., 1.], [10., 0.], [10., 1.]]))
    >>> config = KMeansConfig(objects=objects,
    ...                       centroids=[objects[0].clone(), objects[2].clone()],
    ...                       domain=EuclideanDomain())
    >>> status = ClusteringEngine().run(config)
    >>> config.assignments
    [0, 0, 1, 1]
"""

__version__ = '0.1.0'

# Core
from .base import (
    UNASSIGNED,
    ClusterDomain,
    ClusteringEngine,
    ConvergenceCriterion,
    KMeansConfig,
    KMeansResult,
    KMeansStatus,
    nearest_cluster
)
from .utils.validation import ConfigurationError

# Domains and helpers
from .domains import CallbackDomain, EuclideanDomain, Point2DDomain, HyperpointDomain
from .distances import EuclideanDistance, SquaredEuclideanDistance
from .updates import MeanUpdater
from .initialization import RandomInit
from .datasets import make_blobs, make_uniform, to_objects
from .reporting import cluster_sizes, default_columns, summarize, write_csv

# Import visualization
from .visualization import plot_clusters_2d

__all__ = [
    # Engine
    'ClusteringEngine',
    'nearest_cluster',

    # Core data structures
    'UNASSIGNED',
    'KMeansStatus',
    'KMeansConfig',
    'KMeansResult',
    'ConfigurationError',

    # Interfaces
    'ClusterDomain',
    'ConvergenceCriterion',

    # Domains
    'CallbackDomain',
    'EuclideanDomain',
    'Point2DDomain',
    'HyperpointDomain',
    'EuclideanDistance',
    'SquaredEuclideanDistance',
    'MeanUpdater',

    # Initialization and data
    'RandomInit',
    'make_blobs',
    'make_uniform',
    'to_objects',

    # Reporting
    'cluster_sizes',
    'default_columns',
    'summarize',
    'write_csv',

    # Visualization
    'plot_clusters_2d',

    # Version
    '__version__'
]
