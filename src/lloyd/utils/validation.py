"""
Input validation for clustering runs.

Precondition violations are caller bugs. They are reported by raising
before a run touches any state, never by a status code returned from a run.
"""

from numbers import Integral
from typing import Optional, Union

import numpy as np
import torch
from torch import Tensor

from ..base.data_structures import KMeansConfig, KMeansStatus
from ..base.interfaces import ClusterDomain


class ConfigurationError(ValueError):
    """Raised when a configuration breaks a run precondition.

    Attributes:
        status: The reserved KMeansStatus classifying the violation
    """

    def __init__(self, message: str, status: KMeansStatus):
        super().__init__(message)
        self.status = status


def validate_config(config: KMeansConfig) -> KMeansConfig:
    """Check every precondition of ``ClusteringEngine.run``.

    Args:
        config: Configuration to check

    Returns:
        The same configuration

    Raises:
        ConfigurationError: If a size or capability precondition fails
        TypeError: If the iteration budget is not an integer
    """
    if not isinstance(config, KMeansConfig):
        raise TypeError(f"Expected KMeansConfig, got {type(config)}")

    if config.domain is None or not isinstance(config.domain, ClusterDomain):
        raise ConfigurationError(
            f"A ClusterDomain is required, got {type(config.domain)}",
            KMeansStatus.MALFORMED_INPUT)

    n_objects = config.n_objects
    n_clusters = config.n_clusters

    if n_objects == 0:
        raise ConfigurationError("No objects to cluster", KMeansStatus.NO_DATA)
    if n_clusters == 0:
        raise ConfigurationError("At least one centroid is required",
                                 KMeansStatus.NO_DATA)

    if len(config.assignments) != n_objects:
        raise ConfigurationError(
            f"Expected {n_objects} assignments, got {len(config.assignments)}",
            KMeansStatus.BAD_LENGTH)

    if n_clusters > n_objects:
        raise ConfigurationError(
            f"Cannot create {n_clusters} clusters from {n_objects} objects",
            KMeansStatus.MALFORMED_INPUT)

    budget = config.iteration_budget
    if isinstance(budget, bool) or not isinstance(budget, Integral):
        raise TypeError(f"iteration_budget must be an integer, got {type(budget)}")
    if budget < 1:
        raise ConfigurationError(
            f"iteration_budget must be >= 1, got {budget}",
            KMeansStatus.MALFORMED_INPUT)

    return config


def validate_points(X: Union[Tensor, np.ndarray, list],
                    dtype: torch.dtype = torch.float32,
                    device: Optional[torch.device] = None) -> Tensor:
    """Validate and convert point data to an (n, d) tensor.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        device: Target device

    Returns:
        Validated tensor

    Raises:
        TypeError: If X cannot be converted
        ValueError: If X is not 2-D or contains non-finite values
    """
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X).to(dtype=dtype, device=device)
    elif isinstance(X, list):
        X = torch.tensor(X, dtype=dtype, device=device)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1:
        X = X.unsqueeze(1)
    elif X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    if torch.isnan(X).any():
        raise ValueError("Input contains NaN values")
    if torch.isinf(X).any():
        raise ValueError("Input contains infinite values")

    return X
