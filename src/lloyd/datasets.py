"""
Synthetic point clouds for exercising the clustering engine.

Two layouts are provided:
- ``make_blobs``: cluster ``i`` is a normal cloud centred at ``spread * i``
  in every coordinate, so clusters march along the main diagonal.
- ``make_uniform``: points scattered uniformly over ``[0, spread)^d`` with
  no structure at all.

Both return an (n, d) tensor. ``to_objects`` turns that into the list of
per-point tensors the engine consumes, optionally with absent entries.
"""

from typing import Iterable, List, Optional, Tuple, Union

import numpy as np
import torch
from torch import Tensor

from .utils.device import parse_device
from .utils.validation import validate_points


def _generator(random_state: Optional[int]) -> Optional[torch.Generator]:
    if random_state is None:
        return None
    generator = torch.Generator()
    generator.manual_seed(random_state)
    return generator


def make_blobs(n_clusters: int,
               points_per_cluster: int,
               spread: float = 10.0,
               dimension: int = 2,
               scale: float = 1.0,
               random_state: Optional[int] = None,
               device: Optional[Union[str, torch.device]] = None) -> Tuple[Tensor, Tensor]:
    """Normal clouds spaced ``spread`` apart along the diagonal.

    Args:
        n_clusters: Number of clouds
        points_per_cluster: Points in each cloud
        spread: Offset between consecutive cloud centres, per coordinate
        dimension: Number of coordinates per point
        scale: Standard deviation of each cloud
        random_state: Random seed for reproducibility
        device: Target device

    Returns:
        X: (n_clusters * points_per_cluster, dimension) float32 tensor, grouped
           by cloud in order
        labels: (n,) int64 tensor of generating cloud indices
    """
    if n_clusters < 1:
        raise ValueError(f"n_clusters must be >= 1, got {n_clusters}")
    if points_per_cluster < 1:
        raise ValueError(f"points_per_cluster must be >= 1, got {points_per_cluster}")
    if dimension < 1:
        raise ValueError(f"dimension must be >= 1, got {dimension}")

    generator = _generator(random_state)

    centres = spread * torch.arange(n_clusters, dtype=torch.float32)
    noise = torch.randn(n_clusters, points_per_cluster, dimension, generator=generator)
    X = centres.view(-1, 1, 1) + scale * noise
    X = X.reshape(n_clusters * points_per_cluster, dimension)

    labels = torch.arange(n_clusters).repeat_interleave(points_per_cluster)

    target = parse_device(device)
    return validate_points(X, device=target), labels.to(target)


def make_uniform(n_points: int,
                 spread: float = 10.0,
                 dimension: int = 2,
                 random_state: Optional[int] = None,
                 device: Optional[Union[str, torch.device]] = None) -> Tensor:
    """Points uniform over the hypercube ``[0, spread)^dimension``.

    Returns:
        (n_points, dimension) float32 tensor
    """
    if n_points < 1:
        raise ValueError(f"n_points must be >= 1, got {n_points}")
    if dimension < 1:
        raise ValueError(f"dimension must be >= 1, got {dimension}")

    X = spread * torch.rand(n_points, dimension, generator=_generator(random_state))
    return validate_points(X, device=parse_device(device))


def to_objects(X: Union[Tensor, np.ndarray, list],
               missing: Optional[Iterable[int]] = None) -> List[Optional[Tensor]]:
    """Split point data into per-point tensors.

    Args:
        X: (n, d) data as a tensor, numpy array or nested list; a 1-D
           input is read as n one-coordinate points
        missing: Indices to replace with None (absent objects)

    Returns:
        List of n float32 row tensors, with None at every missing index

    Raises:
        ValueError: If X has more than two dimensions or non-finite values
    """
    X = validate_points(X, device=X.device if isinstance(X, Tensor) else None)

    objects: List[Optional[Tensor]] = list(X.unbind(0))

    for idx in missing or ():
        if not 0 <= idx < len(objects):
            raise ValueError(f"Missing index {idx} out of range for {len(objects)} objects")
        objects[idx] = None

    return objects
