"""Initialization strategies for centroids."""

from .random import RandomInit

__all__ = [
    'RandomInit'
]
