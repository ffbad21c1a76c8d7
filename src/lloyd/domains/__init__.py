"""Concrete cluster domains."""

from .callback import CallbackDomain
from .euclidean import EuclideanDomain, Point2DDomain, HyperpointDomain

__all__ = [
    'CallbackDomain',
    'EuclideanDomain',
    'Point2DDomain',
    'HyperpointDomain'
]
