# tests/test_initialization.py
"""
Random centroid initialization.
"""

from __future__ import annotations

import pytest
import torch

from lloyd import RandomInit


def _objects(n: int):
    return [torch.tensor([float(i), float(-i)]) for i in range(n)]


def test_picks_distinct_objects():
    objects = _objects(10)

    centroids = RandomInit(random_state=0).initialize(objects, 4)

    assert len(centroids) == 4
    keys = {tuple(c.tolist()) for c in centroids}
    assert len(keys) == 4
    for c in centroids:
        assert any(torch.equal(c, obj) for obj in objects)


def test_returns_clones():
    objects = _objects(3)

    centroids = RandomInit(random_state=1).initialize(objects, 3)
    for c in centroids:
        c.add_(100.0)

    assert all(obj.abs().max() < 100 for obj in objects)


def test_skips_absent_objects():
    objects = [None, torch.tensor([1.0, 1.0]), None, torch.tensor([2.0, 2.0])]

    centroids = RandomInit(random_state=3).initialize(objects, 2)

    assert sorted(c[0].item() for c in centroids) == [1.0, 2.0]


def test_seed_is_reproducible():
    objects = _objects(50)

    first = RandomInit(random_state=42).initialize(objects, 5)
    second = RandomInit(random_state=42).initialize(objects, 5)

    for a, b in zip(first, second):
        assert torch.equal(a, b)


def test_too_many_clusters():
    objects = [torch.zeros(2), None, torch.ones(2)]
    with pytest.raises(ValueError):
        RandomInit().initialize(objects, 3)


def test_zero_clusters():
    with pytest.raises(ValueError):
        RandomInit().initialize(_objects(3), 0)
