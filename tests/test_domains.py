# tests/test_domains.py
"""
Concrete domains: Euclidean distances, mean updates, callback adapter.
"""

from __future__ import annotations

import math

import pytest
import torch

from lloyd import (
    UNASSIGNED,
    CallbackDomain,
    EuclideanDistance,
    EuclideanDomain,
    HyperpointDomain,
    KMeansConfig,
    MeanUpdater,
    Point2DDomain,
    SquaredEuclideanDistance,
)
from utils import mean_1d, squared_gap


def test_squared_euclidean_distance():
    a = torch.tensor([0.0, 0.0])
    b = torch.tensor([3.0, 4.0])

    assert SquaredEuclideanDistance()(a, b) == pytest.approx(25.0)
    assert EuclideanDistance(squared=False)(a, b) == pytest.approx(5.0)
    assert isinstance(SquaredEuclideanDistance()(a, b), float)


def test_distance_shape_mismatch():
    with pytest.raises(ValueError):
        SquaredEuclideanDistance()(torch.zeros(2), torch.zeros(3))


def test_hyperpoint_distance_sums_all_coordinates():
    a = torch.zeros(8)
    b = torch.arange(8, dtype=torch.float32)
    expected = sum(i * i for i in range(8))

    assert HyperpointDomain().distance(a, b) == pytest.approx(expected)
    assert HyperpointDomain(squared=False).distance(a, b) == pytest.approx(math.sqrt(expected))


def test_fixed_dimension_domains_check_points():
    with pytest.raises(ValueError):
        Point2DDomain().distance(torch.zeros(3), torch.zeros(3))
    with pytest.raises(ValueError):
        HyperpointDomain().distance(torch.zeros(2), torch.zeros(2))
    with pytest.raises(ValueError):
        Point2DDomain().distance(torch.zeros(1, 2), torch.zeros(1, 2))

    # No fixed dimension: any length goes.
    assert EuclideanDomain().distance(torch.zeros(5), torch.ones(5)) == pytest.approx(5.0)


def test_mean_updater_averages_members_only():
    objects = [torch.tensor([0.0, 0.0]), None, torch.tensor([2.0, 4.0]),
               torch.tensor([100.0, 100.0])]
    config = KMeansConfig(objects=objects,
                          centroids=[torch.zeros(2), torch.zeros(2)],
                          domain=EuclideanDomain(),
                          assignments=[0, UNASSIGNED, 0, 1])

    MeanUpdater()(config, 0)

    assert torch.allclose(config.centroids[0], torch.tensor([1.0, 2.0]))


def test_mean_updater_leaves_empty_cluster():
    objects = [torch.tensor([1.0, 1.0]), torch.tensor([3.0, 3.0])]
    original = torch.tensor([-5.0, 7.0])
    config = KMeansConfig(objects=objects,
                          centroids=[torch.zeros(2), original],
                          domain=EuclideanDomain(),
                          assignments=[0, 0])

    MeanUpdater()(config, 1)

    assert config.centroids[1] is original


def test_mean_updater_handles_integer_points():
    objects = [torch.tensor([1, 2]), torch.tensor([2, 3])]
    config = KMeansConfig(objects=objects, centroids=[torch.zeros(2)],
                          domain=EuclideanDomain(), assignments=[0, 0])

    MeanUpdater()(config, 0)

    assert torch.allclose(config.centroids[0], torch.tensor([1.5, 2.5]))


def test_mean_updater_does_not_touch_objects():
    objects = [torch.tensor([1.0, 1.0]), torch.tensor([3.0, 3.0])]
    centroids = [objects[0]]  # aliases an object on purpose
    config = KMeansConfig(objects=objects, centroids=centroids,
                          domain=EuclideanDomain(), assignments=[0, 0])

    MeanUpdater()(config, 0)

    assert torch.equal(objects[0], torch.tensor([1.0, 1.0]))
    assert torch.allclose(config.centroids[0], torch.tensor([2.0, 2.0]))


def test_callback_domain_delegates():
    config = KMeansConfig.from_callbacks([1.0, 3.0], [0.0], squared_gap, mean_1d)

    assert isinstance(config.domain, CallbackDomain)
    assert config.distance_fn(1.0, 4.0) == 9.0

    config.centroid_fn(config, 0)
    assert config.centroids[0] == 2.0


def test_callback_domain_requires_callables():
    with pytest.raises(TypeError):
        CallbackDomain(None, mean_1d)
    with pytest.raises(TypeError):
        CallbackDomain(squared_gap, "mean")


def test_config_members_and_sizes():
    config = KMeansConfig(objects=[1.0, None, 3.0], centroids=[0.0, 5.0],
                          domain=CallbackDomain(squared_gap, mean_1d),
                          assignments=[1, UNASSIGNED, 1])

    assert config.n_objects == 3
    assert config.n_clusters == 2
    assert config.members(1) == [1.0, 3.0]
    assert config.members(0) == []


def test_config_allocates_zero_assignments():
    config = KMeansConfig(objects=[1.0, 2.0, 3.0], centroids=[0.0])
    assert config.assignments == [0, 0, 0]
    assert config.iteration_budget == 1000
    assert config.iterations_used == 0
