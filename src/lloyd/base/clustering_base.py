"""
The clustering engine.

Implements Lloyd's algorithm over an arbitrary ClusterDomain: alternate an
assignment step (each present object goes to its nearest centroid) with an
update step (each centroid is recomputed from its members) until a pass
leaves the assignments unchanged or the iteration budget runs out.
"""

from typing import Callable, Sequence
import time
import warnings

from .data_structures import KMeansConfig, KMeansResult, KMeansStatus, UNASSIGNED
from ..utils.convergence import AssignmentStability, IterationBudget
from ..utils.validation import validate_config


def nearest_cluster(obj, centroids: Sequence, distance: Callable) -> int:
    """Index of the centroid closest to ``obj``.

    Centroids are scanned in increasing index order and only a strictly
    smaller distance replaces the current best, so ties go to the lowest
    index.
    """
    best_cluster = 0
    best_distance = distance(obj, centroids[0])

    for cluster in range(1, len(centroids)):
        d = distance(obj, centroids[cluster])
        if d < best_distance:
            best_distance = d
            best_cluster = cluster

    return best_cluster


class ClusteringEngine:
    """Runs the assign/update/compare loop on a caller-owned configuration.

    The engine holds no state shared between runs other than the diagnostics
    of the most recent one, so separate instances may run concurrently on
    separate configurations.
    """

    def __init__(self, verbose: int = 0):
        """
        Args:
            verbose: Verbosity level (0=silent, 1=progress, 2=every pass)
        """
        self.verbose = verbose
        self.n_iter_ = 0
        self.history_ = []

    def run(self, config: KMeansConfig) -> KMeansStatus:
        """Cluster ``config`` in place.

        Every assignment is reset to cluster 0 before the first pass.

        Args:
            config: Configuration to cluster; ``assignments`` and
                ``centroids`` are rewritten, ``iterations_used`` is set

        Returns:
            KMeansStatus.OK on convergence, KMeansStatus.LIMIT when the
            iteration budget ran out first

        Raises:
            ConfigurationError: If a precondition is violated
        """
        validate_config(config)

        n_objects = config.n_objects
        n_clusters = config.n_clusters
        for i in range(n_objects):
            config.assignments[i] = 0

        stability = AssignmentStability()
        budget = IterationBudget(config.iteration_budget)
        status = KMeansStatus.LIMIT

        if self.verbose:
            print(f"Clustering {n_objects} objects into {n_clusters} clusters...")

        start_time = time.time()
        try:
            while True:
                iter_start_time = time.time()

                stability.snapshot(config.assignments)
                self._assignment_step(config)
                self._update_step(config)

                converged = stability.check({
                    'iteration': budget.used,
                    'assignments': config.assignments
                })

                if self.verbose >= 2:
                    n_changed = stability.history[-1]['n_changed']
                    iter_time = time.time() - iter_start_time
                    print(f"Pass {budget.used:4d}: {n_changed} assignments changed "
                          f"({iter_time:.3f}s)")

                if converged:
                    status = KMeansStatus.OK
                    break

                if budget.step():
                    status = KMeansStatus.LIMIT
                    break
        finally:
            config.iterations_used = budget.used
            self.n_iter_ = budget.used
            self.history_ = stability.history

        if self.verbose:
            if status == KMeansStatus.OK:
                print(f"Converged after {budget.used} iterations")
            else:
                warnings.warn(f"Failed to converge after {budget.used} iterations "
                              f"(budget {config.iteration_budget})")
            print(f"Total clustering time: {time.time() - start_time:.3f}s")

        return status

    def fit(self, config: KMeansConfig) -> KMeansResult:
        """Run and package the outcome as a KMeansResult."""
        status = self.run(config)
        return KMeansResult(
            status=status,
            iterations_used=config.iterations_used,
            assignments=[int(a) for a in config.assignments],
            centroids=list(config.centroids),
            history=list(self.history_)
        )

    def assign(self, config: KMeansConfig) -> int:
        """Run the assignment step alone against the current centroids.

        Returns:
            Number of objects whose assignment changed
        """
        validate_config(config)
        return self._assignment_step(config)

    def _assignment_step(self, config: KMeansConfig) -> int:
        distance = config.domain.distance
        centroids = config.centroids
        assignments = config.assignments
        n_changed = 0

        for i, obj in enumerate(config.objects):
            if obj is None:
                label = UNASSIGNED
            else:
                label = nearest_cluster(obj, centroids, distance)

            if int(assignments[i]) != label:
                n_changed += 1
            assignments[i] = label

        return n_changed

    def _update_step(self, config: KMeansConfig) -> None:
        update_centroid = config.domain.update_centroid
        for cluster in range(config.n_clusters):
            update_centroid(config, cluster)
