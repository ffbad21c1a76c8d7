"""
Command-line demo: generate a synthetic point cloud, cluster it, report.

    lloyd-demo --clusters 5 --points-per-cluster 100 --csv out.csv
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .base.clustering_base import ClusteringEngine
from .base.data_structures import KMeansConfig
from .datasets import make_blobs, make_uniform, to_objects
from .domains.euclidean import EuclideanDomain
from .initialization.random import RandomInit
from .reporting import summarize, write_csv


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lloyd's algorithm on synthetic points")
    parser.add_argument("--clusters", type=int, default=13,
                        help="Number of clusters K.")
    parser.add_argument("--points-per-cluster", type=int, default=200,
                        help="Points generated for each cluster.")
    parser.add_argument("--spread", type=float, default=10.0,
                        help="Distance between generated cloud centres, or the side "
                             "of the sampling square with --uniform.")
    parser.add_argument("--dimension", type=int, default=2,
                        help="Coordinates per point (2 for planar, 8 for hyperpoints).")
    parser.add_argument("--iterations", type=int, default=1000,
                        help="Iteration budget for convergence.")
    parser.add_argument("--uniform", action="store_true",
                        help="Sample points uniformly instead of in clouds.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for data and initial centroids.")
    parser.add_argument("--csv", default=None,
                        help="Write labelled points to this CSV file ('-' for stdout).")
    parser.add_argument("--plot", default=None,
                        help="Save a scatter plot to this image file (2-D only).")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Print progress; repeat for every pass.")
    args = parser.parse_args(argv)

    for name in ("clusters", "points_per_cluster", "dimension", "iterations"):
        if getattr(args, name) < 1:
            parser.error(f"--{name.replace('_', '-')} must be >= 1")

    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    n_points = args.clusters * args.points_per_cluster
    print(f"Initializing {n_points} input points.")
    if args.uniform:
        X = make_uniform(n_points, spread=args.spread, dimension=args.dimension,
                         random_state=args.seed)
    else:
        X, _ = make_blobs(args.clusters, args.points_per_cluster, spread=args.spread,
                          dimension=args.dimension, random_state=args.seed)
    objects = to_objects(X)

    print(f"Initializing {args.clusters} random centroids.")
    centroids = RandomInit(random_state=args.seed).initialize(objects, args.clusters)
    if args.verbose:
        for i, centroid in enumerate(centroids):
            coords = "\t".join(f"{v:f}" for v in centroid.tolist())
            print(f"centroid[{i}]\t{coords}")

    config = KMeansConfig(objects=objects,
                          centroids=centroids,
                          domain=EuclideanDomain(dimension=args.dimension),
                          iteration_budget=args.iterations)

    print("Running K-means computation...")
    engine = ClusteringEngine(verbose=args.verbose)
    start_time = time.time()
    result = engine.fit(config)
    duration = time.time() - start_time

    print(summarize(result, args.clusters, duration))

    if args.plot:
        if args.dimension != 2:
            print("Skipping plot: only 2-D points can be plotted.")
        else:
            import matplotlib.pyplot as plt
            from .visualization import plot_clusters_2d

            ax = plot_clusters_2d(objects, result.assignments, result.centroids,
                                  show_legend=args.clusters <= 10,
                                  title=f"K-means, K={args.clusters}")
            ax.figure.savefig(args.plot)
            plt.close(ax.figure)

    if not result.converged:
        print(f"K-Means failed with code: {int(result.status)}")
        return 1

    if args.csv == "-":
        write_csv(sys.stdout, objects, result.assignments)
    elif args.csv:
        with open(args.csv, "w", newline="") as f:
            write_csv(f, objects, result.assignments)

    return 0


if __name__ == "__main__":
    sys.exit(main())
