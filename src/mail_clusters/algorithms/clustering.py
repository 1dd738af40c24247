"""
K-means clustering with k-means++ seeding and empty-cluster repair.

Distances are plain Euclidean. After the main loop a repair pass moves points
from the largest cluster into empty ones so that small or skewed corpora still
come back as several groups instead of one dominant cluster.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Array2D = np.ndarray

DEFAULT_MAX_ITER = 30
DEFAULT_MIN_CLUSTERS = 3


@dataclass
class KMeansResult:
    """Result of a single k-means run."""

    labels: np.ndarray
    centroids: np.ndarray
    n_iter: int = 0
    converged: bool = False
    n_repaired: int = 0


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Square root of the summed squared coordinate differences."""
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum(diff * diff)))


def _pairwise_distances(X: Array2D, centroids: Array2D) -> np.ndarray:
    """(n, K) Euclidean distances between rows of *X* and *centroids*."""
    diffs = X[:, None, :] - centroids[None, :, :]  # (n, K, d)
    return np.sqrt(np.sum(diffs ** 2, axis=2))


def _kmeanspp_init(X: Array2D, K: int, rng: np.random.Generator) -> np.ndarray:
    """
    Return (K, d) initial centroids chosen by the k-means++ rule.

    The first centroid is a uniformly drawn point. Each further centroid is
    drawn with probability proportional to the squared distance to the
    nearest centroid chosen so far, by walking the cumulative distance mass
    with one uniform draw. When every point coincides with a chosen centroid
    the draw falls back to uniform.
    """
    n, d = X.shape
    centroids = np.empty((K, d), dtype=np.float64)
    centroids[0] = X[int(rng.integers(0, n))]

    for k in range(1, K):
        min_sq = _pairwise_distances(X, centroids[:k]).min(axis=1) ** 2  # (n,)
        total = float(min_sq.sum())
        if total == 0.0:
            idx = int(rng.integers(0, n))
        else:
            cumulative = np.cumsum(min_sq)
            target = rng.random() * total
            idx = min(int(np.searchsorted(cumulative, target, side="right")), n - 1)
        centroids[k] = X[idx]
    return centroids


def _assign(X: Array2D, centroids: Array2D) -> np.ndarray:
    """Assign each row of *X* to its nearest centroid (ties -> lowest index)."""
    return np.argmin(_pairwise_distances(X, centroids), axis=1)


def repair_empty_clusters(
    labels: np.ndarray, K: int, min_clusters: int = DEFAULT_MIN_CLUSTERS
) -> int:
    """
    Fill empty clusters from the largest cluster, in place.

    Runs only when fewer than ``min(min_clusters, K)`` clusters are non-empty
    and there are at least 3 points. For each empty cluster, in index order,
    the largest originally non-empty cluster (lowest index on ties) gives up
    ``max(1, size // 3)`` of its points, taken in document order. A cluster
    holding a single point is never emptied.

    Args:
        labels: (n,) cluster assignments, modified in place
        K: Number of clusters
        min_clusters: Target number of non-empty clusters

    Returns:
        Number of points moved
    """
    n = len(labels)
    counts = np.bincount(labels, minlength=K)
    non_empty = [j for j in range(K) if counts[j] > 0]
    if len(non_empty) >= min(min_clusters, K) or n < 3:
        return 0

    moved_total = 0
    for empty_idx in (j for j in range(K) if counts[j] == 0):
        if not non_empty:
            break
        largest = max(non_empty, key=lambda j: (counts[j], -j))
        if counts[largest] <= 1:
            continue
        quota = max(1, int(counts[largest]) // 3)
        moved = 0
        for i in range(n):
            if moved >= quota:
                break
            if labels[i] == largest:
                labels[i] = empty_idx
                moved += 1
        counts[largest] -= moved
        counts[empty_idx] += moved
        moved_total += moved
        logger.debug(
            "Moved %d point(s) from cluster %d to empty cluster %d",
            moved, largest, empty_idx,
        )
    return moved_total


def kmeans(
    X: Array2D,
    K: int,
    *,
    max_iter: int = DEFAULT_MAX_ITER,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    min_clusters: int = DEFAULT_MIN_CLUSTERS,
) -> KMeansResult:
    """
    K-means with k-means++ initialization and empty-cluster repair.

    Each iteration assigns every point to its nearest centroid, stops if the
    assignment did not change, and otherwise moves every non-empty centroid
    to the mean of its points. Empty clusters keep their previous centroid.

    Args:
        X: Input vectors of shape (n_samples, n_features)
        K: Number of clusters; the caller clamps it to n_samples
        max_iter: Maximum number of assignment/update cycles
        rng: Random generator used for seeding. Takes precedence over *seed*.
        seed: Seed for a fresh ``np.random.default_rng`` when *rng* is None
        min_clusters: Target number of non-empty clusters for the repair pass

    Returns:
        KMeansResult with labels of shape (n_samples,) in [0, K)

    Raises:
        ValueError: If K is negative, K > n_samples or max_iter < 1
    """
    X = np.asarray(X, dtype=np.float64)
    n = X.shape[0] if X.ndim > 0 else 0

    if n == 0 or K == 0:
        return KMeansResult(
            labels=np.zeros(0, dtype=int),
            centroids=np.zeros((0, X.shape[1] if X.ndim == 2 else 0)),
        )
    if X.ndim != 2:
        raise ValueError(f"X must be 2-D (n_samples, n_features), got shape {X.shape}")
    if K < 0:
        raise ValueError(f"K must be >= 0, got {K}")
    if K > n:
        raise ValueError(f"K ({K}) cannot exceed number of samples ({n})")
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")

    if rng is None:
        rng = np.random.default_rng(seed)

    centroids = _kmeanspp_init(X, K, rng)
    labels = np.zeros(n, dtype=int)

    n_iter = 0
    converged = False
    for _ in range(max_iter):
        n_iter += 1

        # ---- ASSIGNMENT STEP ----
        new_labels = _assign(X, centroids)
        if np.array_equal(new_labels, labels):
            converged = True
            break
        labels = new_labels

        # ---- CENTROID UPDATE STEP ----
        for j in range(K):
            cluster_idx = np.where(labels == j)[0]
            if len(cluster_idx) == 0:
                continue
            centroids[j] = X[cluster_idx].mean(axis=0)

    logger.debug(
        "k-means finished: K=%d n=%d n_iter=%d converged=%s",
        K, n, n_iter, converged,
    )

    labels = labels.astype(int)
    n_repaired = repair_empty_clusters(labels, K, min_clusters)

    return KMeansResult(
        labels=labels,
        centroids=centroids,
        n_iter=n_iter,
        converged=converged,
        n_repaired=n_repaired,
    )


def kmeans_labels(
    X: Array2D,
    K: int,
    *,
    max_iter: int = DEFAULT_MAX_ITER,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    min_clusters: int = DEFAULT_MIN_CLUSTERS,
) -> np.ndarray:
    """Run ``kmeans`` and return only the cluster assignment per point."""
    return kmeans(
        X, K, max_iter=max_iter, rng=rng, seed=seed, min_clusters=min_clusters
    ).labels
