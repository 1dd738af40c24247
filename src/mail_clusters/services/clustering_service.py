"""
Clustering Service - groups emails into named, keyworded clusters.

Wires the algorithm steps into one call: documents -> TF-IDF vectors ->
k-means assignments -> named clusters sorted by size.

Usage:
    from mail_clusters.services.clustering_service import EmailClusterer

    clusterer = EmailClusterer()
    clusters = clusterer.cluster_emails(documents, num_clusters=3)
    payload = {"clusters": [c.to_dict() for c in clusters]}
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np

from ..algorithms.clustering import kmeans
from ..algorithms.summarize import extract_keywords, name_cluster
from ..algorithms.text import Tokenizer
from ..algorithms.vectorize import vectorize
from ..config import ClusteringConfig, config as default_config
from ..models import Cluster, Document
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

DocumentLike = Union[Document, Mapping[str, Any]]


def _as_document(item: DocumentLike) -> Document:
    if isinstance(item, Document):
        return item
    return Document.from_dict(item)


class EmailClusterer:
    """
    Groups a batch of emails into a small number of thematic clusters.

    Holds configuration only; every call builds its own vocabulary, vectors
    and centroids.
    """

    def __init__(
        self,
        config: Optional[ClusteringConfig] = None,
        tokenizer: Optional[Tokenizer] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the clusterer.

        Args:
            config: Clustering parameters (default: loaded from environment)
            tokenizer: Tokenizer for vectors and keywords (default: English
                stopwords, Porter stemming unless disabled in config)
            rng: Random generator for k-means++ seeding. When None, each call
                creates one from ``config.seed``.
        """
        self.config = config or default_config.clustering
        self.tokenizer = tokenizer or Tokenizer.default(stemming=self.config.stemming)
        self.rng = rng

    def cluster_emails(
        self,
        documents: Sequence[DocumentLike],
        num_clusters: Optional[int] = None,
    ) -> List[Cluster]:
        """
        Cluster *documents* and return the non-empty clusters, largest first.

        Args:
            documents: Document objects or provider message dicts
            num_clusters: Requested number of clusters (default from config).
                Values below 1 are clamped to 1.

        Returns:
            Clusters sorted by descending size; equal sizes keep ascending
            cluster index order
        """
        if not documents:
            return []

        docs = [_as_document(item) for item in documents]

        if num_clusters is None:
            num_clusters = self.config.num_clusters
        if num_clusters < 1:
            logger.warning("num_clusters=%d is below 1, using 1", num_clusters)
            num_clusters = 1

        _, X = vectorize(
            [doc.text for doc in docs],
            tokenizer=self.tokenizer,
            max_features=self.config.max_features,
            weighting=self.config.weighting,
        )

        k = min(num_clusters, len(docs))
        rng = self.rng if self.rng is not None else np.random.default_rng(self.config.seed)
        result = kmeans(
            X,
            k,
            max_iter=self.config.max_iter,
            rng=rng,
            min_clusters=self.config.min_clusters,
        )

        clusters: List[Cluster] = []
        for j in range(k):
            members = tuple(doc for doc, label in zip(docs, result.labels) if label == j)
            if not members:
                continue
            keywords = extract_keywords(
                members, top_n=self.config.top_keywords, tokenizer=self.tokenizer
            )
            clusters.append(
                Cluster(
                    index=j,
                    name=name_cluster(members, keywords),
                    documents=members,
                    keywords=tuple(keywords),
                )
            )

        clusters.sort(key=lambda c: c.size, reverse=True)

        logger.info(
            "Clustered %d emails into %d clusters (k=%d, n_iter=%d, repaired=%d)",
            len(docs), len(clusters), k, result.n_iter, result.n_repaired,
        )
        return clusters


def cluster_emails(
    documents: Sequence[DocumentLike],
    num_clusters: Optional[int] = None,
    *,
    seed: Optional[int] = None,
    clusterer: Optional[EmailClusterer] = None,
) -> List[Cluster]:
    """
    Convenience wrapper around ``EmailClusterer.cluster_emails``.

    Args:
        documents: Document objects or provider message dicts
        num_clusters: Requested number of clusters (default from config)
        seed: Seed for k-means++ when no *clusterer* is given
        clusterer: Preconfigured clusterer to use instead of a default one
    """
    if clusterer is None:
        rng = np.random.default_rng(seed) if seed is not None else None
        clusterer = EmailClusterer(rng=rng)
    return clusterer.cluster_emails(documents, num_clusters)
