"""
Algorithm Core Library - tokenization, TF-IDF and k-means clustering.

This module provides the pure computation behind email clustering, kept
separate from the service layer so each step can be reused and tested alone.
"""

from .text import ENGLISH_STOPWORDS, Tokenizer, default_tokenizer, tokenize
from .vectorize import build_vocabulary, vectorize
from .clustering import (
    KMeansResult,
    euclidean_distance,
    kmeans,
    kmeans_labels,
    repair_empty_clusters,
)
from .summarize import extract_keywords, name_cluster, sender_name

__all__ = [
    # Text preprocessing
    "ENGLISH_STOPWORDS",
    "Tokenizer",
    "default_tokenizer",
    "tokenize",
    # Vectorization
    "build_vocabulary",
    "vectorize",
    # Clustering
    "KMeansResult",
    "euclidean_distance",
    "kmeans",
    "kmeans_labels",
    "repair_empty_clusters",
    # Summaries
    "extract_keywords",
    "name_cluster",
    "sender_name",
]
