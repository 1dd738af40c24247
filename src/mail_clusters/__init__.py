"""
Mail Clusters - Core Package

Unsupervised grouping of emails by subject and snippet text.

This package provides:
- Text preprocessing and TF-IDF vectorization
- K-means clustering with k-means++ seeding
- Keyword extraction and cluster naming
"""

__version__ = "0.1.0"

from .models import Cluster, Document
from .services import EmailClusterer, cluster_emails

from . import algorithms
from . import services
from . import utils

__all__ = [
    "Cluster",
    "Document",
    "EmailClusterer",
    "cluster_emails",
    "algorithms",
    "services",
    "utils",
]
