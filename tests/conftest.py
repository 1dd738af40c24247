"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import numpy as np
import pytest

from mail_clusters.config import ClusteringConfig
from mail_clusters.models import Document


@pytest.fixture
def rng():
    """Seeded generator so k-means++ seeding is reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def clustering_config():
    """Explicit config that does not depend on the test environment."""
    return ClusteringConfig(
        num_clusters=3,
        max_iter=30,
        top_keywords=3,
        min_clusters=3,
        max_features=None,
        weighting="tfidf",
        stemming=True,
        seed=0,
    )


@pytest.fixture
def topical_documents():
    """
    Nine emails in three topics, three identical texts per topic.

    Topics share no vocabulary, and identical texts within a topic make the
    k-means++ seeding pick one centroid per topic whatever the seed.
    """
    topics = [
        ("bill", "Invoice overdue payment", "please pay the overdue invoice balance"),
        ("meet", "Meeting agenda project", "discuss the project timeline agenda"),
        ("ship", "Package shipped tracking", "your package shipment tracking number"),
    ]
    docs = []
    for topic, subject, snippet in topics:
        for i in range(3):
            docs.append(
                Document(
                    id=f"{topic}-{i}",
                    subject=subject,
                    snippet=snippet,
                    sender=f"{topic}@example.com",
                    date="2024-01-01",
                    labels=("INBOX",),
                )
            )
    return docs
