"""
Service layer for Mail Clusters.

Turns batches of email documents into named clusters on top of the
algorithm core. No I/O happens here; callers bring documents in and
serialize clusters out.
"""

from .clustering_service import EmailClusterer, cluster_emails

__all__ = [
    "EmailClusterer",
    "cluster_emails",
]
