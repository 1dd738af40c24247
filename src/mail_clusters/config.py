"""
Configuration management for Mail Clusters.

Loads configuration from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

Usage:
    from mail_clusters.config import config

    k = config.clustering.num_clusters
    seed = config.clustering.seed
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

ENV_PREFIX = "MAIL_CLUSTERS_"

WEIGHTINGS = ("tfidf", "tf")


def _env(name: str) -> Optional[str]:
    """Return a prefixed environment variable, treating blank values as unset."""
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = _env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(
            f"{ENV_PREFIX}{name} must be an integer, got {value!r}"
        ) from e


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {value!r}")


@dataclass
class ClusteringConfig:
    """Parameters for one clustering call."""

    num_clusters: int = 3
    max_iter: int = 30
    top_keywords: int = 3
    min_clusters: int = 3
    max_features: Optional[int] = None  # None keeps the full vocabulary
    weighting: str = "tfidf"  # "tfidf" or "tf"
    stemming: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate values; num_clusters below 1 is clamped rather than rejected."""
        if self.num_clusters < 1:
            self.num_clusters = 1
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.top_keywords < 0:
            raise ValueError(f"top_keywords must be >= 0, got {self.top_keywords}")
        if self.min_clusters < 0:
            raise ValueError(f"min_clusters must be >= 0, got {self.min_clusters}")
        if self.max_features is not None and self.max_features < 1:
            raise ValueError(
                f"max_features must be >= 1 or None, got {self.max_features}"
            )
        if self.weighting not in WEIGHTINGS:
            raise ValueError(
                f"weighting must be one of {WEIGHTINGS}, got {self.weighting!r}"
            )

    @classmethod
    def from_env(cls) -> "ClusteringConfig":
        """Build a config from MAIL_CLUSTERS_* environment variables."""
        defaults = cls()
        return cls(
            num_clusters=_env_int("NUM_CLUSTERS", defaults.num_clusters),
            max_iter=_env_int("MAX_ITER", defaults.max_iter),
            top_keywords=_env_int("TOP_KEYWORDS", defaults.top_keywords),
            min_clusters=_env_int("MIN_CLUSTERS", defaults.min_clusters),
            max_features=_env_int("MAX_FEATURES", defaults.max_features),
            weighting=(_env("WEIGHTING") or defaults.weighting).lower(),
            stemming=_env_bool("STEMMING", defaults.stemming),
            seed=_env_int("SEED", defaults.seed),
        )


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    3. In a container/deployment environment
    """

    def __init__(self):
        """Load configuration from environment."""
        self.clustering = ClusteringConfig.from_env()
        self.log_level = (_env("LOG_LEVEL") or "INFO").upper()


# Global config instance
config = Config()
