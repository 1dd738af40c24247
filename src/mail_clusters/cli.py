#!/usr/bin/env python3
"""
Cluster a JSON file of email messages from the command line.

The input is either a list of message dicts or an object with an "emails"
list, in the shape the mail API wrapper produces (id, subject, snippet,
from, date, labels). The output is {"clusters": [...]}.

Usage:
    mail-clusters messages.json
    mail-clusters messages.json -k 4 --seed 7 --output clusters.json
    cat messages.json | mail-clusters -
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import Any, List, Optional, Sequence

from .config import WEIGHTINGS, config
from .models import Document
from .services.clustering_service import EmailClusterer
from .utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def load_documents(path: str) -> List[Document]:
    """
    Read documents from *path* ("-" for stdin).

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the content is not JSON
        ValueError: If the JSON does not hold a list of message objects
    """
    if path == "-":
        data: Any = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)

    if isinstance(data, dict):
        data = data.get("emails")
    if not isinstance(data, list):
        raise ValueError("expected a list of messages or an object with an 'emails' list")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"message {i} is not an object")
    return [Document.from_dict(item) for item in data]


def build_parser() -> argparse.ArgumentParser:
    cfg = config.clustering
    parser = argparse.ArgumentParser(
        prog="mail-clusters",
        description="Group emails into named clusters by subject and snippet.",
    )
    parser.add_argument("input", help="JSON file of messages, or - for stdin")
    parser.add_argument(
        "-k", "--num-clusters", type=int, default=cfg.num_clusters,
        help=f"Number of clusters (default: {cfg.num_clusters})",
    )
    parser.add_argument("--seed", type=int, default=cfg.seed, help="Seed for k-means++")
    parser.add_argument(
        "--max-iter", type=int, default=cfg.max_iter,
        help=f"Maximum k-means iterations (default: {cfg.max_iter})",
    )
    parser.add_argument(
        "--max-features", type=int, default=cfg.max_features,
        help="Cap the vocabulary to the N most frequent terms",
    )
    parser.add_argument(
        "--weighting", choices=WEIGHTINGS, default=cfg.weighting,
        help=f"Term weighting (default: {cfg.weighting})",
    )
    parser.add_argument(
        "--no-stemming", action="store_true", default=not cfg.stemming,
        help="Disable Porter stemming",
    )
    parser.add_argument("--output", "-o", default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        cluster_config = replace(
            config.clustering,
            num_clusters=args.num_clusters,
            seed=args.seed,
            max_iter=args.max_iter,
            max_features=args.max_features,
            weighting=args.weighting,
            stemming=not args.no_stemming,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        documents = load_documents(args.input)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error("Could not load messages from %s: %s", args.input, e)
        return 1

    clusters = EmailClusterer(config=cluster_config).cluster_emails(documents)
    payload = json.dumps(
        {"clusters": [cluster.to_dict() for cluster in clusters]}, indent=2
    )

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as fh:
                fh.write(payload + "\n")
        except OSError as e:
            logger.error("Could not write clusters to %s: %s", args.output, e)
            return 1
        logger.info("Wrote %d clusters to %s", len(clusters), args.output)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
