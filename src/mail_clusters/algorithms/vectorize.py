"""
TF-IDF vectorization over a per-call vocabulary.

The vocabulary is built once from the whole corpus and fixes the width and
column order of every feature vector returned by the same call.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .text import Tokenizer, default_tokenizer
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Vocabulary = Tuple[str, ...]


def build_vocabulary(
    tokenized: Sequence[Sequence[str]], max_features: Optional[int] = None
) -> Vocabulary:
    """
    Collect the distinct terms of a tokenized corpus.

    Args:
        tokenized: One token list per document
        max_features: Keep only the most frequent terms (corpus-wide count,
            ties broken lexically). None keeps every term.

    Returns:
        Terms in lexical order
    """
    counts: Counter = Counter()
    for tokens in tokenized:
        counts.update(tokens)

    if max_features is None or len(counts) <= max_features:
        return tuple(sorted(counts))

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return tuple(sorted(term for term, _ in ranked[:max_features]))


def vectorize(
    documents: Sequence[str],
    *,
    tokenizer: Optional[Tokenizer] = None,
    max_features: Optional[int] = None,
    weighting: str = "tfidf",
) -> Tuple[Vocabulary, np.ndarray]:
    """
    Convert documents into TF-IDF weight vectors.

    tf(t, d) is the count of t in d divided by the token length of d (0 for
    documents without tokens), idf(t) = ln(n_documents / df(t)) and the
    weight is their product. With ``weighting="tf"`` the idf factor is
    dropped, leaving L1-normalized term frequencies.

    Args:
        documents: Raw document texts
        tokenizer: Tokenizer to use (default: English stopwords + Porter)
        max_features: Optional vocabulary cap, see ``build_vocabulary``
        weighting: "tfidf" (default) or "tf"

    Returns:
        Tuple of:
        - vocabulary: Terms, one per column
        - X: float64 array of shape (n_documents, len(vocabulary))

    Raises:
        ValueError: If weighting is unknown or max_features < 1
    """
    if weighting not in ("tfidf", "tf"):
        raise ValueError(f"weighting must be 'tfidf' or 'tf', got {weighting!r}")
    if max_features is not None and max_features < 1:
        raise ValueError(f"max_features must be >= 1 or None, got {max_features}")

    tokenizer = tokenizer or default_tokenizer()
    tokenized: List[List[str]] = [tokenizer.tokenize(doc) for doc in documents]
    vocabulary = build_vocabulary(tokenized, max_features)
    index = {term: j for j, term in enumerate(vocabulary)}

    n = len(tokenized)
    X = np.zeros((n, len(vocabulary)), dtype=np.float64)
    for i, tokens in enumerate(tokenized):
        if not tokens:
            continue
        for term, count in Counter(tokens).items():
            j = index.get(term)
            if j is not None:
                X[i, j] = count / len(tokens)

    if weighting == "tf":
        # Out-of-vocabulary tokens drop out, so renormalize each row to sum to 1
        sums = X.sum(axis=1, keepdims=True)
        X = np.divide(X, sums, out=np.zeros_like(X), where=sums > 0)
    elif len(vocabulary) > 0:
        # Every vocabulary term occurs somewhere, so df >= 1
        df = np.count_nonzero(X, axis=0)
        idf = np.log(n / df)
        X = X * idf[None, :]

    logger.debug(
        "Vectorized %d documents over %d terms (%s)", n, len(vocabulary), weighting
    )
    return vocabulary, X
