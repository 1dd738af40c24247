"""
Keyword extraction and display names for clusters.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Optional, Sequence

from .text import Tokenizer, default_tokenizer
from ..models import Document

DEFAULT_TOP_KEYWORDS = 3
MIXED_NAME = "Mixed Messages"


def extract_keywords(
    documents: Sequence[Document],
    top_n: int = DEFAULT_TOP_KEYWORDS,
    tokenizer: Optional[Tokenizer] = None,
) -> List[str]:
    """
    Most frequent terms across the subjects and snippets of *documents*.

    Terms are ranked by their stemmed form, but each is reported as the word
    that produced it most often ("invoices", "invoice" -> "invoice"). Ties,
    both in ranking and between words, are broken by lexical order.
    """
    if top_n <= 0:
        return []
    tokenizer = tokenizer or default_tokenizer()
    corpus = " ".join(doc.text for doc in documents)

    counts: Counter = Counter()
    words: Dict[str, Counter] = defaultdict(Counter)
    for term, word in tokenizer.tokenize_with_words(corpus):
        counts[term] += 1
        words[term][word] += 1

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [_display_word(words[term]) for term, _ in ranked[:top_n]]


def _display_word(word_counts: Counter) -> str:
    return min(word_counts.items(), key=lambda item: (-item[1], item[0]))[0]


def sender_name(sender: Optional[str]) -> str:
    """
    Short sender name: the text before ``@``, cut at any ``<``.

    ``"alerts@service.com"`` gives ``"alerts"`` and
    ``"Jane Doe <jane@example.com>"`` gives ``"Jane Doe"``.
    """
    if not sender:
        return ""
    return sender.split("@")[0].split("<")[0].strip()


def name_cluster(documents: Sequence[Document], keywords: Sequence[str]) -> str:
    """
    Display name for a cluster.

    Uses the top two keywords ("Invoice & Payment") when there are any,
    otherwise falls back to who sent the messages.
    """
    if keywords:
        return " & ".join(word[:1].upper() + word[1:] for word in keywords[:2])

    unique_senders: List[str] = []
    for doc in documents:
        name = sender_name(doc.sender)
        if name and name not in unique_senders:
            unique_senders.append(name)

    if len(unique_senders) == 1:
        return f"{unique_senders[0]} Messages"
    if 2 <= len(unique_senders) <= 3:
        return f"{', '.join(unique_senders[:2])} Messages"
    return MIXED_NAME
