"""
Text preprocessing: tokenization, stopword removal and stemming.

The stopword set and the stemmer are owned by a ``Tokenizer`` instance so a
different word list, or no stemming at all, can be swapped in without
touching the vectorizer or the clusterer.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Protocol, Tuple

from nltk.stem import PorterStemmer

WORD_PATTERN = re.compile(r"[a-z]+")

MIN_TOKEN_LENGTH = 3

# Stateless; shared by every tokenizer that stems
PORTER_STEMMER = PorterStemmer()

ENGLISH_STOPWORDS = frozenset(
    {
        # articles and determiners
        "a", "an", "the", "this", "that", "these", "those", "each", "every",
        "all", "both", "few", "more", "most", "other", "some", "such", "any",
        "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very",
        # pronouns
        "i", "me", "my", "mine", "myself", "you", "your", "yours", "yourself",
        "yourselves", "he", "him", "his", "himself", "she", "her", "hers",
        "herself", "it", "its", "itself", "we", "us", "our", "ours",
        "ourselves", "they", "them", "their", "theirs", "themselves", "what",
        "which", "who", "whom", "whose",
        # auxiliary and modal verbs
        "is", "am", "are", "was", "were", "be", "been", "being", "have", "has",
        "had", "having", "do", "does", "did", "doing", "will", "would",
        "could", "should", "may", "might", "must", "can", "shall",
        # conjunctions and adverbs
        "and", "but", "or", "because", "as", "until", "while", "if", "then",
        "once", "when", "where", "why", "how", "just", "again", "further",
        "here", "there",
        # prepositions
        "at", "by", "for", "with", "about", "against", "between", "into",
        "through", "during", "before", "after", "above", "below", "to", "from",
        "up", "down", "in", "out", "on", "off", "over", "under", "of",
    }
)


class Stemmer(Protocol):
    def stem(self, word: str) -> str:
        ...


class Tokenizer:
    """
    Turn raw text into a list of normalized terms.

    Steps: lowercase, split on runs of letters, drop stopwords, stem, drop
    terms shorter than ``min_length`` characters after stemming.

    Args:
        stopwords: Words removed before stemming
        stemmer: Object with a ``stem(word)`` method, or None to skip stemming
        min_length: Shortest term kept (after stemming)
    """

    def __init__(
        self,
        stopwords: Iterable[str] = ENGLISH_STOPWORDS,
        stemmer: Optional[Stemmer] = PORTER_STEMMER,
        min_length: int = MIN_TOKEN_LENGTH,
    ):
        self.stopwords = frozenset(stopwords)
        self.stemmer = stemmer
        self.min_length = min_length

    @classmethod
    def default(cls, stemming: bool = True) -> "Tokenizer":
        """English stopwords with an optional Porter stemmer."""
        return cls(stemmer=PORTER_STEMMER if stemming else None)

    def tokenize_with_words(self, text: Optional[str]) -> List[Tuple[str, str]]:
        """
        Like ``tokenize`` but keep the lowercased word each term came from.

        Returns:
            (term, word) pairs in text order
        """
        if not text:
            return []
        pairs = []
        for word in WORD_PATTERN.findall(text.lower()):
            if word in self.stopwords:
                continue
            term = self.stemmer.stem(word) if self.stemmer is not None else word
            if len(term) >= self.min_length:
                pairs.append((term, word))
        return pairs

    def tokenize(self, text: Optional[str]) -> List[str]:
        return [term for term, _ in self.tokenize_with_words(text)]


_default_tokenizer: Optional[Tokenizer] = None


def default_tokenizer() -> Tokenizer:
    """Shared stemming tokenizer; it holds no per-call state."""
    global _default_tokenizer
    if _default_tokenizer is None:
        _default_tokenizer = Tokenizer.default()
    return _default_tokenizer


def tokenize(text: Optional[str], tokenizer: Optional[Tokenizer] = None) -> List[str]:
    """Tokenize *text* with *tokenizer* (default: English stopwords + Porter)."""
    return (tokenizer or default_tokenizer()).tokenize(text)
