"""
Data model shared by the clustering pipeline.

``Document`` is what the message-retrieval side hands in, ``Cluster`` is what
the response side gets back. Both are frozen: the engine only reads documents
and never touches a cluster after building it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


def _text(value: Any) -> str:
    """Coerce a possibly missing text field to a string."""
    if value is None:
        return ""
    return str(value)


def _labels(value: Any) -> Tuple[str, ...]:
    """Coerce a label list to a tuple; a bare string is a single label."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Document:
    """One email as seen by the clustering engine."""

    id: str
    subject: str = ""
    snippet: str = ""
    sender: str = ""
    date: Optional[str] = None
    labels: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "id", _text(self.id))
        object.__setattr__(self, "subject", _text(self.subject))
        object.__setattr__(self, "snippet", _text(self.snippet))
        object.__setattr__(self, "sender", _text(self.sender))
        object.__setattr__(self, "labels", _labels(self.labels))

    @property
    def text(self) -> str:
        """Text used for clustering: subject and snippet."""
        return f"{self.subject} {self.snippet}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """
        Build a document from a provider message dict.

        Accepts the message shape returned by the mail API wrapper
        (``id``, ``subject``, ``snippet``, ``from``, ``date``, ``labels``).
        ``sender`` is accepted in place of ``from``. Missing fields become
        empty values.
        """
        sender = data.get("from") or data.get("sender")
        return cls(
            id=data.get("id", ""),
            subject=data.get("subject"),
            snippet=data.get("snippet"),
            sender=sender,
            date=data.get("date"),
            labels=_labels(data.get("labels")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the provider message shape (``from`` rather than ``sender``)."""
        return {
            "id": self.id,
            "subject": self.subject,
            "snippet": self.snippet,
            "from": self.sender,
            "date": self.date,
            "labels": list(self.labels),
        }


@dataclass(frozen=True)
class Cluster:
    """A named group of documents produced by one clustering call."""

    index: int
    name: str
    documents: Tuple[Document, ...]
    keywords: Tuple[str, ...] = ()

    @property
    def size(self) -> int:
        return len(self.documents)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation used in API responses."""
        return {
            "id": self.index,
            "name": self.name,
            "emails": [doc.to_dict() for doc in self.documents],
            "keywords": list(self.keywords),
        }
