"""
Tests for the Document and Cluster data model.
"""

import dataclasses

import pytest

from mail_clusters.models import Cluster, Document


def test_document_defaults():
    doc = Document(id="1")
    assert doc.subject == ""
    assert doc.snippet == ""
    assert doc.sender == ""
    assert doc.date is None
    assert doc.labels == ()


def test_document_none_fields_become_empty():
    doc = Document(id="1", subject=None, snippet=None, sender=None)
    assert doc.text == " "
    assert doc.sender == ""


def test_document_text():
    doc = Document(id="1", subject="Invoice due", snippet="please pay")
    assert doc.text == "Invoice due please pay"


def test_document_is_frozen():
    doc = Document(id="1", subject="Hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        doc.subject = "changed"


def test_document_from_dict_provider_shape():
    doc = Document.from_dict(
        {
            "id": "abc",
            "subject": "Invoice",
            "snippet": "pay now",
            "from": "Billing <billing@shop.com>",
            "date": "Mon, 1 Jan 2024 10:00:00 +0000",
            "labels": ["INBOX", "UNREAD"],
        }
    )
    assert doc.id == "abc"
    assert doc.sender == "Billing <billing@shop.com>"
    assert doc.labels == ("INBOX", "UNREAD")


def test_document_from_dict_missing_fields():
    doc = Document.from_dict({"id": 7, "sender": "x@y.com"})
    assert doc.id == "7"
    assert doc.subject == ""
    assert doc.sender == "x@y.com"
    assert doc.labels == ()


def test_document_to_dict_uses_from_key():
    doc = Document(id="1", sender="a@b.com", labels=("INBOX",))
    data = doc.to_dict()
    assert data["from"] == "a@b.com"
    assert data["labels"] == ["INBOX"]
    assert Document.from_dict(data) == doc


def test_cluster_size_and_dict():
    docs = (Document(id="1"), Document(id="2"))
    cluster = Cluster(index=2, name="Invoice & Payment", documents=docs, keywords=("invoice",))
    assert cluster.size == 2
    data = cluster.to_dict()
    assert data["id"] == 2
    assert data["name"] == "Invoice & Payment"
    assert [e["id"] for e in data["emails"]] == ["1", "2"]
    assert data["keywords"] == ["invoice"]


def test_document_string_label_is_one_label():
    assert Document.from_dict({"id": "1", "labels": "INBOX"}).labels == ("INBOX",)
    assert Document(id="1", labels="INBOX").labels == ("INBOX",)


def test_document_from_dict_empty_from_uses_sender():
    doc = Document.from_dict({"id": "1", "from": "", "sender": "x@y.com"})
    assert doc.sender == "x@y.com"
