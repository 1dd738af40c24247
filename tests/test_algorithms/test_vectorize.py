"""
Tests for TF-IDF vectorization.
"""

import math

import numpy as np
import pytest

from mail_clusters.algorithms.text import Tokenizer
from mail_clusters.algorithms.vectorize import build_vocabulary, vectorize

PLAIN = Tokenizer(stemmer=None)


def test_vectorize_shapes():
    docs = ["invoice payment due", "meeting agenda", ""]
    vocab, X = vectorize(docs, tokenizer=PLAIN)
    assert X.shape == (3, len(vocab))
    assert X.dtype == np.float64
    assert vocab == ("agenda", "due", "invoice", "meeting", "payment")


def test_vectorize_tfidf_values():
    """tf is count / token length, idf is ln(n / df)."""
    docs = ["invoice invoice payment", "payment meeting"]
    vocab, X = vectorize(docs, tokenizer=PLAIN)
    col = {term: j for j, term in enumerate(vocab)}

    # "payment" appears in both documents -> idf 0
    assert X[0, col["payment"]] == 0.0
    assert X[1, col["payment"]] == 0.0
    np.testing.assert_allclose(X[0, col["invoice"]], (2 / 3) * math.log(2))
    np.testing.assert_allclose(X[1, col["meeting"]], (1 / 2) * math.log(2))
    assert X[0, col["meeting"]] == 0.0


def test_empty_document_is_zero_vector():
    vocab, X = vectorize(["invoice payment", "the and of", ""], tokenizer=PLAIN)
    assert len(vocab) == 2
    np.testing.assert_array_equal(X[1], np.zeros(2))
    np.testing.assert_array_equal(X[2], np.zeros(2))


def test_vectorize_no_terms_at_all():
    vocab, X = vectorize(["", "the a an"], tokenizer=PLAIN)
    assert vocab == ()
    assert X.shape == (2, 0)


def test_vectorize_empty_corpus():
    vocab, X = vectorize([], tokenizer=PLAIN)
    assert vocab == ()
    assert X.shape == (0, 0)


def test_vectorize_is_deterministic():
    docs = ["Invoice due payment please pay", "Meeting agenda project timeline"]
    vocab_a, X_a = vectorize(docs)
    vocab_b, X_b = vectorize(docs)
    assert vocab_a == vocab_b
    np.testing.assert_array_equal(X_a, X_b)


def test_identical_documents_have_zero_weights():
    """Terms present in every document carry no idf weight."""
    _, X = vectorize(["weekly digest news"] * 4, tokenizer=PLAIN)
    assert not X.any()


def test_tf_weighting_rows_sum_to_one():
    docs = ["invoice invoice payment", "meeting agenda", ""]
    _, X = vectorize(docs, tokenizer=PLAIN, weighting="tf")
    np.testing.assert_allclose(X.sum(axis=1), [1.0, 1.0, 0.0])


def test_vocabulary_cap_keeps_most_frequent():
    tokenized = [["invoice", "invoice", "payment"], ["invoice", "meeting", "agenda"]]
    vocab = build_vocabulary(tokenized, max_features=2)
    # invoice (3) first, then the lexically smallest of the count-1 terms
    assert vocab == ("agenda", "invoice")


def test_vocabulary_cap_larger_than_vocabulary():
    tokenized = [["invoice", "payment"]]
    assert build_vocabulary(tokenized, max_features=100) == ("invoice", "payment")


def test_vectorize_with_cap_limits_width():
    docs = ["alpha beta gamma delta", "alpha beta", "alpha"]
    vocab, X = vectorize(docs, tokenizer=PLAIN, max_features=2)
    assert vocab == ("alpha", "beta")
    assert X.shape == (3, 2)


def test_vectorize_rejects_unknown_weighting():
    with pytest.raises(ValueError, match="weighting"):
        vectorize(["invoice"], weighting="bm25")


def test_vectorize_rejects_bad_cap():
    with pytest.raises(ValueError, match="max_features"):
        vectorize(["invoice"], max_features=0)
