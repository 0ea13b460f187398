from __future__ import annotations

import math

import pytest

from qabot.index.weights import build_vocabulary, compute_idf, compute_tf, corpus_idf, tf_map


def test_tf_is_count_over_length():
    tokens = ["a", "b", "a", "c"]
    assert compute_tf("a", tokens) == 0.5
    assert compute_tf("c", tokens) == 0.25
    assert compute_tf("z", tokens) == 0.0


def test_tf_bounded_for_non_empty_sequences():
    tokens = ["x", "x", "y"]
    for w in ("x", "y", "missing"):
        assert 0.0 <= compute_tf(w, tokens) <= 1.0


def test_tf_empty_sequence_is_zero():
    assert compute_tf("a", []) == 0.0
    assert tf_map([]) == {}


def test_tf_map_matches_compute_tf():
    tokens = ["a", "b", "a", "a"]
    tfs = tf_map(tokens)
    assert set(tfs) == {"a", "b"}
    for w, tf in tfs.items():
        assert tf == pytest.approx(compute_tf(w, tokens))


def test_idf_is_log_docs_over_df():
    lists = [["a", "b"], ["a"], ["c", "c"]]
    assert compute_idf("a", lists) == pytest.approx(math.log(3 / 2))
    assert compute_idf("c", lists) == pytest.approx(math.log(3))


def test_idf_counts_documents_not_occurrences():
    lists = [["a", "a", "a"], ["b"]]
    assert compute_idf("a", lists) == pytest.approx(math.log(2))


def test_idf_of_unknown_token_is_zero():
    assert compute_idf("zzz", [["a"], ["b"]]) == 0.0


def test_corpus_idf_covers_every_token_once():
    lists = [["a", "b"], ["b", "c"], ["b"]]
    idf = corpus_idf(lists)
    assert set(idf) == {"a", "b", "c"}
    for w in idf:
        assert idf[w] == pytest.approx(compute_idf(w, lists))


def test_idf_non_increasing_with_document_frequency():
    lists = [["a", "b", "c"], ["b", "c"], ["c"]]
    idf = corpus_idf(lists)
    assert idf["a"] >= idf["b"] >= idf["c"]
    assert idf["c"] == 0.0


def test_vocabulary_is_distinct_and_deterministic():
    lists = [["world", "hello"], ["bye", "world"]]
    v1 = build_vocabulary(lists)
    v2 = build_vocabulary(list(reversed(lists)))
    assert v1 == v2
    assert len(v1) == 3
    assert set(v1) == {"hello", "world", "bye"}
    assert v1.index(v1.terms[1]) == 1


def test_empty_corpus_vocabulary():
    assert len(build_vocabulary([])) == 0
    assert corpus_idf([]) == {}


def test_vocabulary_lookup_by_position():
    vocab = build_vocabulary([["b", "a"], ["c"]])
    assert [vocab.index(t) for t in vocab] == [0, 1, 2]
    assert "c" in vocab
    assert "zzz" not in vocab
    with pytest.raises(ValueError):
        vocab.index("zzz")


def test_vocabulary_equality_ignores_lookup_table():
    assert build_vocabulary([["a", "b"]]) == build_vocabulary([["b"], ["a"]])
    assert hash(build_vocabulary([["a"]])) == hash(build_vocabulary([["a"]]))
