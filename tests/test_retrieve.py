from __future__ import annotations

import numpy as np
import pytest

from qabot.index.retrieve import cosine_scores, cosine_similarity, rank_indices, topk_cosine


def test_cosine_of_vector_with_itself_is_one():
    v = np.array([0.3, 0.0, 1.2])
    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_cosine_is_symmetric():
    a = np.array([1.0, 2.0, 0.0])
    b = np.array([0.5, 0.0, 3.0])
    assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_cosine_takes_absolute_value():
    assert cosine_similarity(np.array([1.0, 0.0]), np.array([-1.0, 0.0])) == pytest.approx(1.0)


def test_cosine_zero_norm_is_zero():
    z = np.zeros(3)
    v = np.array([1.0, 2.0, 3.0])
    assert cosine_similarity(z, v) == 0.0
    assert cosine_similarity(v, z) == 0.0
    assert cosine_similarity(z, z) == 0.0


def test_cosine_rejects_length_mismatch():
    with pytest.raises(ValueError):
        cosine_similarity(np.ones(2), np.ones(3))
    with pytest.raises(ValueError):
        cosine_scores(np.ones(2), np.ones((4, 3)))


def test_batch_scores_match_pairwise():
    q = np.array([1.0, -2.0, 0.5])
    docs = np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0], [-1.0, 2.0, -0.5], [0.2, 0.1, 3.0]])
    scores = cosine_scores(q, docs)
    assert not np.isnan(scores).any()
    assert scores[1] == 0.0
    for i, row in enumerate(docs):
        assert scores[i] == pytest.approx(cosine_similarity(q, row))


def test_empty_vocabulary_scores_zero():
    assert cosine_scores(np.zeros(0), np.zeros((2, 0))).tolist() == [0.0, 0.0]


def test_rank_prefers_later_index_on_ties():
    order = rank_indices(np.array([0.5, 0.9, 0.5, 0.9, 0.1]))
    assert order.tolist() == [3, 1, 2, 0, 4]


def test_topk_limits_and_orders():
    docs = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    results = topk_cosine(np.array([1.0, 0.0]), docs, k=2)
    assert [r.idx for r in results] == [0, 2]
    assert results[0].score >= results[1].score


def test_topk_rejects_bad_k():
    with pytest.raises(ValueError):
        topk_cosine(np.ones(2), np.ones((1, 2)), k=0)
