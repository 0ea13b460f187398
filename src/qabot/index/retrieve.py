from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as _sk_cosine

from ..base import IndexEntry, WeightedVector


class NoMatchError(LookupError):
    """Raised when a search runs against an empty index."""


@dataclass
class RetrievalResult:
    idx: int
    score: float


def _as_2d(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    if x.ndim == 1:
        return x.reshape(1, -1)
    return x


def cosine_similarity(v1: WeightedVector, v2: WeightedVector) -> float:
    """|v1 . v2| / (|v1| * |v2|), or 0.0 when either norm is zero."""
    a = np.asarray(v1, dtype=np.float64)
    b = np.asarray(v2, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Vector length mismatch: {a.shape[0]} != {b.shape[0]}")
    denom = float(np.linalg.norm(a)) * float(np.linalg.norm(b))
    if denom == 0.0:
        return 0.0
    return abs(float(np.dot(a, b))) / denom


def cosine_scores(query_vec: WeightedVector, doc_matrix: np.ndarray) -> np.ndarray:
    """Absolute cosine of the query against every row of ``doc_matrix``.

    Zero-norm rows, a zero-norm query and an empty vocabulary all score 0.0.
    """
    q = _as_2d(query_vec)
    docs = _as_2d(doc_matrix)
    if q.shape[1] != docs.shape[1]:
        raise ValueError(f"Vector length mismatch: {q.shape[1]} != {docs.shape[1]}")
    scores = np.zeros(docs.shape[0], dtype=np.float64)
    if docs.shape[0] == 0 or docs.shape[1] == 0 or not q.any():
        return scores
    live = docs.any(axis=1)
    if live.any():
        scores[live] = np.abs(_sk_cosine(q, docs[live])[0])
    return scores


def rank_indices(scores: np.ndarray) -> np.ndarray:
    """Indices by score descending; on equal scores the later index comes first."""
    n = len(scores)
    rev = np.asarray(scores)[::-1]
    order = np.argsort(-rev, kind="stable")
    return (n - 1) - order


def topk_cosine(query_vec: WeightedVector, doc_matrix: np.ndarray, k: int = 5) -> list[RetrievalResult]:
    """Return the top-k rows by absolute cosine similarity."""
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    docs = _as_2d(doc_matrix)
    if docs.shape[0] == 0:
        raise NoMatchError("Cannot search an empty index")
    sims = cosine_scores(query_vec, docs)
    top_idx = rank_indices(sims)[:k]
    return [RetrievalResult(idx=int(i), score=float(sims[i])) for i in top_idx]


def find_best_match(query_vec: WeightedVector, entries: Sequence[IndexEntry]) -> tuple[float, IndexEntry]:
    """Best-scoring entry; ties go to the entry with the greater position."""
    if not entries:
        raise NoMatchError("Cannot search an empty index")
    matrix = np.vstack([e.vector for e in entries])
    top = topk_cosine(query_vec, matrix, k=1)[0]
    return top.score, entries[top.idx]
