"""Vocabulary, tf/idf weighting, vector building and cosine ranking."""
from __future__ import annotations

from .retrieve import (
    NoMatchError,
    RetrievalResult,
    cosine_scores,
    cosine_similarity,
    find_best_match,
    rank_indices,
    topk_cosine,
)
from .vectors import CorpusIndex, build_vector, index_corpus
from .weights import Vocabulary, build_vocabulary, compute_idf, compute_tf, corpus_idf, tf_map

__all__ = [
    "CorpusIndex",
    "NoMatchError",
    "RetrievalResult",
    "Vocabulary",
    "build_vector",
    "build_vocabulary",
    "compute_idf",
    "compute_tf",
    "corpus_idf",
    "cosine_scores",
    "cosine_similarity",
    "find_best_match",
    "index_corpus",
    "rank_indices",
    "tf_map",
]
