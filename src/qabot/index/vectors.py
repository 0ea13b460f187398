from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

import numpy as np

from ..base import Document, IndexEntry, Token, WeightedVector
from .retrieve import RetrievalResult, topk_cosine
from .weights import Vocabulary, build_vocabulary, corpus_idf, tf_map


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def build_vector(
    vocabulary: Vocabulary,
    tokens: Sequence[Token],
    idf: Mapping[Token, float],
) -> WeightedVector:
    """Weighted vector aligned to ``vocabulary``.

    Each component is tf / idf (a division, not the usual product). A term
    missing from the tokens or from ``idf``, or with a zero tf or idf,
    contributes 0.0. Query-only tokens have no dimension and are ignored.
    """
    tfs = tf_map(tokens)
    vec = np.zeros(len(vocabulary), dtype=np.float64)
    for pos, term in enumerate(vocabulary):
        tf = tfs.get(term)
        w = idf.get(term)
        if not tf or not w:
            continue
        vec[pos] = tf / w
    return _frozen(vec)


@dataclass(frozen=True)
class CorpusIndex:
    """Read-only index built once per corpus load."""

    vocabulary: Vocabulary
    idf: Mapping[Token, float]
    entries: tuple[IndexEntry, ...]
    matrix: np.ndarray

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def documents(self) -> list[Document]:
        return [e.document for e in self.entries]

    def vectorize(self, tokens: Sequence[Token]) -> WeightedVector:
        return build_vector(self.vocabulary, tokens, self.idf)

    def search(self, tokens: Sequence[Token], k: int = 5) -> list[RetrievalResult]:
        return topk_cosine(self.vectorize(tokens), self.matrix, k=k)

    def best_match(self, tokens: Sequence[Token]) -> tuple[float, IndexEntry]:
        top = self.search(tokens, k=1)[0]
        return top.score, self.entries[top.idx]


def index_corpus(documents: Sequence[Document]) -> CorpusIndex:
    # vocabulary and idf must see the whole corpus before any vector is built
    token_lists = [d.tokens for d in documents]
    vocabulary = build_vocabulary(token_lists)
    idf = corpus_idf(token_lists)

    entries = tuple(
        IndexEntry(document=d, vector=build_vector(vocabulary, d.tokens, idf))
        for d in documents
    )
    if entries:
        matrix = np.vstack([e.vector for e in entries])
    else:
        matrix = np.zeros((0, len(vocabulary)), dtype=np.float64)
    return CorpusIndex(
        vocabulary=vocabulary,
        idf=MappingProxyType(idf),
        entries=entries,
        matrix=_frozen(matrix),
    )
