from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from ..base import Token


@dataclass(frozen=True)
class Vocabulary:
    """Distinct corpus tokens in a fixed (sorted) order; position = vector dimension."""

    terms: tuple[Token, ...]
    _positions: dict[Token, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_positions", {t: i for i, t in enumerate(self.terms)})

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.terms)

    def __contains__(self, term: object) -> bool:
        return term in self._positions

    def index(self, term: Token) -> int:
        try:
            return self._positions[term]
        except KeyError:
            raise ValueError(f"{term!r} is not in the vocabulary") from None


def build_vocabulary(token_lists: Iterable[Sequence[Token]]) -> Vocabulary:
    words: set[Token] = set()
    for tokens in token_lists:
        words.update(tokens)
    return Vocabulary(terms=tuple(sorted(words)))


def compute_tf(token: Token, tokens: Sequence[Token]) -> float:
    """count(token) / len(tokens); 0.0 for an empty sequence."""
    if not tokens:
        return 0.0
    return sum(1 for t in tokens if t == token) / len(tokens)


def tf_map(tokens: Sequence[Token]) -> dict[Token, float]:
    """TF for every distinct token of one sequence."""
    if not tokens:
        return {}
    n = len(tokens)
    return {t: c / n for t, c in Counter(tokens).items()}


def compute_idf(token: Token, token_lists: Sequence[Sequence[Token]]) -> float:
    """ln(N / df). A token found in no document has no IDF; 0.0 is returned."""
    df = sum(1 for tokens in token_lists if token in set(tokens))
    if df == 0:
        return 0.0
    return math.log(len(token_lists) / df)


def corpus_idf(token_lists: Sequence[Sequence[Token]]) -> dict[Token, float]:
    """One IDF entry per token occurring anywhere in the corpus."""
    df: Counter[Token] = Counter()
    for tokens in token_lists:
        df.update(set(tokens))
    n_docs = len(token_lists)
    return {t: math.log(n_docs / count) for t, count in df.items()}
