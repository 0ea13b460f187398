from __future__ import annotations

import re
from dataclasses import dataclass, field

from nltk.stem import PorterStemmer


_re_strip_punct = re.compile(r"[,\.!\?:;]")
_re_token = re.compile(r"\w+", flags=re.UNICODE)


def clean_string(text: str) -> str:
    """Drop sentence punctuation and lowercase."""
    return _re_strip_punct.sub("", text).lower()


def simple_tokenize(text: str) -> list[str]:
    """Tokenize without a model; punctuation never becomes a token."""
    return _re_token.findall(text)


@dataclass
class Tokenizer:
    """Default text -> tokens collaborator: clean, split, Porter-stem.

    Stems are memoized on the instance; build a new ``Tokenizer`` for every
    corpus load so the memo is scoped to that corpus.
    """

    stem: bool = True
    _stemmer: PorterStemmer = field(default_factory=PorterStemmer, repr=False)
    _memo: dict[str, str] = field(default_factory=dict, repr=False)

    def __call__(self, text: str) -> list[str]:
        tokens = simple_tokenize(clean_string(text))
        if not self.stem:
            return tokens
        return [self._stem(t) for t in tokens]

    def _stem(self, token: str) -> str:
        stemmed = self._memo.get(token)
        if stemmed is None:
            stemmed = self._stemmer.stem(token)
            self._memo[token] = stemmed
        return stemmed
