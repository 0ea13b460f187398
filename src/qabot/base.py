from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

Token = str
WeightedVector = np.ndarray
TokenizeFn = Callable[[str], list[Token]]


@dataclass(frozen=True)
class Document:
    question: str
    answer: str
    tokens: tuple[Token, ...]


@dataclass(frozen=True)
class IndexEntry:
    document: Document
    vector: WeightedVector
