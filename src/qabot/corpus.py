from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from .base import Document, TokenizeFn

SEPARATOR = "\r\n"


def split_pairs(text: str, separator: str = SEPARATOR) -> list[tuple[str, str]]:
    """Pair consecutive lines as (question, answer).

    Trailing empty lines are ignored; an odd trailing line has no answer
    and is dropped silently.
    """
    lines = text.split(separator)
    while lines and lines[-1] == "":
        lines.pop()
    return [(lines[i], lines[i + 1]) for i in range(0, len(lines) - 1, 2)]


def prepare_text(text: str, tokenize: TokenizeFn, separator: str = SEPARATOR) -> list[Document]:
    return [
        Document(question=q, answer=a, tokens=tuple(tokenize(q)))
        for q, a in split_pairs(text, separator)
    ]


def iter_corpus_files(paths: Iterable[Path | str]) -> Iterator[Path]:
    """Yield every corpus file; directories are walked recursively in sorted order."""
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(f"Corpus path not found: {path}")
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*") if p.is_file())
        else:
            yield path


def read_texts(
    paths: Iterable[Path | str],
    tokenize: TokenizeFn,
    separator: str = SEPARATOR,
) -> list[Document]:
    documents: list[Document] = []
    for path in iter_corpus_files(paths):
        # newline="" keeps CRLF intact for the pair separator
        with path.open("r", encoding="utf-8", newline="") as f:
            documents.extend(prepare_text(f.read(), tokenize, separator))
    return documents
