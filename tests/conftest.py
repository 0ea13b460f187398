from __future__ import annotations

from pathlib import Path

import pytest

from qabot.base import Document
from qabot.clean import Tokenizer


def write_corpus(path: Path, lines: list[str], trailing: bool = True) -> Path:
    text = "\r\n".join(lines) + ("\r\n" if trailing else "")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def make_doc(question: str, answer: str = "") -> Document:
    return Document(question=question, answer=answer or question, tokens=tuple(question.split()))


@pytest.fixture
def tokenizer() -> Tokenizer:
    return Tokenizer()


@pytest.fixture
def hello_bye_docs() -> list[Document]:
    return [
        Document(question="hello world", answer="hi there", tokens=("hello", "world")),
        Document(question="bye world", answer="see you later", tokens=("bye", "world")),
    ]
