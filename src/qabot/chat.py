"""Interactive question/answer loop.

    qabot-chat --corpus data/training

Each input line is a query; the literal ``quit`` ends the session.
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, TextIO

import yaml

from .base import TokenizeFn
from .clean import Tokenizer
from .config import ChatConfig, load_config
from .corpus import read_texts
from .index import CorpusIndex, NoMatchError, index_corpus

QUIT = "quit"
EMPTY_CORPUS_MESSAGE = "No answer available: the corpus is empty."


@dataclass
class Answer:
    query: str
    text: str
    score: float


def answer(index: CorpusIndex, tokenize: TokenizeFn, query: str, k: int = 1) -> list[Answer]:
    """Best answer first, followed by up to k-1 runners-up."""
    results = index.search(tokenize(query), k=k)
    return [Answer(query=query, text=index.entries[r.idx].document.answer, score=r.score) for r in results]


def format_answer(ans: Answer) -> list[str]:
    return [f">> {ans.query}", ans.text, f"[Confidence: {ans.score * 100}]"]


def chat_loop(
    index: CorpusIndex,
    tokenize: TokenizeFn,
    lines: Iterable[str],
    out: TextIO,
    top_k: int = 1,
) -> int:
    """Answer lines until ``quit`` or end of input; returns the number of queries answered."""
    answered = 0
    for raw in lines:
        query = raw.rstrip("\r\n")
        if query == QUIT:
            break
        try:
            answers = answer(index, tokenize, query, k=top_k)
        except NoMatchError:
            print(EMPTY_CORPUS_MESSAGE, file=out)
            continue
        best, *others = answers
        for line in format_answer(best):
            print(line, file=out)
        for i, alt in enumerate(others, start=2):
            print(f"  #{i} [{alt.score * 100:.2f}] {alt.text}", file=out)
        out.flush()
        answered += 1
    return answered


def build_index(cfg: ChatConfig) -> tuple[CorpusIndex, Tokenizer]:
    # fresh tokenizer per load so the stem memo is scoped to this corpus
    tokenizer = Tokenizer(stem=cfg.stem)
    documents = read_texts(cfg.corpus, tokenizer, separator=cfg.separator)
    return index_corpus(documents), tokenizer


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Answer questions from a Q/A corpus by cosine similarity")
    p.add_argument("--config", type=Path, default=None, help="Optional YAML config")
    p.add_argument(
        "--corpus",
        nargs="+",
        default=None,
        help="Corpus files or directories (default: config value, else ./training)",
    )
    p.add_argument("--top-k", type=int, default=None, help="Also list runner-up answers")
    p.add_argument("--verbose", action="store_true", help="Print index statistics to stderr")
    args = p.parse_args(argv)

    try:
        cfg = load_config(args.config)
        if args.corpus:
            cfg = replace(cfg, corpus=list(args.corpus))
        if args.top_k is not None:
            if args.top_k < 1:
                raise ValueError(f"--top-k must be >= 1, got {args.top_k}")
            cfg = replace(cfg, top_k=args.top_k)
        index, tokenizer = build_index(cfg)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        p.error(str(exc))

    if args.verbose:
        print(
            f"Indexed {len(index)} documents | vocabulary: {len(index.vocabulary)} terms",
            file=sys.stderr,
        )

    chat_loop(index, tokenizer, sys.stdin, sys.stdout, top_k=cfg.top_k)


if __name__ == "__main__":
    main()
