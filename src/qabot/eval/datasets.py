from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass
class EvalQuestion:
    id: str
    question: str
    expected_answer: str


def load_jsonl(path: Path) -> list[dict]:
    items: list[dict] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            items.append(json.loads(line))
    return items


def load_eval_questions(path: Path) -> list[EvalQuestion]:
    """Each JSONL line: {"id", "question", "expected_answer"}; ids default to the line position."""
    out: list[EvalQuestion] = []
    for i, item in enumerate(load_jsonl(path), start=1):
        out.append(
            EvalQuestion(
                id=str(item.get("id", i)),
                question=str(item["question"]),
                expected_answer=str(item["expected_answer"]),
            )
        )
    return out
