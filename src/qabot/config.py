"""Run configuration for the chatbot CLIs (optional YAML file + flag overrides)."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from .corpus import SEPARATOR


@dataclass
class ChatConfig:
    corpus: list[str] = field(default_factory=lambda: ["training"])
    separator: str = SEPARATOR
    top_k: int = 1
    stem: bool = True


def config_from_dict(cfg: dict | None) -> ChatConfig:
    cfg = cfg or {}
    known = {f.name for f in fields(ChatConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    corpus = cfg.get("corpus", ["training"])
    if isinstance(corpus, str):
        corpus = [corpus]
    top_k = int(cfg.get("top_k", 1))
    if top_k < 1:
        raise ValueError(f"top_k must be >= 1, got {top_k}")
    separator = str(cfg.get("separator", SEPARATOR))
    if not separator:
        raise ValueError("separator must not be empty")

    return ChatConfig(
        corpus=[str(p) for p in corpus],
        separator=separator,
        top_k=top_k,
        stem=bool(cfg.get("stem", True)),
    )


def load_config(path: Path | None) -> ChatConfig:
    if path is None:
        return ChatConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return config_from_dict(yaml.safe_load(path.read_text(encoding="utf-8")))
