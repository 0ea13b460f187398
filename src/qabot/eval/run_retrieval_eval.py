from __future__ import annotations

import argparse
import csv
import json
from dataclasses import asdict, replace
from datetime import datetime
from pathlib import Path

import yaml

from ..chat import build_index
from ..config import load_config
from .datasets import load_eval_questions
from .metrics import compute_metrics


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Evaluate Q/A retrieval accuracy on a held-out question set")
    p.add_argument("--config", type=Path, default=None, help="Optional YAML config")
    p.add_argument("--corpus", nargs="+", default=None, help="Corpus files or directories")
    p.add_argument("--questions", required=True, help="JSONL with question/expected_answer")
    p.add_argument("--k", type=int, default=5, help="Top-k to retrieve (default 5)")
    p.add_argument(
        "--outdir",
        default="results/runs",
        help="Output directory for run artifacts (default results/runs)",
    )
    p.add_argument(
        "--summary-dir",
        default="results/summary",
        help="Directory holding leaderboard.csv (default results/summary)",
    )
    args = p.parse_args(argv)

    if args.k < 1:
        p.error(f"--k must be >= 1, got {args.k}")

    try:
        cfg = load_config(args.config)
        if args.corpus:
            cfg = replace(cfg, corpus=list(args.corpus))
        index, tokenizer = build_index(cfg)
        questions = load_eval_questions(Path(args.questions))
    except (OSError, ValueError, KeyError, yaml.YAMLError) as exc:
        p.error(str(exc))

    first_ranks: list[int | None] = []
    per_q: list[dict] = []

    for q in questions:
        hit_rank = None
        retrieved = []
        if len(index):
            for rank, r in enumerate(index.search(tokenizer(q.question), k=args.k), start=1):
                doc = index.entries[r.idx].document
                retrieved.append({"rank": rank, "score": r.score, "doc_idx": r.idx, "answer": doc.answer})
                if hit_rank is None and doc.answer == q.expected_answer:
                    hit_rank = rank
        first_ranks.append(hit_rank)
        per_q.append({
            "id": q.id,
            "question": q.question,
            "expected_answer": q.expected_answer,
            "first_correct_rank": hit_rank,
            "top_k": retrieved,
        })

    metrics = compute_metrics(first_ranks)

    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(args.outdir) / f"qabot_{run_id}"
    run_dir.mkdir(parents=True, exist_ok=True)

    (run_dir / "config.yaml").write_text(yaml.safe_dump(asdict(cfg), sort_keys=False), encoding="utf-8")
    (run_dir / "metrics.json").write_text(
        json.dumps(asdict(metrics), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    (run_dir / "per_question.json").write_text(
        json.dumps(per_q, indent=2, ensure_ascii=False), encoding="utf-8"
    )

    summary_dir = Path(args.summary_dir)
    summary_dir.mkdir(parents=True, exist_ok=True)
    leaderboard = summary_dir / "leaderboard.csv"
    row = {
        "run_id": run_id,
        "corpus": ";".join(cfg.corpus),
        "stem": cfg.stem,
        "num_documents": len(index),
        "vocabulary_size": len(index.vocabulary),
        "k": args.k,
        "hit@1": metrics.hit_at_1,
        "hit@3": metrics.hit_at_3,
        "hit@5": metrics.hit_at_5,
        "mrr": metrics.mrr,
        "avg_first_rank": metrics.avg_first_rank,
        "run_dir": str(run_dir),
    }
    write_header = not leaderboard.exists()
    with leaderboard.open("a", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        if write_header:
            w.writeheader()
        w.writerow(row)

    print("=== Q/A retrieval evaluation complete ===")
    print(f"Run directory: {run_dir}")
    print(f"Documents: {len(index)} | Vocabulary: {len(index.vocabulary)}")
    print(f"Hit@1: {metrics.hit_at_1:.3f}  Hit@3: {metrics.hit_at_3:.3f}  Hit@5: {metrics.hit_at_5:.3f}")
    print(f"MRR: {metrics.mrr:.3f}  Avg first rank: {metrics.avg_first_rank}")
    print(f"Leaderboard appended: {leaderboard}")


if __name__ == "__main__":
    main()
