from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RetrievalMetrics:
    n: int
    hit_at_1: float
    hit_at_3: float
    hit_at_5: float
    mrr: float
    avg_first_rank: float


def _hit_rate(ranks: list[int], n: int, cutoff: int) -> float:
    if not n:
        return 0.0
    return sum(1 for r in ranks if r <= cutoff) / n


def compute_metrics(first_ranks: list[int | None]) -> RetrievalMetrics:
    """Aggregate the 1-based rank of the first correct answer per question (None = miss)."""
    n = len(first_ranks)
    found = [r for r in first_ranks if r is not None]
    return RetrievalMetrics(
        n=n,
        hit_at_1=_hit_rate(found, n, 1),
        hit_at_3=_hit_rate(found, n, 3),
        hit_at_5=_hit_rate(found, n, 5),
        mrr=sum(1.0 / r for r in found) / n if n else 0.0,
        avg_first_rank=sum(found) / len(found) if found else float("inf"),
    )
