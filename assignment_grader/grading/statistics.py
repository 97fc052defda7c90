"""Aggregate statistics over graded scores."""

from typing import Iterable


def summarize_scores(scores: Iterable[int]) -> dict:
    """
    Summarize a collection of numeric scores.

    Returns:
        Dict with total, average, highest, lowest. All zero for no scores.
    """
    scores = list(scores)
    if not scores:
        return {"total": 0, "average": 0, "highest": 0, "lowest": 0}

    return {
        "total": len(scores),
        "average": _rounded_mean(sum(scores), len(scores)),
        "highest": max(scores),
        "lowest": min(scores),
    }


def average_by_group(records: Iterable[dict], key: str, score_key: str = "numeric_score") -> dict[str, int]:
    """
    Average score per group (e.g. per course), in first-seen order.

    Records missing the group key are collected under "".
    """
    totals: dict[str, list[int]] = {}
    for record in records:
        group = str(record.get(key) or "")
        bucket = totals.setdefault(group, [0, 0])
        bucket[0] += record.get(score_key, 0)
        bucket[1] += 1

    return {group: _rounded_mean(total, count) for group, (total, count) in totals.items()}


def _rounded_mean(total: int, count: int) -> int:
    """Mean rounded half-up to an integer."""
    return (2 * total + count) // (2 * count)
