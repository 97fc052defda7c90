"""CSV export for graded submissions."""

import csv
import logging
from datetime import datetime
from pathlib import Path

from ..config import RESULT_COLUMNS
from ..grading import GradingResult

log = logging.getLogger(__name__)


def export_to_csv(rows: list[tuple[dict, GradingResult]], output_path: str) -> None:
    """
    Export graded submissions to CSV.

    Args:
        rows: List of (source row, grading result) pairs. Source columns are
            written first, followed by the grading columns.
        output_path: Path to output CSV file
    """
    if not rows:
        return

    fieldnames = []
    for source, _ in rows:
        for column in source:
            if column not in fieldnames and column not in RESULT_COLUMNS:
                fieldnames.append(column)
    fieldnames.extend(RESULT_COLUMNS)

    graded_at = datetime.now().isoformat()
    path = Path(output_path)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for source, result in rows:
            writer.writerow(_result_to_row(source, result, graded_at))

    log.debug("Wrote %d graded rows to %s", len(rows), path)


def _result_to_row(source: dict, result: GradingResult, graded_at: str) -> dict:
    """Merge a source row with its grading columns."""
    row = dict(source)
    row.update(
        {
            "numeric_score": result.numeric_score,
            "letter_grade": result.letter_grade.value,
            "category": result.category.value,
            "graded_at": graded_at,
        }
    )
    return row


def export_single_to_csv(source: dict, result: GradingResult, output_path: str) -> None:
    """Export a single graded submission to CSV."""
    export_to_csv([(source, result)], output_path)
