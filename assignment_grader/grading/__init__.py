"""Grading and classification modules."""

from .calculator import GradingResult, calculate_percentage, perform_grading
from .classifier import (
    GradeCategory,
    LetterGrade,
    grade_scale,
    grade_to_category,
    score_band,
    score_to_grade,
)
from .statistics import average_by_group, summarize_scores

__all__ = [
    "GradingResult",
    "calculate_percentage",
    "perform_grading",
    "GradeCategory",
    "LetterGrade",
    "grade_scale",
    "grade_to_category",
    "score_band",
    "score_to_grade",
    "average_by_group",
    "summarize_scores",
]
