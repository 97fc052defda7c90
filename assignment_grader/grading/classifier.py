"""Letter grade and grade category classification."""

from enum import Enum

from ..config import (
    DEFAULT_SCORE_BAND,
    FAILING_GRADE,
    GRADE_THRESHOLDS,
    MAX_SCORE,
    MIN_SCORE,
    SCORE_BANDS,
)


class LetterGrade(str, Enum):
    """Letter grades, ordered from highest to lowest."""

    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    F = "F"


class GradeCategory(str, Enum):
    """Presentation bucket for a letter grade."""

    GRADE_A = "grade_a"
    GRADE_A_MINUS = "grade_a_minus"
    GRADE_B_PLUS = "grade_b_plus"
    GRADE_B = "grade_b"
    GRADE_B_MINUS = "grade_b_minus"
    GRADE_C_PLUS = "grade_c_plus"
    GRADE_C = "grade_c"
    GRADE_C_MINUS = "grade_c_minus"
    FAILING = "failing"


# Every LetterGrade member has an entry; F shares the catch-all bucket
GRADE_CATEGORIES = {
    LetterGrade.A: GradeCategory.GRADE_A,
    LetterGrade.A_MINUS: GradeCategory.GRADE_A_MINUS,
    LetterGrade.B_PLUS: GradeCategory.GRADE_B_PLUS,
    LetterGrade.B: GradeCategory.GRADE_B,
    LetterGrade.B_MINUS: GradeCategory.GRADE_B_MINUS,
    LetterGrade.C_PLUS: GradeCategory.GRADE_C_PLUS,
    LetterGrade.C: GradeCategory.GRADE_C,
    LetterGrade.C_MINUS: GradeCategory.GRADE_C_MINUS,
    LetterGrade.F: GradeCategory.FAILING,
}


def score_to_grade(score: int) -> LetterGrade:
    """
    Get letter grade from a percentage score.

    Thresholds are checked from the top and the first match wins, so scores
    above 100 are still an A and anything below the lowest threshold,
    including negative scores, is an F.
    """
    for min_score, grade in GRADE_THRESHOLDS:
        if score >= min_score:
            return LetterGrade(grade)
    return LetterGrade(FAILING_GRADE)


def grade_to_category(grade) -> GradeCategory:
    """Get display category from a letter grade. Unknown input is failing."""
    try:
        letter = LetterGrade(grade)
    except (ValueError, TypeError):
        return GradeCategory.FAILING
    return GRADE_CATEGORIES.get(letter, GradeCategory.FAILING)


def score_band(score: int) -> str:
    """Get coarse band (high, medium, low) for a raw score."""
    for min_score, band in SCORE_BANDS:
        if score >= min_score:
            return band
    return DEFAULT_SCORE_BAND


def grade_scale() -> list[dict]:
    """
    Build the grading legend.

    Returns:
        List of dicts with grade, min_score, max_score and category,
        highest grade first, covering MIN_SCORE..MAX_SCORE without gaps.
    """
    scale = []
    upper = MAX_SCORE
    for min_score, grade in GRADE_THRESHOLDS:
        scale.append(_scale_row(grade, min_score, upper))
        upper = min_score - 1
    scale.append(_scale_row(FAILING_GRADE, MIN_SCORE, upper))
    return scale


def _scale_row(grade: str, min_score: int, max_score: int) -> dict:
    letter = LetterGrade(grade)
    return {
        "grade": letter.value,
        "min_score": min_score,
        "max_score": max_score,
        "category": grade_to_category(letter).value,
    }
