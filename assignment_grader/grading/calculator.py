"""Percentage score calculation and grading."""

from dataclasses import dataclass

from ..config import MAX_SCORE
from .classifier import GradeCategory, LetterGrade, grade_to_category, score_to_grade


@dataclass(frozen=True)
class GradingResult:
    """Outcome of grading one set of answers."""

    numeric_score: int
    letter_grade: LetterGrade
    correct_answers: int
    total_questions: int

    @property
    def category(self) -> GradeCategory:
        return grade_to_category(self.letter_grade)

    def to_dict(self) -> dict:
        return {
            "numeric_score": self.numeric_score,
            "letter_grade": self.letter_grade.value,
            "category": self.category.value,
            "correct_answers": self.correct_answers,
            "total_questions": self.total_questions,
        }


def calculate_percentage(correct_answers: int, total_questions: int) -> int:
    """
    Convert answer counts to a whole-number percentage.

    Args:
        correct_answers: Number of correct answers
        total_questions: Number of questions in the assignment

    Returns:
        correct/total as a percentage, rounded half-up. Returns 0 when
        total_questions is not positive. Results are not clamped, so more
        correct answers than questions gives a score above 100.
    """
    if total_questions <= 0:
        return 0
    # floor(100 * c / t + 1/2) in integer arithmetic
    return (2 * MAX_SCORE * correct_answers + total_questions) // (2 * total_questions)


def perform_grading(correct_answers: int, total_questions: int) -> GradingResult:
    """Calculate the percentage score and letter grade for answer counts."""
    numeric_score = calculate_percentage(correct_answers, total_questions)
    return GradingResult(
        numeric_score=numeric_score,
        letter_grade=score_to_grade(numeric_score),
        correct_answers=correct_answers,
        total_questions=total_questions,
    )
