"""Configuration constants for Assignment Grader."""

# Score range
MAX_SCORE = 100
MIN_SCORE = 0

# Letter grade thresholds, checked top-down (minimum score inclusive)
GRADE_THRESHOLDS = (
    (90, "A"),
    (85, "A-"),
    (80, "B+"),
    (75, "B"),
    (70, "B-"),
    (65, "C+"),
    (60, "C"),
    (55, "C-"),
)
FAILING_GRADE = "F"

# Coarse score bands used when colouring raw scores
SCORE_BANDS = (
    (80, "high"),
    (60, "medium"),
)
DEFAULT_SCORE_BAND = "low"

# Rich styles per grade category
GRADE_STYLES = {
    "grade_a": "bold medium_purple",
    "grade_a_minus": "purple",
    "grade_b_plus": "blue",
    "grade_b": "cyan",
    "grade_b_minus": "dark_cyan",
    "grade_c_plus": "spring_green3",
    "grade_c": "green",
    "grade_c_minus": "yellow",
    "failing": "red",
}

SCORE_BAND_STYLES = {
    "high": "green",
    "medium": "dark_orange",
    "low": "red",
}

# Bulk grading CSV columns
CORRECT_COLUMN = "correct_answers"
TOTAL_COLUMN = "total_questions"
REQUIRED_COLUMNS = (CORRECT_COLUMN, TOTAL_COLUMN)
RESULT_COLUMNS = ["numeric_score", "letter_grade", "category", "graded_at"]

# Rows shown in the bulk summary before truncating
SUMMARY_PREVIEW_ROWS = 10

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
