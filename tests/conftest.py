"""Pytest configuration and fixtures."""

import pytest

from assignment_grader.grading import perform_grading


@pytest.fixture
def sample_result():
    """Return a grading result for 8 of 10 correct."""
    return perform_grading(8, 10)


@pytest.fixture
def submissions_csv(tmp_path):
    """Write a small submissions CSV and return its path."""
    path = tmp_path / "submissions.csv"
    path.write_text(
        "student,course,correct_answers,total_questions\n"
        "alice,Algorithms,8,10\n"
        "bob,Algorithms,10,10\n"
        "carol,Databases,0,10\n"
        "dave,Databases,abc,10\n",
        encoding="utf-8",
    )
    return path
