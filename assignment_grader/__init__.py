"""Assignment Grader: percentage scores and letter grades for multiple-choice work."""

__version__ = "1.0.0"
