"""Tests for score statistics."""

from assignment_grader.grading import average_by_group, summarize_scores


class TestSummarizeScores:
    """Tests for summarize_scores function."""

    def test_empty_scores_are_zero(self):
        """No scores gives all zeros."""
        assert summarize_scores([]) == {"total": 0, "average": 0, "highest": 0, "lowest": 0}

    def test_summary_values(self):
        """Summary has count, rounded mean, max and min."""
        assert summarize_scores([80, 100, 0]) == {
            "total": 3,
            "average": 60,
            "highest": 100,
            "lowest": 0,
        }

    def test_average_rounds_half_up(self):
        """Average of 70 and 75 rounds to 73."""
        assert summarize_scores([70, 75])["average"] == 73

    def test_accepts_generator(self):
        """Any iterable of scores works."""
        assert summarize_scores(s for s in (90, 91))["total"] == 2


class TestAverageByGroup:
    """Tests for average_by_group function."""

    def test_groups_in_first_seen_order(self):
        """Groups keep the order they first appear in."""
        records = [
            {"course": "Databases", "numeric_score": 40},
            {"course": "Algorithms", "numeric_score": 80},
            {"course": "Databases", "numeric_score": 61},
        ]
        averages = average_by_group(records, "course")
        assert list(averages) == ["Databases", "Algorithms"]
        assert averages == {"Databases": 51, "Algorithms": 80}

    def test_missing_group_key(self):
        """Records without the key are grouped under an empty name."""
        averages = average_by_group([{"numeric_score": 50}], "course")
        assert averages == {"": 50}

    def test_empty_records(self):
        """No records gives no groups."""
        assert average_by_group([], "course") == {}

    def test_custom_score_key(self):
        """Score key can be overridden."""
        assert average_by_group([{"c": "x", "score": 9}], "c", score_key="score") == {"x": 9}
