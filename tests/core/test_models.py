"""
Unit Tests for core models (LevelInput, CohortPlan, AssessmentRecord).
"""

from datetime import datetime, timedelta, timezone

import pytest

from cohort_toolkit.core.models import AssessmentRecord, CohortPlan, InvalidInput, LevelInput


class TestLevelInput:
    """Tests for LevelInput."""

    def test_init_when_valid_then_creates(self):
        level = LevelInput(level=4, students=18)

        assert level.level == 4
        assert level.students == 18

    def test_init_when_negative_students_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput, match="non-negative"):
            LevelInput(level=4, students=-1)

    def test_init_when_bool_students_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput):
            LevelInput(level=4, students=True)

    def test_init_when_level_not_int_or_str_then_raises(self):
        with pytest.raises(ValueError, match="level"):
            LevelInput(level=4.5, students=3)

    def test_from_dict_when_valid_then_matches_to_dict(self):
        data = {"level": "Beginner", "students": 12}

        assert LevelInput.from_dict(data).to_dict() == data

    def test_init_when_frozen_then_cannot_mutate(self):
        level = LevelInput(4, 18)

        with pytest.raises(AttributeError):
            level.students = 20


class TestCohortPlan:
    """Tests for CohortPlan."""

    def test_init_when_list_given_then_stored_as_tuple(self):
        plan = CohortPlan(level=6, cohorts=[20, 17])

        assert plan.cohorts == (20, 17)

    def test_students_when_calculated_then_sum_of_cohorts(self):
        plan = CohortPlan(level=6, cohorts=(20, 17))

        assert plan.students == 37
        assert plan.cohort_count == 2

    def test_init_when_zero_size_then_raises(self):
        with pytest.raises(ValueError, match="positive"):
            CohortPlan(level=1, cohorts=(20, 0))

    def test_init_when_empty_then_valid(self):
        plan = CohortPlan(level=1, cohorts=())

        assert plan.students == 0

    def test_to_dict_when_called_then_cohorts_list(self):
        assert CohortPlan(4, (18,)).to_dict() == {"level": 4, "cohorts": [18]}

    def test_from_dict_when_called_then_equal_plan(self):
        assert CohortPlan.from_dict({"level": 4, "cohorts": [18]}) == CohortPlan(4, (18,))


class TestAssessmentRecord:
    """Tests for AssessmentRecord."""

    def test_init_when_subject_padded_then_normalized(self):
        record = AssessmentRecord("s1", "  Math ", 3)

        assert record.subject == "math"

    def test_init_when_blank_subject_then_raises(self):
        with pytest.raises(ValueError, match="subject"):
            AssessmentRecord("s1", "   ", 3)

    def test_init_when_empty_student_then_raises(self):
        with pytest.raises(ValueError, match="student_id"):
            AssessmentRecord("", "math", 3)

    def test_from_dict_when_iso_date_then_parsed(self):
        record = AssessmentRecord.from_dict(
            {"student_id": 7, "subject": "hindi", "level": 2, "date": "2024-06-01T09:30:00"}
        )

        assert record.student_id == "7"
        assert record.date == datetime(2024, 6, 1, 9, 30)

    def test_to_dict_when_no_date_then_omitted(self):
        assert AssessmentRecord("s1", "math", 3).to_dict() == {
            "student_id": "s1",
            "subject": "math",
            "level": 3,
        }

    def test_init_when_aware_date_then_converted_to_naive_utc(self):
        ist = timezone(timedelta(hours=5, minutes=30))

        record = AssessmentRecord("s1", "math", 3, datetime(2024, 6, 1, 10, 0, tzinfo=ist))

        assert record.date == datetime(2024, 6, 1, 4, 30)
        assert record.date.tzinfo is None

    def test_from_dict_when_zulu_with_milliseconds_then_parsed(self):
        record = AssessmentRecord.from_dict(
            {"student_id": "s1", "subject": "math", "level": 2, "date": "2024-06-01T09:30:00.250Z"}
        )

        assert record.date == datetime(2024, 6, 1, 9, 30, 0, 250000)
