"""
Unit Tests for Serialization Utilities.
"""

import json

import pytest

from cohort_toolkit.core.models import CohortPlan, LevelInput
from cohort_toolkit.core.schemas.validator import ValidationError
from cohort_toolkit.core.utils.serialization import (
    deserialize_level_input,
    load_assessments_json,
    load_levels_json,
    report_to_json,
    save_report_json,
    serialize_plan,
)


class TestLevelFiles:
    """Tests for loading level inputs."""

    def test_load_when_valid_file_then_returns_levels_in_order(self, levels_file, sample_levels):
        levels = load_levels_json(levels_file)

        assert levels[0] == LevelInput(4, 18)
        assert [lvl.level for lvl in levels] == [d["level"] for d in sample_levels]

    def test_load_when_missing_file_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_levels_json(tmp_path / "nope.json")

    def test_load_when_not_array_then_raises(self, tmp_path):
        path = tmp_path / "levels.json"
        path.write_text('{"level": 4, "students": 18}', encoding="utf-8")

        with pytest.raises(ValidationError, match="JSON array"):
            load_levels_json(path)

    def test_load_when_bad_entry_then_error_names_index(self, tmp_path):
        path = tmp_path / "levels.json"
        path.write_text(json.dumps([{"level": 1, "students": 3}, {"level": 2}]), encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            load_levels_json(path)

        assert exc_info.value.path.endswith("[1]")

    def test_deserialize_when_invalid_then_raises(self):
        with pytest.raises(ValidationError):
            deserialize_level_input({"level": 1, "students": -1})


class TestAssessmentFiles:
    """Tests for loading assessment records."""

    def test_load_when_valid_then_records_parsed(self, tmp_path):
        path = tmp_path / "assessments.json"
        path.write_text(json.dumps([
            {"student_id": "s1", "subject": "Math", "level": 2, "date": "2024-06-01"},
            {"student_id": "s2", "subject": "math", "level": 3},
        ]), encoding="utf-8")

        records = load_assessments_json(path)

        assert [r.subject for r in records] == ["math", "math"]
        assert records[1].date is None

    def test_load_when_null_student_ids_then_validation_error(self, tmp_path):
        path = tmp_path / "assessments.json"
        path.write_text(json.dumps([
            {"student_id": None, "subject": "math", "level": 2},
            {"student_id": None, "subject": "math", "level": 2},
        ]), encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            load_assessments_json(path)

        assert exc_info.value.path.endswith("[0]")

    def test_load_when_bad_date_then_validation_error(self, tmp_path):
        path = tmp_path / "assessments.json"
        path.write_text(json.dumps([
            {"student_id": "s1", "subject": "math", "level": 2, "date": "last tuesday"},
        ]), encoding="utf-8")

        with pytest.raises(ValidationError, match="entry 0"):
            load_assessments_json(path)


class TestReportFiles:
    """Tests for plan serialization and report output."""

    @pytest.fixture
    def report(self) -> dict:
        return {
            "plans": [serialize_plan(CohortPlan(4, (18,))), serialize_plan(CohortPlan(5, ()))],
            "total_cohorts": 1,
        }

    def test_serialize_plan_when_called_then_dict(self):
        assert serialize_plan(CohortPlan(6, (20, 17))) == {"level": 6, "cohorts": [20, 17]}

    def test_report_to_json_when_called_then_indented_json(self, report):
        text = report_to_json(report)

        assert json.loads(text) == report
        assert text.startswith("{\n  ")
        assert not text.endswith("\n")

    def test_save_when_nested_dir_then_created_and_written(self, tmp_path, report):
        path = tmp_path / "out" / "report.json"

        save_report_json(report, path)

        assert json.loads(path.read_text(encoding="utf-8"))["plans"] == [
            {"level": 4, "cohorts": [18]},
            {"level": 5, "cohorts": []},
        ]
