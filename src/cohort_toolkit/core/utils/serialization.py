"""
Serialization Utilities

Provides to/from JSON utilities for level inputs, assessments and plans.

- `serialize_*` / `deserialize_*` convert single models
- `load_*` read JSON array files; `save_report_json` writes plan reports
- Payloads are validated before deserialization
- Calculated values (plan totals) are never read back from disk
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.levels import LevelInput, CohortPlan
from ..models.assessments import AssessmentRecord
from ..schemas.validator import validate_level_input, validate_assessment, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Single Models
# ─────────────────────────────────────────────────────────────────────────────

def serialize_plan(plan: CohortPlan) -> dict[str, Any]:
    """Serialize a CohortPlan to a dictionary."""
    return plan.to_dict()


def deserialize_level_input(data: dict[str, Any], *, validate: bool = True) -> LevelInput:
    """
    Deserialize a LevelInput from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the payload first

    Returns:
        LevelInput instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_level_input(data)
    return LevelInput.from_dict(data)


def deserialize_assessment(data: dict[str, Any], *, validate: bool = True) -> AssessmentRecord:
    """
    Deserialize an AssessmentRecord from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If the date is not ISO formatted
    """
    if validate:
        validate_assessment(data)
    return AssessmentRecord.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Files
# ─────────────────────────────────────────────────────────────────────────────

def _load_array(path: Path) -> list:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValidationError(
            f"Expected a JSON array, got {type(data).__name__}",
            path=str(path),
        )
    return data


def load_levels_json(path: Path, *, validate: bool = True) -> list[LevelInput]:
    """
    Load level inputs from a JSON array file.

    Args:
        path: File holding ``[{"level": ..., "students": ...}, ...]``
        validate: Whether to validate each entry

    Returns:
        List of LevelInput in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any entry is invalid
    """
    levels = []
    for index, item in enumerate(_load_array(path)):
        try:
            levels.append(deserialize_level_input(item, validate=validate))
        except (ValidationError, ValueError, KeyError) as e:
            raise ValidationError(
                f"Error parsing entry {index}: {e}",
                path=f"{path}[{index}]",
                errors=[str(e)],
            ) from e
    return levels


def load_assessments_json(path: Path, *, validate: bool = True) -> list[AssessmentRecord]:
    """
    Load assessment records from a JSON array file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any entry is invalid
    """
    records = []
    for index, item in enumerate(_load_array(path)):
        try:
            records.append(deserialize_assessment(item, validate=validate))
        except (ValidationError, ValueError, KeyError) as e:
            raise ValidationError(
                f"Error parsing entry {index}: {e}",
                path=f"{path}[{index}]",
                errors=[str(e)],
            ) from e
    return records


def report_to_json(report: dict[str, Any]) -> str:
    """
    Format a planning report (see PlanReport.to_dict) as indented JSON.

    Args:
        report: Report dictionary

    Returns:
        JSON text without a trailing newline
    """
    return json.dumps(report, indent=2, ensure_ascii=False)


def save_report_json(report: dict[str, Any], path: Path) -> None:
    """
    Save a planning report to a JSON file.

    Args:
        report: Report dictionary
        path: Output path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(report_to_json(report))
        f.write("\n")
