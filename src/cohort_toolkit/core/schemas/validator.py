"""
Schema Validation Utilities

Validates JSON payloads for level inputs and assessment records before
they are turned into models.

Basic checks run always and fail fast with a precise path. With
``strict=True`` the payload is additionally checked against the JSON
Schema shipped next to this module.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_required(data: Any, required: list[str]) -> None:
    if not isinstance(data, dict):
        raise ValidationError(f"Expected an object, got {type(data).__name__}")
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )


def _validate_strict(data: dict[str, Any], schema_name: str) -> None:
    """Run full jsonschema validation, collecting every error."""
    validator = jsonschema.Draft7Validator(_load_schema(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        first = errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.path),
            errors=[e.message for e in errors],
        )


def validate_level_input(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a level-input payload such as ``{"level": 4, "students": 18}``.

    Args:
        data: Payload to validate
        strict: If True, also validate against levels.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    _check_required(data, ["level", "students"])

    level = data["level"]
    if not (_is_int(level) or isinstance(level, str)):
        raise ValidationError(
            f"Invalid level: {level!r} (must be an integer or string)",
            path="level",
        )

    students = data["students"]
    if not _is_int(students) or students < 0:
        raise ValidationError(
            f"Invalid students: {students!r} (must be a non-negative integer)",
            path="students",
        )

    if strict:
        _validate_strict(data, "levels")


def validate_assessment(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate an assessment payload.

    Args:
        data: Payload with student_id, subject, level and optional date
        strict: If True, also validate against assessment.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    _check_required(data, ["student_id", "subject", "level"])

    student_id = data["student_id"]
    if not (_is_int(student_id) or (isinstance(student_id, str) and student_id.strip())):
        raise ValidationError(
            f"Invalid student_id: {student_id!r} (must be a non-empty string or integer)",
            path="student_id",
        )

    subject = data["subject"]
    if not isinstance(subject, str) or not subject.strip():
        raise ValidationError(f"Invalid subject: {subject!r}", path="subject")

    if not _is_int(data["level"]):
        raise ValidationError(
            f"Invalid level: {data['level']!r} (must be an integer)",
            path="level",
        )

    date = data.get("date")
    if date is not None and not isinstance(date, str):
        raise ValidationError(
            f"Invalid date: {date!r} (must be an ISO 8601 string or null)",
            path="date",
        )

    if strict:
        _validate_strict(data, "assessment")
