"""
Utils Package

Serialization and file helpers.
"""

from .serialization import (
    serialize_plan,
    deserialize_level_input,
    deserialize_assessment,
    load_levels_json,
    load_assessments_json,
    report_to_json,
    save_report_json,
)

__all__ = [
    "serialize_plan",
    "deserialize_level_input",
    "deserialize_assessment",
    "load_levels_json",
    "load_assessments_json",
    "report_to_json",
    "save_report_json",
]
