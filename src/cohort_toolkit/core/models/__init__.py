"""
Core Models Package

Immutable, validated data models shared by the planner, the serializers
and the CLI. All models are frozen dataclasses, so plans can be passed
between threads or processes without copying.
"""

from .levels import LevelInput, CohortPlan, InvalidInput
from .assessments import AssessmentRecord

__all__ = [
    "LevelInput",
    "CohortPlan",
    "InvalidInput",
    "AssessmentRecord",
]
