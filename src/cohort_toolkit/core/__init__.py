"""
Cohort Toolkit Core Package

Shared data models, schema validation and serialization utilities.
Nothing here depends on the planner.
"""

from .models import LevelInput, CohortPlan, InvalidInput, AssessmentRecord

__all__ = [
    "LevelInput",
    "CohortPlan",
    "InvalidInput",
    "AssessmentRecord",
]
