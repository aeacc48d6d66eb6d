"""
Module: levels

Purpose:
    Provides LevelInput and CohortPlan dataclasses: the input tally of
    students assessed into one proficiency level, and the cohort sizes
    planned for that level.

Key Classes:
    - LevelInput: (level, students) pair supplied by the caller
    - CohortPlan: (level, cohorts) pair produced by the planner
    - InvalidInput: Raised for negative or non-integer student counts

Dependencies:
    - dataclasses (std)

Used By:
    - cohort_toolkit.planner.partition: Student count checks
    - cohort_toolkit.planner.controller: plan_cohorts / build_plan_report
    - cohort_toolkit.planner.tally: Level tallies from assessments
    - cohort_toolkit.core.utils.serialization: JSON load/save
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

LevelId = Union[int, str]


class InvalidInput(ValueError):
    """Raised when a student count is negative or not an integer."""
    pass


def check_student_count(value: Any) -> int:
    """
    Validate a student count.

    Args:
        value: Candidate student count

    Returns:
        The count, unchanged

    Raises:
        InvalidInput: If value is not a non-negative int (bools rejected)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"student count must be an integer: {value!r}")
    if value < 0:
        raise InvalidInput(f"student count must be non-negative: {value}")
    return value


@dataclass(frozen=True)
class LevelInput:
    """
    Number of students assessed into one proficiency level (immutable).

    Attributes:
        level: Level identifier, a number (4, 5, 6) or a label ("Beginner")
        students: Total students in that level

    Invariants:
        - students >= 0
        - level is an int or str

    Example:
        >>> LevelInput(level=4, students=18)
        LevelInput(level=4, students=18)
    """

    level: LevelId
    students: int

    def __post_init__(self) -> None:
        """Validate on construction."""
        if isinstance(self.level, bool) or not isinstance(self.level, (int, str)):
            raise ValueError(f"level must be an int or str: {self.level!r}")
        check_student_count(self.students)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {"level": self.level, "students": self.students}

    @classmethod
    def from_dict(cls, data: dict) -> LevelInput:
        """
        Deserialize from dictionary.

        Args:
            data: Dict with level and students keys

        Returns:
            LevelInput instance
        """
        return cls(level=data["level"], students=data["students"])


@dataclass(frozen=True)
class CohortPlan:
    """
    Planned cohort sizes for one level (immutable).

    Each entry in ``cohorts`` is the headcount of one cohort, in creation
    order: ideal-sized cohorts first, then the remainder cohort if any.

    Attributes:
        level: Level identifier, echoed from the LevelInput
        cohorts: Cohort sizes

    Invariants:
        - every size is a positive integer
        - cohorts is empty only when the level has no students

    Example:
        >>> plan = CohortPlan(level=6, cohorts=(20, 17))
        >>> plan.students
        37
    """

    level: LevelId
    cohorts: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Normalize cohorts to a tuple and validate sizes."""
        object.__setattr__(self, "cohorts", tuple(self.cohorts))
        bad = [size for size in self.cohorts if isinstance(size, bool) or not isinstance(size, int) or size <= 0]
        if bad:
            raise ValueError(f"cohort sizes must be positive integers: {bad}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def students(self) -> int:
        """Total students across all cohorts."""
        return sum(self.cohorts)

    @property
    def cohort_count(self) -> int:
        """Number of cohorts planned for this level."""
        return len(self.cohorts)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {"level": self.level, "cohorts": list(self.cohorts)}

    @classmethod
    def from_dict(cls, data: dict) -> CohortPlan:
        """Deserialize from dictionary with level and cohorts keys."""
        return cls(level=data["level"], cohorts=tuple(data["cohorts"]))
