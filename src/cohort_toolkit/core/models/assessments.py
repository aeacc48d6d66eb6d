"""
Module: assessments

Purpose:
    Provides AssessmentRecord, one student's assessed level in one
    subject. Level tallies for the planner are derived from these.

Key Classes:
    - AssessmentRecord: student, subject, level and assessment date

Dependencies:
    - dataclasses (std)
    - datetime (std)

Used By:
    - cohort_toolkit.planner.tally: tally_levels()
    - cohort_toolkit.core.utils.serialization: JSON load
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class AssessmentRecord:
    """
    Result of a single assessment (immutable).

    Subjects are stored trimmed and lowercase so "Math " and "math"
    tally together. Timezone-aware dates are converted to naive UTC so
    records from different exports stay comparable.

    Attributes:
        student_id: Identifier of the assessed student
        subject: Subject of the assessment
        level: Knowledge level determined by the assessment
        date: When the assessment was taken, naive UTC (None if unknown)

    Example:
        >>> AssessmentRecord("s1", " Math ", 3).subject
        'math'
    """

    student_id: str
    subject: str
    level: int
    date: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Normalize subject and validate fields."""
        if not self.student_id:
            raise ValueError("student_id must be non-empty")
        subject = self.subject.strip().lower()
        if not subject:
            raise ValueError("subject must be non-empty")
        object.__setattr__(self, "subject", subject)
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValueError(f"level must be an integer: {self.level!r}")
        if self.date is not None and self.date.tzinfo is not None:
            object.__setattr__(
                self, "date", self.date.astimezone(timezone.utc).replace(tzinfo=None)
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        d = {"student_id": self.student_id, "subject": self.subject, "level": self.level}
        if self.date is not None:
            d["date"] = self.date.isoformat()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> AssessmentRecord:
        """
        Deserialize from dictionary.

        Args:
            data: Dict with student_id, subject, level and optional ISO date

        Returns:
            AssessmentRecord instance
        """
        date = data.get("date")
        return cls(
            student_id=str(data["student_id"]),
            subject=data["subject"],
            level=data["level"],
            date=datetime.fromisoformat(date) if date else None,
        )
