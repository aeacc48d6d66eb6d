"""
Module: planner.tally

Purpose:
    Turn per-student assessment records into the (level, students)
    tallies the planner consumes. Only each student's most recent
    assessment in a subject counts.

Key Functions:
    - tally_levels(): Assessment records → LevelInputs

Dependencies:
    - cohort_toolkit.core.models: AssessmentRecord, LevelInput

Used By:
    - cohort_toolkit.cli: --from-assessments
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from cohort_toolkit.core.models import AssessmentRecord, LevelInput

logger = logging.getLogger(__name__)


def _sort_key(record: AssessmentRecord) -> Tuple[bool, datetime]:
    # Undated records rank oldest
    return (record.date is not None, record.date or datetime.min)


def latest_assessments(records: Iterable[AssessmentRecord]) -> List[AssessmentRecord]:
    """
    Keep the most recent record per (student, subject).

    Ties on date go to the record that appears later in the input.

    Args:
        records: Assessment records in any order

    Returns:
        One record per (student_id, subject), in first-seen order
    """
    latest: Dict[Tuple[str, str], AssessmentRecord] = {}
    for record in records:
        key = (record.student_id, record.subject)
        current = latest.get(key)
        if current is None or _sort_key(record) >= _sort_key(current):
            latest[key] = record
    return list(latest.values())


def tally_levels(
    records: Iterable[AssessmentRecord],
    subject: Optional[str] = None,
) -> List[LevelInput]:
    """
    Count students per assessed level.

    Args:
        records: Assessment records
        subject: Only count this subject (case-insensitive); None = all.
            Without a subject filter a student assessed in two subjects
            is counted once per subject.

    Returns:
        LevelInputs sorted by level

    Example:
        >>> tally_levels([AssessmentRecord("s1", "math", 2), AssessmentRecord("s2", "math", 2)])
        [LevelInput(level=2, students=2)]
    """
    wanted = subject.strip().lower() if subject else None
    current = [
        r for r in latest_assessments(records)
        if wanted is None or r.subject == wanted
    ]
    counts = Counter(r.level for r in current)
    logger.debug(f"Tallied {len(current)} students into {len(counts)} levels")
    return [LevelInput(level=level, students=n) for level, n in sorted(counts.items())]
