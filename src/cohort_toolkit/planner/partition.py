"""
Module: planner.partition

Purpose:
    Split the students of one level into cohorts. A small pipeline of
    pure functions on an ordered list of cohort sizes:

        bulk_fill → absorb_remainder → rebalance_if_below_min

Key Functions:
    - partition_level(): Main entry point for one level
    - bulk_fill(): Ideal-sized cohorts plus the leftover count
    - absorb_remainder(): Place the leftover students
    - rebalance_if_below_min(): Even split when a cohort is undersized

Dependencies:
    - planner.config: PlannerConfig
    - cohort_toolkit.core.models.levels: Student count checks

Used By:
    - planner.controller: plan_cohorts()

Known Limitation:
    The rebalance step spreads students evenly over the cohorts that
    already exist and does not re-check min_size/max_size afterwards.
    build_plan_report() turns any resulting violation into a warning.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from cohort_toolkit.core.models.levels import check_student_count

from .config import (
    DEFAULT_IDEAL,
    DEFAULT_MAX_SIZE,
    DEFAULT_MIN_SIZE,
    PlannerConfig,
)

logger = logging.getLogger(__name__)


def bulk_fill(student_count: int, ideal: int) -> Tuple[List[int], int]:
    """
    Fill as many ideal-sized cohorts as possible.

    Args:
        student_count: Students in the level
        ideal: Target cohort size

    Returns:
        Tuple of (cohort sizes, students left over)

    Example:
        >>> bulk_fill(53, 20)
        ([20, 20], 13)
    """
    full, remainder = divmod(student_count, ideal)
    return [ideal] * full, remainder


def absorb_remainder(
    cohorts: Sequence[int],
    remainder: int,
    config: PlannerConfig,
) -> List[int]:
    """
    Place leftover students after bulk fill.

    A remainder big enough to stand alone becomes a new cohort. A smaller
    one is handed out one student at a time, round-robin from the first
    cohort, skipping cohorts already at max_size. Whatever cannot be
    absorbed (no cohorts yet, or all of them full) becomes a new cohort,
    even if it is below min_size.

    Args:
        cohorts: Cohort sizes from bulk_fill (not modified)
        remainder: Students left over
        config: Size bounds

    Returns:
        New list of cohort sizes
    """
    result = list(cohorts)
    if remainder <= 0:
        return result

    if config.stands_alone(remainder):
        result.append(remainder)
        return result

    i = 0
    skipped = 0
    while remainder > 0 and result and skipped < len(result):
        if result[i] < config.max_size:
            result[i] += 1
            remainder -= 1
            skipped = 0
        else:
            skipped += 1
        i = (i + 1) % len(result)

    if remainder > 0:
        logger.debug(f"{remainder} students could not be absorbed, opening a new cohort")
        result.append(remainder)

    return result


def rebalance_if_below_min(cohorts: Sequence[int], min_size: int) -> List[int]:
    """
    Split students evenly if any cohort is below min_size.

    The cohort count is kept; the first ``total % n`` cohorts get one
    extra student. The result is not re-checked against the bounds.

    Args:
        cohorts: Cohort sizes (not modified)
        min_size: Smallest acceptable cohort

    Returns:
        New list of cohort sizes, unchanged if nothing is undersized

    Example:
        >>> rebalance_if_below_min([20, 20, 3], 5)
        [15, 14, 14]
    """
    if not any(size < min_size for size in cohorts):
        return list(cohorts)

    total = sum(cohorts)
    n = len(cohorts)
    base, extra = divmod(total, n)
    logger.debug(f"Rebalancing {cohorts} into {n} cohorts of ~{base}")
    return [base + (1 if i < extra else 0) for i in range(n)]


def partition_level(
    student_count: int,
    ideal: int = DEFAULT_IDEAL,
    min_size: int = DEFAULT_MIN_SIZE,
    max_size: int = DEFAULT_MAX_SIZE,
    *,
    config: Optional[PlannerConfig] = None,
) -> List[int]:
    """
    Partition one level's students into cohorts.

    Args:
        student_count: Students in the level (>= 0)
        ideal: Target cohort size
        min_size: Smallest acceptable cohort
        max_size: Largest acceptable cohort
        config: Overrides ideal/min_size/max_size when given

    Returns:
        Cohort sizes in creation order, summing to student_count.
        Empty when student_count is 0.

    Raises:
        InvalidInput: If student_count is negative or not an int
        InvalidConfiguration: If the bounds are inconsistent

    Example:
        >>> partition_level(37)
        [20, 17]
        >>> partition_level(3)
        [3]
    """
    check_student_count(student_count)
    if config is None:
        config = PlannerConfig(ideal=ideal, min_size=min_size, max_size=max_size)

    cohorts, remainder = bulk_fill(student_count, config.ideal)
    if remainder == 0:
        return cohorts

    cohorts = absorb_remainder(cohorts, remainder, config)
    return rebalance_if_below_min(cohorts, config.min_size)
