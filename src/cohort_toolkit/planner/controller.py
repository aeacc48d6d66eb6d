"""
Module: planner.controller

Purpose:
    Plan cohorts for every level of a school.
    Levels → partition_level → CohortPlans (→ PlanReport)

Key Functions:
    - plan_cohorts(): One CohortPlan per input level
    - build_plan_report(): Plans plus totals and bound warnings

Key Classes:
    - PlanReport: Complete planning result

Dependencies:
    - planner.partition: partition_level()
    - planner.config: PlannerConfig
    - cohort_toolkit.core.models: LevelInput, CohortPlan

Used By:
    - cohort_toolkit.cli: `cohort-plan`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Union

from cohort_toolkit.core.models import CohortPlan, LevelInput
from cohort_toolkit.core.utils.serialization import serialize_plan

from .config import PlannerConfig
from .partition import partition_level

logger = logging.getLogger(__name__)

LevelLike = Union[LevelInput, Mapping]


def _as_level_input(item: LevelLike) -> LevelInput:
    if isinstance(item, LevelInput):
        return item
    return LevelInput.from_dict(dict(item))


def plan_cohorts(
    levels: Iterable[LevelLike],
    config: Optional[PlannerConfig] = None,
) -> List[CohortPlan]:
    """
    Generate cohort plans for multiple levels.

    Levels are planned independently; cohorts never mix levels.

    Args:
        levels: LevelInputs, or mappings with "level" and "students" keys
        config: Size bounds (defaults to PlannerConfig())

    Returns:
        One CohortPlan per level, in input order

    Raises:
        InvalidInput: If a student count is negative
        KeyError: If a mapping lacks "level" or "students"

    Example:
        >>> plan_cohorts([{"level": 4, "students": 18}, {"level": 6, "students": 37}])
        [CohortPlan(level=4, cohorts=(18,)), CohortPlan(level=6, cohorts=(20, 17))]
    """
    config = config or PlannerConfig()
    plans = []
    for item in levels:
        level_input = _as_level_input(item)
        cohorts = partition_level(level_input.students, config=config)
        plans.append(CohortPlan(level=level_input.level, cohorts=tuple(cohorts)))
    return plans


@dataclass(frozen=True)
class PlanReport:
    """
    Complete planning result (immutable).

    Attributes:
        plans: One CohortPlan per input level
        config: Bounds the plans were made with
        warnings: Cohorts that ended up outside [min_size, max_size]

    Example:
        >>> report = build_plan_report([LevelInput(4, 18)])
        >>> report.total_cohorts
        1
    """
    plans: tuple[CohortPlan, ...]
    config: PlannerConfig
    warnings: tuple[str, ...] = ()

    @property
    def total_students(self) -> int:
        return sum(p.students for p in self.plans)

    @property
    def total_cohorts(self) -> int:
        return sum(p.cohort_count for p in self.plans)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "config": {
                "ideal": self.config.ideal,
                "min_size": self.config.min_size,
                "max_size": self.config.max_size,
            },
            "plans": [serialize_plan(p) for p in self.plans],
            "total_students": self.total_students,
            "total_cohorts": self.total_cohorts,
            "warnings": list(self.warnings),
        }


def build_plan_report(
    levels: Iterable[LevelLike],
    config: Optional[PlannerConfig] = None,
) -> PlanReport:
    """
    Plan all levels and flag cohorts outside the configured bounds.

    Args:
        levels: LevelInputs or mappings
        config: Size bounds (defaults to PlannerConfig())

    Returns:
        PlanReport with plans, totals and warnings
    """
    config = config or PlannerConfig()
    plans = plan_cohorts(levels, config)
    warnings: List[str] = []

    for plan in plans:
        for index, size in enumerate(plan.cohorts):
            if size < config.min_size:
                warnings.append(
                    f"Level {plan.level}: cohort {index + 1} has {size} students "
                    f"(below minimum {config.min_size})"
                )
            elif size > config.max_size:
                warnings.append(
                    f"Level {plan.level}: cohort {index + 1} has {size} students "
                    f"(above maximum {config.max_size})"
                )

    report = PlanReport(plans=tuple(plans), config=config, warnings=tuple(warnings))
    logger.info(
        f"Planned {report.total_cohorts} cohorts for {report.total_students} students "
        f"across {len(plans)} levels"
    )
    for w in warnings:
        logger.warning(w)
    return report
