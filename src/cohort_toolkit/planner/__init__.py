"""
Module: planner

Purpose:
    Cohort sizing for students grouped by proficiency level. Splits each
    level into cohorts near an ideal size, folding small remainders into
    existing cohorts and rebalancing when a cohort would be undersized.

Key Functions:
    - partition_level(): Cohort sizes for one level
    - plan_cohorts(): Cohort plans for many levels
    - build_plan_report(): Plans plus totals and warnings
    - tally_levels(): Level counts from assessment records

Key Classes:
    - PlannerConfig: Ideal/min/max cohort sizes
    - PlanReport: Planning result

Dependencies:
    - cohort_toolkit.core.models: LevelInput, CohortPlan, AssessmentRecord

Used By:
    - cohort_toolkit.cli: `cohort-plan`
"""

from cohort_toolkit.core.models import InvalidInput

from .config import PlannerConfig, InvalidConfiguration
from .partition import partition_level, bulk_fill, absorb_remainder, rebalance_if_below_min
from .controller import plan_cohorts, build_plan_report, PlanReport
from .tally import tally_levels, latest_assessments

__all__ = [
    # Config
    "PlannerConfig",
    "InvalidConfiguration",
    "InvalidInput",
    # Partition
    "partition_level",
    "bulk_fill",
    "absorb_remainder",
    "rebalance_if_below_min",
    # Controller
    "plan_cohorts",
    "build_plan_report",
    "PlanReport",
    # Tally
    "tally_levels",
    "latest_assessments",
]
