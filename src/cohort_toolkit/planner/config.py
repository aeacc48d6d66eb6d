"""
Module: planner.config

Purpose:
    Configuration dataclass for cohort sizing.
    Immutable configuration with validation on construction.

Key Classes:
    - PlannerConfig: Ideal, minimum and maximum cohort sizes
    - InvalidConfiguration: Raised for inconsistent bounds

Dependencies:
    - dataclasses (std)

Used By:
    - planner.partition: partition_level()
    - planner.controller: plan_cohorts(), build_plan_report()
    - cohort_toolkit.cli: Command line overrides
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_IDEAL = 20
DEFAULT_MIN_SIZE = 5
DEFAULT_MAX_SIZE = 30


class InvalidConfiguration(ValueError):
    """Raised when cohort size bounds are not 0 < min_size <= ideal <= max_size."""
    pass


@dataclass(frozen=True)
class PlannerConfig:
    """
    Configuration for cohort sizing (immutable).

    Attributes:
        ideal: Target cohort size
        min_size: Smallest acceptable cohort
        max_size: Largest acceptable cohort
        absorb_at_minimum: Fold a remainder equal to min_size into
            existing cohorts instead of giving it its own cohort

    Invariants:
        - all bounds are positive integers
        - min_size <= ideal <= max_size

    Example:
        >>> config = PlannerConfig(ideal=25, min_size=10, max_size=35)
        >>> config.size_range
        (10, 35)
    """

    ideal: int = DEFAULT_IDEAL
    min_size: int = DEFAULT_MIN_SIZE
    max_size: int = DEFAULT_MAX_SIZE
    absorb_at_minimum: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("ideal", "min_size", "max_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an integer: {value!r}")
            if value <= 0:
                raise InvalidConfiguration(f"{name} must be positive: {value}")
        if self.min_size > self.ideal:
            raise InvalidConfiguration(
                f"min_size ({self.min_size}) must be <= ideal ({self.ideal})"
            )
        if self.ideal > self.max_size:
            raise InvalidConfiguration(
                f"ideal ({self.ideal}) must be <= max_size ({self.max_size})"
            )

    @property
    def size_range(self) -> tuple[int, int]:
        """Acceptable cohort size range (min_size, max_size)."""
        return (self.min_size, self.max_size)

    def is_within_bounds(self, size: int) -> bool:
        """
        Check if a cohort size is within [min_size, max_size].

        Args:
            size: Cohort headcount to check

        Returns:
            True if min_size <= size <= max_size
        """
        return self.min_size <= size <= self.max_size

    def stands_alone(self, remainder: int) -> bool:
        """True if a leftover group this size gets its own cohort."""
        if self.absorb_at_minimum:
            return remainder > self.min_size
        return remainder >= self.min_size
