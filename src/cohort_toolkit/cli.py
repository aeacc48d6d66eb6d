"""
Command line entry point: plan cohorts from a JSON file.

Examples:
    cohort-plan levels.json
    cohort-plan levels.json --ideal 25 --min-size 8 -o plan.json
    cohort-plan assessments.json --from-assessments --subject math
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cohort_toolkit import __version__
from cohort_toolkit.core.models import InvalidInput
from cohort_toolkit.core.schemas.validator import ValidationError
from cohort_toolkit.core.utils.serialization import (
    load_assessments_json,
    load_levels_json,
    report_to_json,
    save_report_json,
)
from cohort_toolkit.planner import (
    InvalidConfiguration,
    PlannerConfig,
    build_plan_report,
    tally_levels,
)
from cohort_toolkit.planner.config import DEFAULT_IDEAL, DEFAULT_MAX_SIZE, DEFAULT_MIN_SIZE

logger = logging.getLogger("cohort_plan")

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cohort-plan",
        description="Split students at each level into teaching cohorts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input formats:
  levels       [{"level": 4, "students": 18}, ...]
  assessments  [{"student_id": "s1", "subject": "math", "level": 3, "date": "2024-06-01"}, ...]
        """,
    )
    parser.add_argument("input", type=Path, help="JSON file of levels (or assessments)")
    parser.add_argument("--ideal", type=int, default=DEFAULT_IDEAL,
                        help=f"Target cohort size (default: {DEFAULT_IDEAL})")
    parser.add_argument("--min-size", type=int, default=DEFAULT_MIN_SIZE,
                        help=f"Smallest acceptable cohort (default: {DEFAULT_MIN_SIZE})")
    parser.add_argument("--max-size", type=int, default=DEFAULT_MAX_SIZE,
                        help=f"Largest acceptable cohort (default: {DEFAULT_MAX_SIZE})")
    parser.add_argument("--strict-minimum", action="store_true",
                        help="Give a remainder equal to --min-size its own cohort")
    parser.add_argument("--from-assessments", action="store_true",
                        help="Input holds assessment records; tally levels first")
    parser.add_argument("--subject", help="With --from-assessments, only count this subject")
    parser.add_argument("-o", "--output", type=Path, help="Write the report here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )

    try:
        config = PlannerConfig(
            ideal=args.ideal,
            min_size=args.min_size,
            max_size=args.max_size,
            absorb_at_minimum=not args.strict_minimum,
        )
        if args.from_assessments:
            records = load_assessments_json(args.input)
            levels = tally_levels(records, subject=args.subject)
            logger.info(f"Tallied {len(records)} assessments into {len(levels)} levels")
        else:
            levels = load_levels_json(args.input)
        report = build_plan_report(levels, config)
    except (InvalidConfiguration, InvalidInput, ValidationError) as e:
        logger.error(str(e))
        return EXIT_INVALID
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return EXIT_INVALID

    if args.output:
        save_report_json(report.to_dict(), args.output)
        logger.info(f"Report saved to: {args.output}")
    else:
        print(report_to_json(report.to_dict()))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
