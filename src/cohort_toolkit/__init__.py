"""Top-level package for the Cohort Toolkit.

Provides subpackages:
- cohort_toolkit.core – level/plan/assessment models, schema validation, serialization
- cohort_toolkit.planner – cohort sizing, level tallies and plan reports
- cohort_toolkit.cli – `cohort-plan` command line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("cohort-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
