import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import cohort_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def sample_levels():
    """Level tallies from the worked example."""
    return [
        {"level": 4, "students": 18},
        {"level": 5, "students": 25},
        {"level": 6, "students": 37},
        {"level": 7, "students": 53},
        {"level": 8, "students": 75},
        {"level": 9, "students": 5},
        {"level": 10, "students": 3},
        {"level": 11, "students": 120},
    ]


@pytest.fixture
def levels_file(tmp_path: Path, sample_levels):
    """Write sample_levels to a JSON file."""
    path = tmp_path / "levels.json"
    path.write_text(json.dumps(sample_levels), encoding="utf-8")
    return path
