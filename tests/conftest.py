"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides shared survey CSV and aggregated column fixtures.
"""

import os
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from src.pipeline.survey_data import aggregate_columns, parse_survey_csv  # noqa: E402

SURVEY_CSV = (
    "Do you like the course?,How many classes did you attend?,Rate the topics,,\n"
    "Response,Response,Loops,Functions,Classes\n"
    "Yes,three,Good,Poor,Good\n"
    "No,two,Good,,Fair\n"
    "Yes,,Poor,Good,Good\n"
    ",three,Loops,Good,\n"
)


@pytest.fixture
def survey_csv_text() -> str:
    """Five-column survey export: two single questions and a grouped rating question."""
    return SURVEY_CSV


@pytest.fixture
def survey_columns(survey_csv_text):
    """Aggregated columns of ``survey_csv_text``."""
    return aggregate_columns(parse_survey_csv(survey_csv_text))


@pytest.fixture
def survey_csv_file(tmp_path, survey_csv_text) -> Path:
    path = tmp_path / "survey.csv"
    path.write_text(survey_csv_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_report_env(monkeypatch):
    """Keep developer ``REPORT_*`` variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("REPORT_"):
            monkeypatch.delenv(name, raising=False)
