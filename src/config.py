"""Global configuration constants for the project.

Defines paths, filenames and the fixed vocabulary (directive markers, dummy
header tokens, default palette) used across the report pipeline.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# CLI defaults and logging
LOG_FILENAME_GENERATE_REPORT: str = "generate_report.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Default input/output locations
ORIGINAL_CSV_PATH: Path = PROJECT_ROOT / "data" / "survey.csv"
TEMPLATE_FILE_PATH: Path = PROJECT_ROOT / "templates" / "report_template.md"
OUTPUT_REPORT_PATH: Path = PROJECT_ROOT / "output" / "report.md"
OUTPUT_CHART_DIR: Path = PROJECT_ROOT / "output" / "charts"

# CSV import
CSV_DELIMITER: str = ","
DUMMY_HEADER_TOKENS: frozenset[str] = frozenset({"Response", "Open-Ended Response"})
DUPLICATE_HEADER_SUFFIX: str = "copy"

# Directive grammar
DIRECTIVE_OPEN: str = "{{{"
DIRECTIVE_CLOSE: str = "}}}"
DIRECTIVE_FIELD_SEPARATOR: str = ";"

# Statistics and charts
UNKNOWN_LABEL: str = "Unknown"
DEFAULT_PALETTE: tuple[tuple[int, int, int], ...] = (
    (215, 63, 9),
    (170, 157, 46),
    (74, 119, 60),
)
NUMBER_WORDS: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
    "twenty",
)
FILLER_SERIES_PREFIX: str = "filler"
LEADING_FILLER_NAMES: tuple[str, ...] = ("beginning", "beginning1")
TRAILING_FILLER_NAMES: tuple[str, ...] = ("end", "end1")
CHART_FILENAME_FORMAT: str = "chart_{index}.json"
