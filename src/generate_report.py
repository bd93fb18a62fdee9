"""Report generation from a survey CSV and a directive template.

This script imports a survey CSV, aggregates every column and fills each
``{{{ ... }}}`` directive of a Markdown template with a statistic or a chart
file reference. Defaults come from ``ReportConfig`` (environment, ``.env``
and ``src.config``); command-line options override them.

Usage
-----
python -m src.generate_report --csv-path ... --template-path ... --output-path ... [--strict] [--log-level ...]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from src.pipeline.report_generator.runner import configure_logging, run_from_config

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Path options default to ``None`` so unset options fall through to the
    configured defaults.
    """
    parser = argparse.ArgumentParser(
        description="Generate a report from survey CSV data and a directive template."
    )
    parser.add_argument(
        "--csv-path", type=Path, default=None, help="Path to the survey CSV file."
    )
    parser.add_argument(
        "--template-path",
        type=Path,
        default=None,
        help="Path to the report template containing {{{...}}} directives.",
    )
    parser.add_argument(
        "--output-path",
        type=Path,
        default=None,
        help="Path of the rendered report.",
    )
    parser.add_argument(
        "--chart-dir",
        type=Path,
        default=None,
        help="Directory to write chart files.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Abort on the first directive that cannot be rendered.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run report generation from CLI arguments.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 on failure.
    """
    args = parse_arguments(argv)
    disable_file = bool(
        os.environ.get("DISABLE_FILE_LOGS") or os.environ.get("PYTEST_CURRENT_TEST")
    )
    configure_logging(args.log_level, enable_file=not disable_file)
    logger.info("Starting report generation")
    success = run_from_config(
        csv_path=args.csv_path,
        template_path=args.template_path,
        output_path=args.output_path,
        chart_dir=args.chart_dir,
        strict=args.strict,
    )
    return 0 if success else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
