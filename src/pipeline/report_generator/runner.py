"""Report Generator Runner Module.

This module provides the programmatic entrypoint and logging configuration
for a report run. It is the boundary between the CLI and the pipeline: it
wires the CSV importer, the aggregator, the directive processor, the chart
writer and the template host together, and turns failures into a boolean
result. No directive logic lives here.

Examples
--------
>>> from src.pipeline.report_generator.runner import configure_logging, run_from_config
>>> configure_logging(log_level="INFO", enable_file=False)
>>> success = run_from_config()  # run with config defaults
>>> assert isinstance(success, bool)
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from src.config import LOG_DIR, LOG_FILENAME_GENERATE_REPORT, LOG_FORMAT
from src.exceptions import AppError
from src.pipeline.survey_data import aggregate_columns, load_survey_csv

from .chart_writer import JsonChartWriter
from .config import ReportConfig
from .console import print_summary
from .context import PipelineContext
from .processor import render_document
from .templating import load_template

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging for a report run.

    Sets up a console handler and, optionally, a file handler writing to
    ``LOG_DIR / LOG_FILENAME_GENERATE_REPORT``. Existing root handlers are
    removed first, so calling it again replaces the previous setup.

    Parameters
    ----------
    log_level : str, optional
        The logging level (e.g., "INFO", "DEBUG"). Defaults to "INFO".
    enable_file : bool, optional
        Whether to also write logs to the log file. Defaults to True.

    Notes
    -----
    If the log directory cannot be created the run continues with console
    logging only and a warning is logged.

    Examples
    --------
    >>> configure_logging(log_level="DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error: OSError | None = None
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_GENERATE_REPORT, mode="a"),
            )
        except OSError as exc:
            file_error = exc
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    if file_error is not None:
        logger.warning("File logging disabled: %s", file_error)


def write_report(output_path: Path, text: str) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        fh.write(text)


def run_from_config(
    csv_path: Path | None = None,
    template_path: Path | None = None,
    output_path: Path | None = None,
    chart_dir: Path | None = None,
    strict: bool | None = None,
    config: ReportConfig | None = None,
    console: Console | None = None,
) -> bool:
    """Generate a report using provided paths or configured defaults.

    Parameters
    ----------
    csv_path, template_path, output_path, chart_dir : Path | None
        Overrides for the corresponding ``ReportConfig`` settings.
    strict : bool | None
        Override of ``ReportConfig.strict``.
    config : ReportConfig | None
        Preloaded configuration; loaded from the environment when omitted.
    console : Console | None
        Console receiving the run summary.

    Returns
    -------
    bool
        True when the report was written, False on any failure (logged).
    """
    try:
        cfg = config if config is not None else ReportConfig()
        csv_path = Path(csv_path) if csv_path is not None else cfg.csv_path
        template_path = (
            Path(template_path) if template_path is not None else cfg.template_path
        )
        output_path = Path(output_path) if output_path is not None else cfg.output_path
        chart_dir = Path(chart_dir) if chart_dir is not None else cfg.chart_dir
        strict = cfg.strict if strict is None else strict

        columns = aggregate_columns(load_survey_csv(csv_path))
        logger.info("Loaded %d columns from %s", len(columns), csv_path)
        template = load_template(template_path)
        text, outcomes = render_document(
            template,
            columns,
            JsonChartWriter(chart_dir),
            strict=strict,
            context=PipelineContext(palette=cfg.default_palette),
        )
        write_report(output_path, text)
        print_summary(outcomes, console)
        logger.info("Wrote report to %s", output_path)
        return True
    except AppError as exc:
        logger.error("Failed to generate report: %s", exc, extra={"error": exc.to_dict()})
        return False
    except Exception as exc:
        logger.exception("Failed to generate report: %s", exc)
        return False


__all__ = [
    "configure_logging",
    "run_from_config",
    "write_report",
]
