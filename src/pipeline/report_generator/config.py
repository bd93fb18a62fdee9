"""Configuration and environment loader for the report generator.

This module provides ``ReportConfig``, which resolves the input and output
locations of a report run and its behavior switches from environment
variables and an optional project ``.env`` file, falling back to the
defaults in ``src/config.py``.

Role in Architecture
--------------------
- Boundary between the process environment (shell, CI, ``.env``) and the
  runner's typed settings.
- No pipeline logic: only loading, structuring and validation.

Recognized variables
--------------------
``REPORT_CSV_PATH``, ``REPORT_TEMPLATE_PATH``, ``REPORT_OUTPUT_PATH``,
``REPORT_CHART_DIR``, ``REPORT_STRICT`` (``1``/``true``/``yes``/``on`` or
``0``/``false``/``no``/``off``) and ``REPORT_DEFAULT_PALETTE`` (colors as
``r,g,b`` separated by ``;``).

Examples
--------
>>> import os
>>> os.environ["REPORT_STRICT"] = "true"
>>> from src.pipeline.report_generator.config import ReportConfig
>>> ReportConfig().strict
True
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

import src.config as _project_config
from src.config import (
    DEFAULT_PALETTE,
    ORIGINAL_CSV_PATH,
    OUTPUT_CHART_DIR,
    OUTPUT_REPORT_PATH,
    TEMPLATE_FILE_PATH,
)
from src.exceptions import ConfigurationError

from .directives import RGB, parse_color

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def parse_bool(name: str, value: str) -> bool:
    folded = value.strip().lower()
    if folded in _TRUE_VALUES:
        return True
    if folded in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {value!r}", context={"variable": name}
    )


def parse_palette(name: str, value: str) -> tuple[RGB, ...]:
    """Parse a ``;``-separated list of ``r,g,b`` colors.

    Examples
    --------
    >>> parse_palette("P", "255,0,0; 0,0,255")
    ((255, 0, 0), (0, 0, 255))
    """
    colors: list[RGB] = []
    for entry in value.split(";"):
        if not entry.strip():
            continue
        color = parse_color(entry)
        if color is None:
            raise ConfigurationError(
                f"{name} has an invalid color {entry.strip()!r}",
                context={"variable": name},
            )
        colors.append(color)
    if not colors:
        raise ConfigurationError(f"{name} declares no colors", context={"variable": name})
    return tuple(colors)


class ReportConfig:
    r"""Settings of one report run.

    Attributes
    ----------
    csv_path : Path
        Survey CSV to import.
    template_path : Path
        Template containing the directives.
    output_path : Path
        Where the rendered report is written.
    chart_dir : Path
        Directory receiving chart files.
    strict : bool
        Abort the run on the first directive error.
    default_palette : tuple[RGB, ...]
        Palette in effect before any palette directive.

    Raises
    ------
    ConfigurationError
        If ``REPORT_STRICT`` or ``REPORT_DEFAULT_PALETTE`` cannot be parsed.
    """

    def __init__(self) -> None:
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            # The project .env is authoritative for the process.
            load_dotenv(env_path, override=True)
        self.csv_path = Path(os.getenv("REPORT_CSV_PATH") or ORIGINAL_CSV_PATH)
        self.template_path = Path(
            os.getenv("REPORT_TEMPLATE_PATH") or TEMPLATE_FILE_PATH
        )
        self.output_path = Path(os.getenv("REPORT_OUTPUT_PATH") or OUTPUT_REPORT_PATH)
        self.chart_dir = Path(os.getenv("REPORT_CHART_DIR") or OUTPUT_CHART_DIR)
        self.strict = parse_bool("REPORT_STRICT", os.getenv("REPORT_STRICT", ""))
        palette = os.getenv("REPORT_DEFAULT_PALETTE")
        self.default_palette: tuple[RGB, ...] = (
            parse_palette("REPORT_DEFAULT_PALETTE", palette)
            if palette
            else DEFAULT_PALETTE
        )
