"""JSON chart writer: the reference chart collaborator.

Each assembled chart is written as one JSON document that a plotting front
end can draw without knowing anything about the survey data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from src.config import CHART_FILENAME_FORMAT
from src.exceptions import RenderError

from .directives import RGB
from .series_assembler import ChartData

logger = logging.getLogger(__name__)


def rgb_to_hex(color: RGB | None) -> str | None:
    """Format an RGB triple as ``#rrggbb``.

    Examples
    --------
    >>> rgb_to_hex((215, 63, 9))
    '#d73f09'
    """
    if color is None:
        return None
    return "#{:02x}{:02x}{:02x}".format(*color)


def chart_to_dict(chart: ChartData) -> dict[str, Any]:
    return {
        "title": chart.title,
        "font_size": chart.font_size,
        "chart": chart.chart.value,
        "stat": chart.stat.value,
        "series": [
            {
                "name": series.name,
                "visible": series.visible,
                "points": [
                    {
                        "label": point.label,
                        "value": point.value,
                        "color": rgb_to_hex(point.color),
                    }
                    for point in series.points
                ],
            }
            for series in chart.series
        ],
        "warnings": [warning.to_dict() for warning in chart.warnings],
    }


class JsonChartWriter:
    """Write charts as numbered JSON files into a directory.

    Parameters
    ----------
    chart_dir : Path
        Output directory, created on first write.
    """

    def __init__(self, chart_dir: Path) -> None:
        self.chart_dir = Path(chart_dir)
        self.written: list[Path] = []

    def write(self, chart: ChartData) -> Path:
        """Write one chart and return its path.

        Raises
        ------
        RenderError
            If the directory or file cannot be written.
        """
        path = self.chart_dir / CHART_FILENAME_FORMAT.format(index=len(self.written) + 1)
        try:
            self.chart_dir.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as fh:
                json.dump(chart_to_dict(chart), fh, ensure_ascii=False, indent=2)
        except OSError as exc:
            raise RenderError(
                f"failed to write chart: {exc}", context={"path": str(path)}
            ) from exc
        self.written.append(path)
        logger.debug("Wrote chart %r to %s", chart.title, path)
        return path
