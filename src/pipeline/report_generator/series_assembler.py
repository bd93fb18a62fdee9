"""Chart series assembly for graph directives.

Turns resolved columns into a drawing-independent chart description:
ordered series of labelled values with colors from the active palette.
Pixel rendering belongs to the chart collaborator (see ``chart_writer``).

Layout rules
------------
- One column: a single series whose points are the column's categories,
  plus ``Unknown`` when some rows were left blank.
- Several columns (bar only): one series per category, with one point per
  column. Invisible zero-valued filler series pad the groups apart.
- Pie: points sorted by descending value, one palette color per point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from src.config import (
    FILLER_SERIES_PREFIX,
    LEADING_FILLER_NAMES,
    TRAILING_FILLER_NAMES,
    UNKNOWN_LABEL,
)
from src.exceptions import PaletteInsufficientError
from src.pipeline.survey_data.models import Column

from .context import PipelineContext
from .directives import RGB, ChartKind, GraphDirective, StatKind
from .resolver import reference_column

logger = logging.getLogger(__name__)


@dataclass
class SeriesPoint:
    label: str
    value: float
    color: RGB | None = None

    @property
    def name(self) -> str:
        return self.label


@dataclass
class Series:
    name: str
    points: list[SeriesPoint] = field(default_factory=list)
    chart: ChartKind = ChartKind.BAR
    visible: bool = True


@dataclass
class ChartData:
    """Everything a chart collaborator needs to draw one graph directive.

    Attributes
    ----------
    title : str
        Chart title.
    font_size : int
        Axis label font size; 0 lets the renderer fit it.
    chart : ChartKind
        Bar or pie.
    stat : StatKind
        Statistic actually plotted (count or percentage).
    series : list[Series]
        Series in drawing order, fillers included.
    warnings : list[PaletteInsufficientError]
        Non-fatal problems found while assembling.
    """

    title: str
    font_size: int
    chart: ChartKind
    stat: StatKind
    series: list[Series] = field(default_factory=list)
    warnings: list[PaletteInsufficientError] = field(default_factory=list)

    @property
    def visible_series(self) -> list[Series]:
        return [series for series in self.series if series.visible]


def percentage(count: int, denominator: int) -> float:
    """Return ``count`` as a percentage of ``denominator`` to one decimal.

    Examples
    --------
    >>> percentage(1, 3)
    33.3
    >>> percentage(0, 0)
    0.0
    """
    if denominator == 0:
        return 0.0
    return round(count / denominator * 100, 1)


def apply_item_order(items: list, order: Sequence[str]) -> list:
    """Move named items toward their position in ``order``, in place.

    Walks the list once; an item whose name appears in ``order`` swaps
    places with whatever sits at that name's index in ``order``. Swaps with
    an index past the end of the list are skipped. With a full order list
    this sorts the items; with a partial one the result depends on the
    starting positions.

    Examples
    --------
    >>> pts = [SeriesPoint("No", 1), SeriesPoint("Unknown", 2), SeriesPoint("Yes", 3)]
    >>> [p.label for p in apply_item_order(pts, ["Yes", "No", "Unknown"])]
    ['Yes', 'No', 'Unknown']
    """
    if not order:
        return items
    positions = {}
    for index, name in enumerate(order):
        positions.setdefault(name, index)
    for index in range(len(items)):
        target = positions.get(items[index].name)
        if target is None or target >= len(items):
            continue
        items[index], items[target] = items[target], items[index]
    return items


def _palette_warning(
    needed: int, palette: Sequence[RGB], directive: GraphDirective
) -> PaletteInsufficientError | None:
    if needed <= len(palette):
        return None
    warning = PaletteInsufficientError(
        "not enough colors in palette; reusing colors",
        context={
            "colors_needed": needed,
            "colors_available": len(palette),
            "directive": directive.raw_input,
        },
    )
    logger.warning("%s (%s)", warning, directive.raw_input)
    return warning


def _filler(name: str, labels: Sequence[str], chart: ChartKind) -> Series:
    return Series(
        name=f"{FILLER_SERIES_PREFIX}{name}",
        points=[SeriesPoint(label, 0) for label in labels],
        chart=chart,
        visible=False,
    )


def _single_column_series(
    column: Column, directive: GraphDirective, stat: StatKind, context: PipelineContext
) -> tuple[Series, list[PaletteInsufficientError]]:
    denominator = column.known_count + column.unknown_count
    points = []
    for category in column.categories:
        value = (
            category.count
            if stat is StatKind.COUNT
            else percentage(category.count, denominator)
        )
        points.append(SeriesPoint(category.name, value))
    if column.unknown_count > 0:
        value = (
            column.unknown_count
            if stat is StatKind.COUNT
            else percentage(column.unknown_count, denominator)
        )
        points.append(SeriesPoint(UNKNOWN_LABEL, value))
    apply_item_order(points, context.order)

    warnings: list[PaletteInsufficientError] = []
    palette = context.palette
    if directive.chart is ChartKind.PIE:
        points.sort(key=lambda point: point.value, reverse=True)
        warning = _palette_warning(len(points), palette, directive)
        if warning is not None:
            warnings.append(warning)
        for index, point in enumerate(points):
            point.color = palette[index % len(palette)]
    else:
        for point in points:
            point.color = palette[0]
    return Series(column.name, points, chart=directive.chart), warnings


def _multi_column_series(
    columns: Sequence[Column],
    directive: GraphDirective,
    stat: StatKind,
    context: PipelineContext,
    reference: Column,
) -> tuple[list[Series], list[PaletteInsufficientError]]:
    names = list(reference.category_names)
    for column in columns:
        for name in column.category_names:
            if name not in names:
                names.append(name)

    series_list: list[Series] = []
    for name in names:
        points = []
        for column in columns:
            counts = {category.name: category.count for category in column.categories}
            count = counts.get(name, 0)
            value = (
                count
                if stat is StatKind.COUNT
                else percentage(count, column.known_count)
            )
            points.append(SeriesPoint(column.name, value))
        series_list.append(Series(name, points, chart=directive.chart))
    apply_item_order(series_list, context.order)

    palette = context.palette
    warnings: list[PaletteInsufficientError] = []
    warning = _palette_warning(len(series_list), palette, directive)
    if warning is not None:
        warnings.append(warning)
    for index, series in enumerate(series_list):
        color = palette[index % len(palette)]
        for point in series.points:
            point.color = color

    labels = [column.name for column in columns]
    laid_out = [_filler(name, labels, directive.chart) for name in LEADING_FILLER_NAMES]
    for index, series in enumerate(series_list):
        if index > 0:
            laid_out.append(_filler(series.name, labels, directive.chart))
        laid_out.append(series)
    laid_out.extend(_filler(name, labels, directive.chart) for name in TRAILING_FILLER_NAMES)
    return laid_out, warnings


def assemble_series(
    columns: Sequence[Column],
    directive: GraphDirective,
    context: PipelineContext,
    reference: Column | None = None,
) -> ChartData:
    """Build the chart description of a graph directive.

    Parameters
    ----------
    columns : Sequence[Column]
        Resolved columns; normalized when there are several.
    directive : GraphDirective
        Chart kind, statistic, title and font size.
    context : PipelineContext
        Active palette and category order.
    reference : Column | None, optional
        Column whose category order names the series of a multi-column
        chart, as returned by ``normalize_columns``. Defaults to the widest
        column.

    Returns
    -------
    ChartData
        Series in drawing order. Palette shortfalls are attached as
        warnings, never raised.
    """
    stat = directive.stat
    if stat not in (StatKind.COUNT, StatKind.PERCENTAGE):
        logger.warning(
            "Charts plot counts or percentages; using counts for %r",
            directive.raw_input,
        )
        stat = StatKind.COUNT

    chart = ChartData(
        title=directive.title,
        font_size=directive.font_size,
        chart=directive.chart,
        stat=stat,
    )
    if directive.chart is ChartKind.PIE and len(columns) > 1:
        logger.warning(
            "Pie chart %r names %d columns; charting only %r",
            directive.raw_input,
            len(columns),
            columns[0].name,
        )
        columns = columns[:1]

    if len(columns) == 1:
        series, warnings = _single_column_series(columns[0], directive, stat, context)
        chart.series.append(series)
    else:
        if reference is None:
            reference = reference_column(columns)
        series_list, warnings = _multi_column_series(
            columns, directive, stat, context, reference
        )
        chart.series.extend(series_list)
    chart.warnings.extend(warnings)
    logger.debug(
        "Assembled %s chart %r with %d series",
        directive.chart.value,
        directive.title,
        len(chart.series),
    )
    return chart
