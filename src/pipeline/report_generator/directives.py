"""Directive model and parser for ``{{{ ... }}}`` template commands.

A directive is a semicolon-separated command placed in a report template::

    bar;count;ColumnA;ColumnB;My Title
    pie;percentage;12;Survey Results
    count;ColumnA
    colors;215,63,9;170,157,46
    order;Yes;No;Unknown

The first field selects the output (graph, text, palette or order
declaration), the second the statistic, and the rest name columns, an
optional font size and a chart title. Parsing never raises: malformed input
yields an ``InvalidDirective`` carrying the reason.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Union

from src.config import DIRECTIVE_FIELD_SEPARATOR

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


class StatKind(str, enum.Enum):
    COUNT = "count"
    PERCENTAGE = "percentage"
    MEAN = "mean"
    RANGE = "range"
    RAW_VALUE = "raw_value"


class ChartKind(str, enum.Enum):
    BAR = "bar"
    PIE = "pie"


@dataclass(frozen=True)
class TextDirective:
    """Substitute a text statistic computed from one or more columns."""

    stat: StatKind
    column_refs: tuple[str, ...]
    raw_input: str


@dataclass(frozen=True)
class GraphDirective:
    """Substitute a chart built from one or more columns."""

    stat: StatKind
    column_refs: tuple[str, ...]
    raw_input: str
    chart: ChartKind
    title: str
    font_size: int = 0


@dataclass(frozen=True)
class PaletteDirective:
    """Declare the colors used by every later chart."""

    colors: tuple[RGB, ...]
    raw_input: str


@dataclass(frozen=True)
class OrderDirective:
    """Declare the display precedence of categories for every later chart."""

    categories: tuple[str, ...]
    raw_input: str


@dataclass(frozen=True)
class InvalidDirective:
    """A directive that could not be parsed, with the reason why."""

    reason: str
    raw_input: str
    details: dict[str, str] = field(default_factory=dict, compare=False)


Directive = Union[
    TextDirective, GraphDirective, PaletteDirective, OrderDirective, InvalidDirective
]


def clean_field(value: str) -> str:
    """Trim surrounding spaces and trailing closing braces from a field.

    Examples
    --------
    >>> clean_field("  My Title}}} ")
    'My Title'
    """
    return value.strip().rstrip("}").strip()


def classify_stat(selector: str) -> StatKind:
    """Map a lower-cased statistic selector to a ``StatKind``.

    Substring containment, first match wins.

    Examples
    --------
    >>> classify_stat("percentage")
    <StatKind.PERCENTAGE: 'percentage'>
    >>> classify_stat("q1")
    <StatKind.RAW_VALUE: 'raw_value'>
    """
    if "range" in selector:
        return StatKind.RANGE
    if "mean" in selector:
        return StatKind.MEAN
    if "percentage" in selector or "%" in selector:
        return StatKind.PERCENTAGE
    if "count" in selector:
        return StatKind.COUNT
    return StatKind.RAW_VALUE


def parse_color(value: str) -> RGB | None:
    """Parse an ``r,g,b`` triple; return ``None`` when it is not valid."""
    parts = [part.strip() for part in clean_field(value).split(",")]
    if len(parts) != 3 or not all(part.isdecimal() for part in parts):
        return None
    red, green, blue = (int(part) for part in parts)
    if not all(0 <= component <= 255 for component in (red, green, blue)):
        return None
    return (red, green, blue)


def _parse_palette(fields: list[str], raw: str) -> Directive:
    colors: list[RGB] = []
    for entry in fields[1:]:
        if not clean_field(entry):
            continue
        color = parse_color(entry)
        if color is None:
            return InvalidDirective(
                "bad palette color", raw, details={"color": clean_field(entry)}
            )
        colors.append(color)
    if not colors:
        return InvalidDirective("palette declares no colors", raw)
    return PaletteDirective(colors=tuple(colors), raw_input=raw)


def _parse_order(fields: list[str], raw: str) -> Directive:
    categories = tuple(clean_field(entry) for entry in fields[1:] if clean_field(entry))
    if not categories:
        return InvalidDirective("order declares no categories", raw)
    return OrderDirective(categories=categories, raw_input=raw)


def _parse_graph(
    fields: list[str], chart: ChartKind, stat: StatKind, raw: str
) -> Directive:
    if len(fields) < 3:
        return InvalidDirective("graph directive requires a title", raw)
    start = 2
    font_size = 0
    # A bare integer third field is a font size only when a title still follows.
    if len(fields) > 3 and clean_field(fields[2]).isdecimal():
        font_size = int(clean_field(fields[2]))
        start = 3
    refs = tuple(clean_field(entry) for entry in fields[start:-1])
    return GraphDirective(
        stat=stat,
        column_refs=tuple(ref for ref in refs if ref),
        raw_input=raw,
        chart=chart,
        title=clean_field(fields[-1]),
        font_size=font_size,
    )


def parse_directive(raw: str) -> Directive:
    """Parse a directive with its ``{{{``/``}}}`` markers already removed.

    Parameters
    ----------
    raw : str
        Directive text, e.g. ``"bar;count;ColA;ColB;Title"``.

    Returns
    -------
    Directive
        The structured directive, or ``InvalidDirective`` when required
        fields are missing or a palette color is malformed.

    Examples
    --------
    >>> d = parse_directive("bar;count;ColA;ColB;Title")
    >>> d.chart, d.stat, d.column_refs, d.title, d.font_size
    (<ChartKind.BAR: 'bar'>, <StatKind.COUNT: 'count'>, ('ColA', 'ColB'), 'Title', 0)
    >>> parse_directive("colors;255,0,0;0,255,0").colors
    ((255, 0, 0), (0, 255, 0))
    >>> parse_directive("bar").reason
    'malformed directive'
    """
    fields = raw.split(DIRECTIVE_FIELD_SEPARATOR)
    if len(fields) < 2:
        logger.debug("Directive %r has fewer than two fields", raw)
        return InvalidDirective("malformed directive", raw)
    output_type = fields[0].strip().lower()
    selector = fields[1].strip().lower()

    if "colors" in output_type or "colorpalette" in output_type:
        return _parse_palette(fields, raw)
    if "order" in output_type:
        return _parse_order(fields, raw)

    stat = classify_stat(selector)
    if "bar" in output_type:
        return _parse_graph(fields, ChartKind.BAR, stat, raw)
    if "pie" in output_type:
        return _parse_graph(fields, ChartKind.PIE, stat, raw)
    if stat is StatKind.RAW_VALUE:
        ref = clean_field(fields[1])
        return TextDirective(stat=stat, column_refs=(ref,) if ref else (), raw_input=raw)
    refs = tuple(clean_field(entry) for entry in fields[2:])
    return TextDirective(
        stat=stat, column_refs=tuple(ref for ref in refs if ref), raw_input=raw
    )
