"""Text statistics for text directives.

Survey answers on numeric scales are exported as English number words
(``"three"``, ``"twelve"``); ``range`` and ``mean`` convert them back with
``word_to_int`` and ignore categories that are not number words.
"""

from __future__ import annotations

import logging
from typing import Sequence

from src.config import NUMBER_WORDS, UNKNOWN_LABEL
from src.exceptions import ConversionError, ResolutionError
from src.pipeline.survey_data.models import Column

from .directives import StatKind, TextDirective

logger = logging.getLogger(__name__)


def word_to_int(word: str) -> int | None:
    """Convert an English number word from zero to twenty to an int.

    Examples
    --------
    >>> word_to_int("Twelve")
    12
    >>> word_to_int("many") is None
    True
    """
    folded = word.strip().lower()
    if folded in NUMBER_WORDS:
        return NUMBER_WORDS.index(folded)
    return None


def format_mean(value: float) -> str:
    """Round to two decimals and drop trailing zeros.

    Examples
    --------
    >>> [format_mean(v) for v in (8 / 3, 3.0, 2.5)]
    ['2.67', '3', '2.5']
    """
    return f"{round(value, 2):g}"


def render_raw_value(columns: Sequence[Column]) -> str:
    first = columns[0]
    if not first.categories:
        raise ResolutionError(
            "column has no values", context={"column": first.name}
        )
    return first.categories[0].name


def render_count(columns: Sequence[Column]) -> str:
    """Concatenate the category counts of every column.

    With several categories each one renders as ``"<name>: <count>, "``; a
    single category renders as its bare count. Blank answers follow as
    ``"Unknown: <n>"`` when there are any.

    Examples
    --------
    >>> from src.pipeline.survey_data.models import CategoryCount
    >>> col = Column("Q", "A", [CategoryCount("No", 1), CategoryCount("Yes", 2)],
    ...              total_count=4, unknown_count=1)
    >>> render_count([col])
    'No: 1, Yes: 2, Unknown: 1'
    """
    parts: list[str] = []
    for column in columns:
        if len(column.categories) > 1:
            parts.extend(f"{c.name}: {c.count}, " for c in column.categories)
        else:
            parts.extend(str(c.count) for c in column.categories)
        if column.unknown_count != 0:
            parts.append(f"{UNKNOWN_LABEL}: {column.unknown_count}")
    return "".join(parts)


def render_range(columns: Sequence[Column]) -> str:
    values: list[int] = []
    for column in columns:
        for category in column.categories:
            value = word_to_int(category.name)
            if value is not None:
                values.append(value)
    if not values:
        raise ConversionError(
            "no numeric categories for range",
            context={"columns": [column.name for column in columns]},
        )
    return f"{min(values)} - {max(values)}"


def render_mean(columns: Sequence[Column]) -> str:
    """Weighted mean of the number-word categories.

    Categories that are not number words still count toward the
    denominator.
    """
    total = 0
    denominator = 0
    converted = False
    for column in columns:
        for category in column.categories:
            value = word_to_int(category.name)
            if value is not None:
                total += value * category.count
                converted = True
            denominator += category.count
    if not converted or denominator == 0:
        raise ConversionError(
            "no numeric categories for mean",
            context={"columns": [column.name for column in columns]},
        )
    return format_mean(total / denominator)


_RENDERERS = {
    StatKind.RAW_VALUE: render_raw_value,
    StatKind.COUNT: render_count,
    StatKind.PERCENTAGE: render_count,
    StatKind.RANGE: render_range,
    StatKind.MEAN: render_mean,
}


def render_text(columns: Sequence[Column], directive: TextDirective) -> str:
    """Render the text value of a text directive.

    Parameters
    ----------
    columns : Sequence[Column]
        Resolved (and, for several columns, normalized) columns.
    directive : TextDirective
        Directive selecting the statistic.

    Returns
    -------
    str
        Text to substitute for the directive.

    Raises
    ------
    ResolutionError
        If ``raw_value`` is requested on a column without values.
    ConversionError
        If ``range`` or ``mean`` finds nothing to compute from.

    Notes
    -----
    A text ``percentage`` has no text form of its own and renders like
    ``count``.
    """
    if directive.stat is StatKind.PERCENTAGE:
        logger.warning(
            "Percentage text is not supported; rendering counts for %r",
            directive.raw_input,
        )
    return _RENDERERS[directive.stat](columns)
