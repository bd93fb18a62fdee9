"""data_aggregator.py: Per-column frequency aggregation of imported survey data.

This module turns a ``RawTable`` into one ``Column`` per header: the distinct
answers of the column with their occurrence counts, the number of rows and the
number of rows left blank. It is computed once per document pass and then
treated as read-only by every directive.

Design Principles
-----------------
- Pure functions, no I/O and no rendering logic.
- Counting is delegated to pandas (`Series.value_counts`).
- ``unknown_count + sum(category counts) == total_count`` for every column.

Usage
-----
>>> from src.pipeline.survey_data.models import RawTable
>>> table = RawTable(headers=["Q1"], rows=[{"Q1": "Yes"}, {"Q1": ""}])
>>> [(c.name, c.total_count, c.unknown_count) for c in aggregate_columns(table)]
[('Q1', 2, 1)]
"""

from __future__ import annotations

import logging

import pandas as pd

from .models import CategoryCount, Column, RawTable

logger = logging.getLogger(__name__)


def column_label(position: int) -> str:
    """Return the spreadsheet-style letter label of a 0-based column position.

    Parameters
    ----------
    position : int
        0-based column index.

    Returns
    -------
    str
        ``A`` .. ``Z``, then ``AA``, ``AB`` and so on.

    Raises
    ------
    ValueError
        If ``position`` is negative.

    Examples
    --------
    >>> [column_label(p) for p in (0, 25, 26, 701)]
    ['A', 'Z', 'AA', 'ZZ']
    """
    if position < 0:
        raise ValueError(f"Column position must be non-negative, got {position}")
    label = ""
    remaining = position + 1
    while remaining > 0:
        remaining, offset = divmod(remaining - 1, 26)
        label = chr(ord("A") + offset) + label
    return label


def count_categories(cells: pd.Series, header: str) -> list[CategoryCount]:
    """Count the distinct answers of one column, sorted by answer text.

    Blank cells and cells repeating the column's own header text are not
    answers and are left out.
    """
    answered_mask = cells.map(
        lambda value: str(value).strip() != "" and value != header
    ).astype(bool)
    answered = cells[answered_mask]
    counts = answered.value_counts(sort=False)
    categories = [CategoryCount(str(name), int(count)) for name, count in counts.items()]
    categories.sort(key=lambda category: category.name)
    return categories


def aggregate_columns(table: RawTable) -> list[Column]:
    """Aggregate every column of the table into a frequency distribution.

    Parameters
    ----------
    table : RawTable
        Imported survey table.

    Returns
    -------
    list[Column]
        One column per header, in header order. ``total_count`` is the number
        of data rows; rows without an answer make up ``unknown_count``.
    """
    frame = table.to_frame()
    columns: list[Column] = []
    for position, header in enumerate(table.headers):
        categories = count_categories(frame.iloc[:, position], header)
        total = len(frame.index)
        known = sum(category.count for category in categories)
        columns.append(
            Column(
                name=header,
                abbreviated_label=column_label(position),
                categories=categories,
                total_count=total,
                unknown_count=total - known,
            )
        )
    logger.debug("Aggregated %d columns over %d rows", len(columns), len(frame.index))
    return columns
