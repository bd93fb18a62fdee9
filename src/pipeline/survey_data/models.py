"""Tabular and aggregated survey data structures.

``RawTable`` is what the CSV importer produces; ``Column`` and
``CategoryCount`` are what the frequency aggregator produces and what every
directive reads. The aggregate is shared across a whole document pass, so
anything that needs to reshape a column works on ``Column.copy()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd


@dataclass
class RawTable:
    """Rectangular survey table with resolved, unique column headers.

    Attributes
    ----------
    headers : list[str]
        Column headers in original CSV order.
    rows : list[dict[str, str]]
        One mapping per data row from header to cell text. Every row has a
        key for every header; missing cells are empty strings.
    """

    headers: list[str]
    rows: list[dict[str, str]] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a string-valued DataFrame in header order."""
        records = [[row.get(header, "") for header in self.headers] for row in self.rows]
        return pd.DataFrame.from_records(records, columns=self.headers)


@dataclass
class CategoryCount:
    """One distinct observed value of a column and how often it occurs."""

    name: str
    count: int = 0


@dataclass
class Column:
    """Frequency distribution of a single survey column.

    Attributes
    ----------
    name : str
        Resolved header text.
    abbreviated_label : str
        Spreadsheet-style letter label of the column position (``A``, ``AA``).
    categories : list[CategoryCount]
        Distinct non-empty values, sorted by name unless normalized.
    total_count : int
        Number of data rows.
    unknown_count : int
        Number of rows whose cell was empty.
    """

    name: str
    abbreviated_label: str
    categories: list[CategoryCount] = field(default_factory=list)
    total_count: int = 0
    unknown_count: int = 0

    @property
    def category_names(self) -> list[str]:
        return [category.name for category in self.categories]

    @property
    def known_count(self) -> int:
        return sum(category.count for category in self.categories)

    def copy(self) -> Column:
        """Return an independent copy, categories included."""
        return Column(
            name=self.name,
            abbreviated_label=self.abbreviated_label,
            categories=[CategoryCount(c.name, c.count) for c in self.categories],
            total_count=self.total_count,
            unknown_count=self.unknown_count,
        )
