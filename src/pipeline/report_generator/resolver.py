"""Column reference resolution and cross-column category alignment.

Directives refer to columns by header text or by spreadsheet letter label.
Once resolved, multi-column directives need every column to share the same
category slots so the values line up in a table or chart; the normalizer
fills the gaps with zero-count categories.

Both functions work on copies: the aggregated column list is shared by the
whole document pass and must stay untouched.
"""

from __future__ import annotations

import logging
from typing import Sequence

from src.exceptions import ResolutionError
from src.pipeline.survey_data.models import CategoryCount, Column

logger = logging.getLogger(__name__)


def _find_column(ref: str, columns: Sequence[Column]) -> Column | None:
    for column in columns:
        if column.name == ref:
            return column
    folded = ref.casefold()
    for column in columns:
        if column.name.casefold() == folded:
            return column
    for column in columns:
        if column.abbreviated_label.casefold() == folded:
            return column
    return None


def resolve_columns(column_refs: Sequence[str], columns: Sequence[Column]) -> list[Column]:
    """Map column references to independent copies of the matching columns.

    A reference matches by exact header first, then by header ignoring
    case, then by abbreviated label ignoring case. Unmatched references are
    dropped with a warning.

    Parameters
    ----------
    column_refs : Sequence[str]
        References in directive order.
    columns : Sequence[Column]
        Aggregated columns of the document pass.

    Returns
    -------
    list[Column]
        Copies of the resolved columns, in reference order.

    Raises
    ------
    ResolutionError
        If no reference matches a column.

    Examples
    --------
    >>> cols = [Column("Q1", "A"), Column("Q2", "B")]
    >>> [c.name for c in resolve_columns(["b", "q1", "nope"], cols)]
    ['Q2', 'Q1']
    """
    resolved: list[Column] = []
    for ref in column_refs:
        column = _find_column(ref, columns)
        if column is None:
            logger.warning("Column reference %r matches no column; skipping", ref)
            continue
        resolved.append(column.copy())
    if not resolved:
        raise ResolutionError(
            "no columns found", context={"column_refs": list(column_refs)}
        )
    return resolved


def reference_column(columns: Sequence[Column]) -> Column:
    """Return the column with the most categories, the first one on ties."""
    return max(columns, key=lambda column: len(column.categories))


def normalize_columns(columns: list[Column]) -> Column:
    """Give every column the same categories, ordered after a reference.

    The reference is the widest column (the first one on ties). Categories
    that exist only outside it are appended to it with a zero count, in
    first-seen order. Each reference category missing from another column
    is then inserted there with a zero count at the reference's position
    (or at the end when that column is shorter). Columns are modified in
    place. Afterwards every column holds the same category names, so a
    second run changes nothing.

    Returns
    -------
    Column
        The reference column, whose category order names chart series.

    Examples
    --------
    >>> a = Column("A", "A", [CategoryCount("No", 2), CategoryCount("Yes", 3)])
    >>> b = Column("B", "B", [CategoryCount("Yes", 1), CategoryCount("Maybe", 1)])
    >>> normalize_columns([a, b]) is a
    True
    >>> a.category_names, b.category_names
    (['No', 'Yes', 'Maybe'], ['No', 'Yes', 'Maybe'])
    """
    reference = reference_column(columns)
    if len(columns) < 2:
        return reference
    known = set(reference.category_names)
    for column in columns:
        for name in column.category_names:
            if name not in known:
                reference.categories.append(CategoryCount(name, 0))
                known.add(name)
    for column in columns:
        if column is reference:
            continue
        present = set(column.category_names)
        for index, category in enumerate(reference.categories):
            if category.name in present:
                continue
            column.categories.insert(
                min(index, len(column.categories)), CategoryCount(category.name, 0)
            )
            present.add(category.name)
    return reference
