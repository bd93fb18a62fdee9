"""CSV importer for survey exports with a two-row header.

Survey tools export one question per column group: the first header row holds
the question text (only on the first column of a group) and the second row
holds either the answer option label or a dummy token such as ``Response``.
This module resolves that convention into one clean header per column and
reads the data rows beneath it.

Fields are split with the ``csv`` module one physical line at a time, so a
double-quoted field may contain literal commas but never a line break. An
unterminated quote swallows the rest of its line only.

No file dialogs or document I/O live here; ``load_survey_csv`` is the only
function that touches the filesystem.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from src.config import CSV_DELIMITER, DUMMY_HEADER_TOKENS, DUPLICATE_HEADER_SUFFIX
from src.exceptions import FormatError

from .data_aggregator import column_label
from .models import RawTable

logger = logging.getLogger(__name__)


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into fields, reassembling quoted fields.

    Parameters
    ----------
    line : str
        A single physical line without its line terminator.

    Returns
    -------
    list[str]
        The logical fields with their enclosing quotes removed.

    Examples
    --------
    >>> split_csv_line('a,"b,c",d')
    ['a', 'b,c', 'd']
    >>> split_csv_line('')
    []
    """
    return next(csv.reader([line], delimiter=CSV_DELIMITER), [])


def resolve_headers(first_row: list[str], second_row: list[str]) -> list[str]:
    """Resolve the header of every column from the two header rows.

    The second-row cell wins when it is non-empty and not a dummy token;
    otherwise the first-row cell is used. A column where both are empty is
    named after its letter label. Duplicates get ``copy`` appended until
    unique.

    Parameters
    ----------
    first_row : list[str]
        Fields of the first header line.
    second_row : list[str]
        Fields of the second header line.

    Returns
    -------
    list[str]
        Unique header names, one per column.

    Examples
    --------
    >>> resolve_headers(["Q1", "Q2"], ["", "Open-Ended Response"])
    ['Q1', 'Q2']
    >>> resolve_headers(["Q", "", ""], ["Response", "Yes", "Yes"])
    ['Q', 'Yes', 'Yescopy']
    """
    width = max(len(first_row), len(second_row))
    headers: list[str] = []
    seen: set[str] = set()
    for position in range(width):
        primary = first_row[position].strip() if position < len(first_row) else ""
        secondary = second_row[position].strip() if position < len(second_row) else ""
        if secondary and secondary not in DUMMY_HEADER_TOKENS:
            header = secondary
        elif primary:
            header = primary
        else:
            header = column_label(position)
        while header in seen:
            header += DUPLICATE_HEADER_SUFFIX
        seen.add(header)
        headers.append(header)
    return headers


def parse_survey_csv(text: str) -> RawTable:
    """Parse raw survey CSV text into a ``RawTable``.

    Parameters
    ----------
    text : str
        Whole CSV document: two header lines followed by data lines.

    Returns
    -------
    RawTable
        Resolved headers and one row mapping per non-blank data line.

    Raises
    ------
    FormatError
        If either header line is missing.

    Notes
    -----
    Rows with fewer fields than headers are padded with empty cells and
    logged; surplus fields are ignored. Cells holding a dummy token are
    stored as empty.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if len(lines) < 2:
        raise FormatError(
            "CSV must start with two header lines",
            context={"line_count": len(lines)},
        )
    headers = resolve_headers(split_csv_line(lines[0]), split_csv_line(lines[1]))
    rows: list[dict[str, str]] = []
    for line_number, line in enumerate(lines[2:], start=3):
        if not line.strip():
            continue
        fields = split_csv_line(line)
        if len(fields) < len(headers):
            logger.warning(
                "Line %d has %d fields, expected %d; padding with empty cells",
                line_number,
                len(fields),
                len(headers),
            )
        row: dict[str, str] = {}
        for position, header in enumerate(headers):
            value = fields[position] if position < len(fields) else ""
            row[header] = "" if value in DUMMY_HEADER_TOKENS else value
        rows.append(row)
    logger.debug("Parsed %d columns and %d rows", len(headers), len(rows))
    return RawTable(headers=headers, rows=rows)


def load_survey_csv(csv_path: Path) -> RawTable:
    """Read a UTF-8 survey CSV from disk and parse it.

    Raises
    ------
    FileNotFoundError
        If the file is missing.
    FormatError
        If the header lines are missing.
    """
    with Path(csv_path).open("r", encoding="utf-8-sig", newline="") as csvfile:
        return parse_survey_csv(csvfile.read())
