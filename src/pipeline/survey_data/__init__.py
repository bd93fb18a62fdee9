"""Survey data subpipeline: CSV import and per-column aggregation.

A consumer should import from this package rather than reaching into the
submodules directly.

Examples
--------
>>> from src.pipeline.survey_data import aggregate_columns, parse_survey_csv
>>> table = parse_survey_csv("Q1,Q2\\n,Response\\nYes,No\\n")
>>> [column.name for column in aggregate_columns(table)]
['Q1', 'Q2']
"""

from .data_aggregator import aggregate_columns, column_label, count_categories
from .data_loader import (
    load_survey_csv,
    parse_survey_csv,
    resolve_headers,
    split_csv_line,
)
from .models import CategoryCount, Column, RawTable

__all__ = [
    "CategoryCount",
    "Column",
    "RawTable",
    "aggregate_columns",
    "column_label",
    "count_categories",
    "load_survey_csv",
    "parse_survey_csv",
    "resolve_headers",
    "split_csv_line",
]
