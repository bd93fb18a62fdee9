"""Report generator subpipeline: directive parsing, statistics and charts.

Exposes the public API of the directive engine so callers can import from
``src.pipeline.report_generator`` directly.
"""

from .chart_writer import JsonChartWriter
from .context import PipelineContext
from .directives import (
    ChartKind,
    Directive,
    GraphDirective,
    InvalidDirective,
    OrderDirective,
    PaletteDirective,
    StatKind,
    TextDirective,
    parse_directive,
)
from .processor import (
    DirectiveOutcome,
    process_directive,
    process_directives,
    render_document,
)
from .resolver import normalize_columns, resolve_columns
from .series_assembler import ChartData, Series, SeriesPoint, assemble_series
from .templating import TemplateDocument, extract_directives, load_template
from .text_renderer import render_text, word_to_int

__all__ = [
    "ChartData",
    "ChartKind",
    "Directive",
    "DirectiveOutcome",
    "GraphDirective",
    "InvalidDirective",
    "JsonChartWriter",
    "OrderDirective",
    "PaletteDirective",
    "PipelineContext",
    "Series",
    "SeriesPoint",
    "StatKind",
    "TemplateDocument",
    "TextDirective",
    "assemble_series",
    "extract_directives",
    "load_template",
    "normalize_columns",
    "parse_directive",
    "process_directive",
    "process_directives",
    "render_document",
    "render_text",
    "resolve_columns",
    "word_to_int",
]
