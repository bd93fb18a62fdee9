"""Directive processing: the core loop of a report pass.

Directives are processed strictly in document order. Palette and order
declarations produce a new ``PipelineContext`` for the directives after
them; text and graph directives produce an outcome for the host to
substitute. Errors of a single directive are carried on its outcome, so the
host decides whether to skip it or abort the pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Protocol, Sequence

from src.exceptions import AppError, ConversionError, FormatError, ResolutionError
from src.pipeline.survey_data.models import Column

from .context import PipelineContext
from .directives import (
    Directive,
    GraphDirective,
    InvalidDirective,
    OrderDirective,
    PaletteDirective,
    TextDirective,
    parse_directive,
)
from .resolver import normalize_columns, resolve_columns
from .series_assembler import ChartData, assemble_series
from .templating import TemplateDocument
from .text_renderer import render_text

logger = logging.getLogger(__name__)


class ChartWriter(Protocol):
    """Anything that persists a chart and returns where it went."""

    def write(self, chart: ChartData) -> Path: ...


@dataclass
class DirectiveOutcome:
    """Result of one directive, handed back to the document host.

    Exactly one of ``text``, ``chart`` or ``error`` is set for text and
    graph directives; palette and order declarations set none of them.
    """

    directive: Directive
    text: str | None = None
    chart: ChartData | None = None
    error: AppError | None = None
    chart_path: Path | None = None
    context: PipelineContext = field(default_factory=PipelineContext)

    @property
    def kind(self) -> str:
        if isinstance(self.directive, TextDirective):
            return "text"
        if isinstance(self.directive, GraphDirective):
            return self.directive.chart.value
        if isinstance(self.directive, PaletteDirective):
            return "palette"
        if isinstance(self.directive, OrderDirective):
            return "order"
        return "invalid"

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def warnings(self) -> list[AppError]:
        return list(self.chart.warnings) if self.chart is not None else []


def process_directive(
    raw: str, columns: Sequence[Column], context: PipelineContext
) -> DirectiveOutcome:
    """Parse and execute one directive.

    Parameters
    ----------
    raw : str
        Directive text without its markers.
    columns : Sequence[Column]
        Aggregated columns; never modified.
    context : PipelineContext
        Context in effect before this directive.

    Returns
    -------
    DirectiveOutcome
        The result, with ``context`` set to the context in effect after
        this directive.
    """
    directive = parse_directive(raw)
    logger.debug("Processing directive %r as %s", raw, type(directive).__name__)

    if isinstance(directive, InvalidDirective):
        error = FormatError(
            directive.reason, context={"directive": raw, **directive.details}
        )
        logger.warning("Invalid directive %r: %s", raw, directive.reason)
        return DirectiveOutcome(directive, error=error, context=context)
    if isinstance(directive, (PaletteDirective, OrderDirective)):
        return DirectiveOutcome(directive, context=context.apply(directive))

    try:
        resolved = resolve_columns(directive.column_refs, columns)
        reference = normalize_columns(resolved)
        if isinstance(directive, GraphDirective):
            chart = assemble_series(resolved, directive, context, reference=reference)
            return DirectiveOutcome(directive, chart=chart, context=context)
        text = render_text(resolved, directive)
        return DirectiveOutcome(directive, text=text, context=context)
    except (ResolutionError, ConversionError) as exc:
        logger.warning("Directive %r failed: %s", raw, exc)
        return DirectiveOutcome(directive, error=exc, context=context)


def process_directives(
    next_directive: Callable[[], str | None],
    columns: Sequence[Column],
    context: PipelineContext | None = None,
) -> Iterator[DirectiveOutcome]:
    """Process directives supplied by the host until it returns ``None``.

    The host is asked for the next directive only after the previous
    outcome has been consumed, so it can substitute in between.
    """
    context = context if context is not None else PipelineContext()
    while True:
        raw = next_directive()
        if raw is None:
            return
        outcome = process_directive(raw, columns, context)
        context = outcome.context
        yield outcome


def render_document(
    template_text: str,
    columns: Sequence[Column],
    chart_writer: ChartWriter,
    strict: bool = False,
    context: PipelineContext | None = None,
) -> tuple[str, list[DirectiveOutcome]]:
    """Fill every directive of a template.

    Parameters
    ----------
    template_text : str
        Template content with ``{{{ ... }}}`` markers.
    columns : Sequence[Column]
        Aggregated survey columns.
    chart_writer : ChartWriter
        Collaborator that persists a chart and returns its path, such as
        ``JsonChartWriter``.
    strict : bool, optional
        Raise the first directive error instead of removing the directive.
    context : PipelineContext | None, optional
        Starting palette and order; defaults to ``PipelineContext()``.

    Returns
    -------
    tuple[str, list[DirectiveOutcome]]
        The rendered document and one outcome per directive.

    Raises
    ------
    AppError
        In strict mode, the first directive error.
    RenderError
        If the chart writer fails.
    """
    document = TemplateDocument(template_text)
    outcomes: list[DirectiveOutcome] = []
    for outcome in process_directives(document.next_directive, columns, context):
        raw = outcome.directive.raw_input
        if outcome.error is not None and strict:
            raise outcome.error
        if outcome.text is not None:
            document.replace_with_text(raw, outcome.text)
        elif outcome.chart is not None:
            outcome.chart_path = chart_writer.write(outcome.chart)
            document.replace_with_image(
                raw, outcome.chart_path.as_posix(), outcome.chart.title
            )
        else:
            document.remove_directive(raw)
        outcomes.append(outcome)
    logger.info(
        "Processed %d directives (%d failed)",
        len(outcomes),
        sum(1 for outcome in outcomes if not outcome.ok),
    )
    return document.text, outcomes
