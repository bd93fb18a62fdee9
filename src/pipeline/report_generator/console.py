"""Rich console summary of a report run."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .processor import DirectiveOutcome

_STATUS_STYLES = {"ok": "green", "warning": "yellow", "failed": "red"}


def outcome_status(outcome: DirectiveOutcome) -> str:
    if not outcome.ok:
        return "failed"
    if outcome.warnings:
        return "warning"
    return "ok"


def outcome_detail(outcome: DirectiveOutcome) -> str:
    """Short human-readable description of what a directive produced."""
    if outcome.error is not None:
        return outcome.error.message
    if outcome.warnings:
        return "; ".join(warning.message for warning in outcome.warnings)
    if outcome.text is not None:
        return outcome.text
    if outcome.chart_path is not None:
        return outcome.chart_path.name
    if outcome.chart is not None:
        return outcome.chart.title
    return ""


def build_summary_table(outcomes: Sequence[DirectiveOutcome]) -> Table:
    """Build a table with one row per processed directive.

    Examples
    --------
    >>> build_summary_table([]).row_count
    0
    """
    table = Table(show_header=True, header_style="bold blue")
    table.add_column("#", justify="right")
    table.add_column("Directive")
    table.add_column("Kind")
    table.add_column("Status")
    table.add_column("Detail", overflow="fold")
    for index, outcome in enumerate(outcomes, 1):
        status = outcome_status(outcome)
        table.add_row(
            str(index),
            Text(outcome.directive.raw_input.strip()),
            outcome.kind,
            Text(status, style=_STATUS_STYLES[status]),
            Text(outcome_detail(outcome)),
        )
    return table


def print_summary(
    outcomes: Sequence[DirectiveOutcome], console: Console | None = None
) -> None:
    console = console or Console()
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    title = f"Report directives: {len(outcomes)} processed, {failed} failed"
    console.print(Panel(build_summary_table(outcomes), title=title))
