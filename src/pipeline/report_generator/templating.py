"""Templating utilities for directive-driven report documents.

This module is the document side of the report pipeline: it loads a
Markdown or plain-text template, finds the ``{{{ ... }}}`` directive markers
in it and substitutes each one, in document order, with rendered text or a
Markdown image reference. It knows nothing about survey data or charts.

Boundaries
----------
- Reads template files; never writes to disk.
- Only string and ``Path`` handling; does not interpret Markdown.
- Marker delimiters are injected from ``src/config.py``.

Examples
--------
>>> doc = TemplateDocument("Total: {{{count;Q1}}} and {{{count;Q2}}}")
>>> doc.next_directive()
'count;Q1'
>>> doc.replace_with_text("count;Q1", "12")
>>> doc.next_directive()
'count;Q2'
>>> doc.remove_directive("count;Q2")
>>> doc.text
'Total: 12 and '
>>> doc.next_directive() is None
True
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from src.config import DIRECTIVE_CLOSE, DIRECTIVE_OPEN
from src.exceptions import RenderError

logger = logging.getLogger(__name__)

MARKER_PATTERN = re.compile(
    re.escape(DIRECTIVE_OPEN) + r"(.*?)" + re.escape(DIRECTIVE_CLOSE)
)


def load_template(path: Path) -> str:
    """Read the contents of a template file as a string.

    Parameters
    ----------
    path : Path
        Path to the template file.

    Returns
    -------
    str
        Template content.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    OSError
        If the file cannot be read.
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        return fh.read()


def strip_markers(marker: str) -> str:
    """Remove the surrounding braces from a directive marker.

    Examples
    --------
    >>> strip_markers("{{{ count;Q1 }}}")
    ' count;Q1 '
    """
    return marker.strip("{}")


def extract_directives(content: str) -> list[str]:
    """Return every directive in the template, in document order.

    Unlike placeholder extraction for plain templates, duplicates are kept:
    palette and order declarations depend on their position.

    Examples
    --------
    >>> extract_directives("{{{colors;1,2,3}}} x {{{count;A}}} {{{count;A}}}")
    ['colors;1,2,3', 'count;A', 'count;A']
    """
    return [strip_markers(match.group(0)) for match in MARKER_PATTERN.finditer(content)]


class TemplateDocument:
    """A template being filled in one directive at a time.

    Substitution proceeds left to right: after a directive is replaced,
    the search for the next one resumes after the inserted text, so
    replacement text is never reinterpreted as a directive.

    Parameters
    ----------
    text : str
        Template content.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    @property
    def text(self) -> str:
        return self._text

    def _find(self, directive: str) -> re.Match[str]:
        for match in MARKER_PATTERN.finditer(self._text, self._position):
            if strip_markers(match.group(0)) == directive:
                return match
        raise RenderError(
            "directive not found in document", context={"directive": directive}
        )

    def _substitute(self, directive: str, replacement: str) -> None:
        match = self._find(directive)
        start, end = match.span()
        self._text = self._text[:start] + replacement + self._text[end:]
        self._position = start + len(replacement)

    def next_directive(self) -> str | None:
        """Return the first directive not yet substituted, or ``None``."""
        match = MARKER_PATTERN.search(self._text, self._position)
        if match is None:
            return None
        return strip_markers(match.group(0))

    def replace_with_text(self, directive: str, text: str) -> None:
        self._substitute(directive, text)

    def replace_with_image(self, directive: str, image_path: str, title: str) -> None:
        """Replace a directive with a Markdown image reference.

        Examples
        --------
        >>> doc = TemplateDocument("{{{bar;count;Q1;Answers}}}")
        >>> doc.replace_with_image("bar;count;Q1;Answers", "charts/chart_1.json", "Answers")
        >>> doc.text
        '![Answers](charts/chart_1.json)'
        """
        self._substitute(directive, f"![{title}]({image_path})")

    def remove_directive(self, directive: str) -> None:
        self._substitute(directive, "")
