"""Process-scoped chart settings threaded through a document pass.

Palette and order directives do not produce output; they replace the
``PipelineContext`` seen by every later directive. The context is an
immutable value: updating it returns a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from src.config import DEFAULT_PALETTE

from .directives import RGB, OrderDirective, PaletteDirective


@dataclass(frozen=True)
class PipelineContext:
    """Active palette and category order for the remaining directives.

    Attributes
    ----------
    palette : tuple[RGB, ...]
        Colors assigned to series or points, reused cyclically.
    order : tuple[str, ...]
        Preferred category order; empty means data order.

    Examples
    --------
    >>> ctx = PipelineContext()
    >>> ctx.with_order(("Yes", "No")).order
    ('Yes', 'No')
    >>> ctx.order
    ()
    """

    palette: tuple[RGB, ...] = DEFAULT_PALETTE
    order: tuple[str, ...] = ()

    def with_palette(self, palette: tuple[RGB, ...]) -> PipelineContext:
        return replace(self, palette=tuple(palette))

    def with_order(self, order: tuple[str, ...]) -> PipelineContext:
        return replace(self, order=tuple(order))

    def apply(self, directive: PaletteDirective | OrderDirective) -> PipelineContext:
        """Return the context updated by a palette or order declaration."""
        if isinstance(directive, PaletteDirective):
            return self.with_palette(directive.colors)
        return self.with_order(directive.categories)
