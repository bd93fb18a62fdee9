"""Tests for the pipeline context value."""

import dataclasses

import pytest

from src.config import DEFAULT_PALETTE
from src.pipeline.report_generator.context import PipelineContext
from src.pipeline.report_generator.directives import OrderDirective, PaletteDirective


def test_default_context():
    """Test Default context."""
    ctx = PipelineContext()
    assert ctx.palette == ((215, 63, 9), (170, 157, 46), (74, 119, 60))
    assert ctx.palette == DEFAULT_PALETTE
    assert ctx.order == ()


def test_apply_returns_new_context():
    """Test Apply returns new context."""
    ctx = PipelineContext()
    with_palette = ctx.apply(PaletteDirective(((1, 2, 3),), "colors;1,2,3"))
    with_both = with_palette.apply(OrderDirective(("Yes", "No"), "order;Yes;No"))
    assert ctx == PipelineContext()
    assert with_palette.palette == ((1, 2, 3),)
    assert with_both.palette == ((1, 2, 3),)
    assert with_both.order == ("Yes", "No")


def test_context_is_frozen():
    """Test Context is frozen."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        PipelineContext().order = ("x",)
