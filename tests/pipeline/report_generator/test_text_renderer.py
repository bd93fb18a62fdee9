"""Tests for text statistic rendering."""

import pytest

from src.exceptions import ConversionError, ResolutionError
from src.pipeline.report_generator.directives import StatKind, TextDirective
from src.pipeline.report_generator.text_renderer import (
    format_mean,
    render_count,
    render_mean,
    render_range,
    render_text,
    word_to_int,
)
from src.pipeline.survey_data.models import CategoryCount, Column


def _column(*pairs, total=None, name="Q", label="A"):
    categories = [CategoryCount(n, c) for n, c in pairs]
    known = sum(c for _, c in pairs)
    total = known if total is None else total
    return Column(name, label, categories, total_count=total, unknown_count=total - known)


def _text(stat, *refs):
    return TextDirective(stat, refs, "text")


def test_word_to_int_bounds_and_case():
    """Test Word to int bounds and case."""
    assert word_to_int("zero") == 0
    assert word_to_int("TWENTY") == 20
    assert word_to_int(" seven ") == 7
    assert word_to_int("twenty-one") is None
    assert word_to_int("7") is None


def test_render_count_with_unknowns():
    """Test Render count with unknowns."""
    col = _column(("Yes", 6), ("No", 3), total=10)
    assert render_count([col]) == "Yes: 6, No: 3, Unknown: 1"


def test_render_count_single_category_is_bare_count():
    """Test Render count single category is bare count."""
    assert render_count([_column(("Yes", 4))]) == "4"
    assert render_count([_column(("Yes", 4), total=6)]) == "4Unknown: 2"


def test_render_count_concatenates_columns(survey_columns):
    """Test Render count concatenates columns."""
    text = render_count(survey_columns[:2])
    assert text == "No: 1, Yes: 2, Unknown: 1three: 2, two: 1, Unknown: 1"


def test_render_range():
    """Test Render range."""
    col = _column(("five", 1), ("one", 1), ("twenty", 1))
    assert render_range([col]) == "1 - 20"


def test_render_range_skips_non_numbers_across_columns():
    """Test Render range skips non numbers across columns."""
    a = _column(("three", 2), ("n/a", 4))
    b = _column(("eight", 1))
    assert render_range([a, b]) == "3 - 8"


def test_render_range_without_numbers_raises():
    """Test Render range without numbers raises."""
    with pytest.raises(ConversionError):
        render_range([_column(("Yes", 1))])


def test_render_mean():
    """Test Render mean."""
    assert render_mean([_column(("two", 2), ("four", 1))]) == "2.67"


def test_render_mean_counts_non_numbers_in_denominator():
    """Test Render mean counts non numbers in denominator."""
    assert render_mean([_column(("four", 2), ("skip", 2))]) == "2"


def test_render_mean_without_numbers_raises():
    """Test Render mean without numbers raises."""
    with pytest.raises(ConversionError) as excinfo:
        render_mean([_column(("Yes", 3))])
    assert excinfo.value.code == "CONVERSION_ERROR"
    with pytest.raises(ConversionError):
        render_mean([_column(("three", 0))])


@pytest.mark.parametrize(
    "value, text", [(8 / 3, "2.67"), (3.0, "3"), (2.5, "2.5"), (2.125, "2.12")]
)
def test_format_mean(value, text):
    """Test Format mean."""
    assert format_mean(value) == text


def test_render_text_raw_value(survey_columns):
    """Test Render text raw value."""
    assert render_text(survey_columns[1:2], _text(StatKind.RAW_VALUE, "B")) == "three"


def test_render_text_raw_value_on_empty_column_raises():
    """Test Render text raw value on empty column raises."""
    with pytest.raises(ResolutionError):
        render_text([_column(total=3)], _text(StatKind.RAW_VALUE, "Q"))


def test_render_text_percentage_renders_counts(caplog):
    """Test Render text percentage renders counts."""
    col = _column(("No", 1), ("Yes", 1))
    assert render_text([col], _text(StatKind.PERCENTAGE, "Q")) == "No: 1, Yes: 1, "
    assert "Percentage text is not supported" in caplog.text
