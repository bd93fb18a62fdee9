"""Tests for column resolution and normalization."""

import pytest

from src.exceptions import ResolutionError
from src.pipeline.report_generator.resolver import (
    normalize_columns,
    reference_column,
    resolve_columns,
)
from src.pipeline.survey_data.models import CategoryCount, Column


def _column(name, label, *pairs):
    return Column(name, label, [CategoryCount(n, c) for n, c in pairs])


def test_resolve_by_name_case_and_label(survey_columns):
    """Test Resolve by name case and label."""
    resolved = resolve_columns(["Loops", "functions", "e"], survey_columns)
    assert [c.name for c in resolved] == ["Loops", "Functions", "Classes"]


def test_resolve_prefers_exact_name_over_label():
    """Test Resolve prefers exact name over label."""
    columns = [_column("B", "A"), _column("Other", "B")]
    assert [c.abbreviated_label for c in resolve_columns(["B"], columns)] == ["A"]


def test_resolve_skips_unknown_refs(survey_columns, caplog):
    """Test Resolve skips unknown refs."""
    resolved = resolve_columns(["Nope", "Loops"], survey_columns)
    assert [c.name for c in resolved] == ["Loops"]
    assert "'Nope' matches no column" in caplog.text


def test_resolve_nothing_raises(survey_columns):
    """Test Resolve nothing raises."""
    with pytest.raises(ResolutionError) as excinfo:
        resolve_columns(["Nope"], survey_columns)
    assert excinfo.value.message == "no columns found"
    with pytest.raises(ResolutionError):
        resolve_columns([], survey_columns)


def test_resolve_returns_copies(survey_columns):
    """Test Resolve returns copies."""
    resolved = resolve_columns(["Loops"], survey_columns)
    resolved[0].categories.clear()
    assert survey_columns[2].category_names == ["Good", "Poor"]


def test_normalize_inserts_missing_categories():
    """Test Normalize inserts missing categories."""
    a = _column("A", "A", ("No", 2), ("Yes", 3))
    b = _column("B", "B", ("Yes", 1))
    normalize_columns([a, b])
    assert [(c.name, c.count) for c in b.categories] == [("No", 0), ("Yes", 1)]
    assert [(c.name, c.count) for c in a.categories] == [("No", 2), ("Yes", 3)]


def test_normalize_reference_is_first_widest_and_keeps_extras():
    """Test Normalize reference is first widest and keeps extras."""
    a = _column("A", "A", ("Good", 2), ("Poor", 1))
    b = _column("B", "B", ("Fair", 1), ("Good", 2))
    assert reference_column([a, b]) is a
    assert normalize_columns([a, b]) is a
    assert a.category_names == ["Good", "Poor", "Fair"]
    assert [c.count for c in a.categories] == [2, 1, 0]
    assert b.category_names == ["Fair", "Poor", "Good"]


def test_normalize_is_idempotent():
    """Test Normalize is idempotent."""
    columns = [
        _column("A", "A", ("a", 1), ("b", 1), ("c", 1)),
        _column("B", "B", ("c", 4)),
        _column("C", "C"),
    ]
    once = [c.category_names for c in normalize_columns(columns)]
    twice = [c.category_names for c in normalize_columns(columns)]
    assert once == twice
    assert once[1] == ["a", "b", "c"]
    assert once[2] == ["a", "b", "c"]


def test_normalize_single_column_is_untouched():
    """Test Normalize single column is untouched."""
    only = _column("A", "A", ("x", 1))
    assert normalize_columns([only]) is only
    assert only.category_names == ["x"]


def test_normalize_with_extra_categories_is_idempotent():
    """Test Normalize with extra categories is idempotent."""
    a = _column("A", "A", ("Good", 2), ("Poor", 1))
    b = _column("B", "B", ("Fair", 1), ("Good", 2))
    c = _column("C", "C", ("Bad", 3))
    columns = [a, b, c]
    first = normalize_columns(columns)
    once = [col.category_names for col in columns]
    normalize_columns(columns)
    assert [col.category_names for col in columns] == once
    assert first is a
    assert once[0] == ["Good", "Poor", "Fair", "Bad"]
    assert all(sorted(names) == sorted(once[0]) for names in once)


def test_normalize_returns_widest_column_when_not_first():
    """Test Normalize returns widest column when not first."""
    a = _column("A", "A", ("Yes", 1))
    b = _column("B", "B", ("No", 1), ("Yes", 1), ("Maybe", 2))
    assert normalize_columns([a, b]) is b
    assert a.category_names == ["No", "Yes", "Maybe"]
