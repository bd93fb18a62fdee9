"""Tests for the survey CSV importer."""

import pytest

from src.exceptions import FormatError
from src.pipeline.survey_data.data_loader import (
    load_survey_csv,
    parse_survey_csv,
    resolve_headers,
    split_csv_line,
)


def test_split_csv_line_reassembles_quoted_fields():
    """Test Split csv line reassembles quoted fields."""
    assert split_csv_line('x,"a, b",y') == ["x", "a, b", "y"]
    assert split_csv_line('"a, b, c"') == ["a, b, c"]


def test_resolve_headers_prefers_second_row_unless_dummy():
    """Test Resolve headers prefers second row unless dummy."""
    first = ["Q1", "Q2", "Q3", ""]
    second = ["", "Open-Ended Response", "Response", "Yes"]
    assert resolve_headers(first, second) == ["Q1", "Q2", "Q3", "Yes"]


def test_resolve_headers_disambiguates_duplicates():
    """Test Resolve headers disambiguates duplicates."""
    headers = resolve_headers(["Q", "", "", ""], ["Response", "Yes", "Yes", "Yes"])
    assert headers == ["Q", "Yes", "Yescopy", "Yescopycopy"]
    assert len(set(headers)) == len(headers)


def test_resolve_headers_uses_letter_label_for_blank_columns():
    """Test Resolve headers uses letter label for blank columns."""
    assert resolve_headers(["Q1", "", ""], ["", ""]) == ["Q1", "B", "C"]


def test_parse_survey_csv_quoted_header_does_not_add_columns():
    """Test Parse survey csv quoted header does not add columns."""
    table = parse_survey_csv('"a, b",c\nResponse,Response\nx,y\n')
    assert table.headers == ["a, b", "c"]
    assert table.rows == [{"a, b": "x", "c": "y"}]


def test_parse_survey_csv_pads_short_rows_and_blanks_dummy_cells(caplog):
    """Test Parse survey csv pads short rows and blanks dummy cells."""
    table = parse_survey_csv("A,B,C\n,,\nResponse,x\n\n1,2,3\n")
    assert table.headers == ["A", "B", "C"]
    assert table.rows[0] == {"A": "", "B": "x", "C": ""}
    assert table.rows[1] == {"A": "1", "B": "2", "C": "3"}
    assert len(table.rows) == 2
    assert "padding with empty cells" in caplog.text


def test_parse_survey_csv_requires_two_header_lines():
    """Test Parse survey csv requires two header lines."""
    with pytest.raises(FormatError) as excinfo:
        parse_survey_csv("only,one,line\n")
    assert excinfo.value.code == "FORMAT_ERROR"
    assert excinfo.value.context == {"line_count": 1}


def test_parse_survey_csv_strips_bom(survey_csv_text):
    """Test Parse survey csv strips bom."""
    table = parse_survey_csv("\ufeff" + survey_csv_text)
    assert table.headers[0] == "Do you like the course?"


def test_load_survey_csv_reads_file(survey_csv_file):
    """Test Load survey csv reads file."""
    table = load_survey_csv(survey_csv_file)
    assert table.headers == [
        "Do you like the course?",
        "How many classes did you attend?",
        "Loops",
        "Functions",
        "Classes",
    ]
    assert len(table.rows) == 4


def test_load_survey_csv_missing_file(tmp_path):
    """Test Load survey csv missing file."""
    with pytest.raises(FileNotFoundError):
        load_survey_csv(tmp_path / "absent.csv")
