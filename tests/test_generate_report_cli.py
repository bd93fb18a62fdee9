"""CLI tests for generate_report."""

from pathlib import Path

import pytest

import src.generate_report as cli


@pytest.fixture
def calls(monkeypatch):
    """Replace logging setup and the runner with recorders."""
    recorded = {"logging": [], "run": []}
    monkeypatch.setattr(
        cli,
        "configure_logging",
        lambda level, enable_file: recorded["logging"].append((level, enable_file)),
    )

    def fake_run(**kwargs):
        recorded["run"].append(kwargs)
        return recorded.get("result", True)

    monkeypatch.setattr(cli, "run_from_config", fake_run)
    return recorded


def test_parse_arguments_defaults(monkeypatch):
    """Test Parse arguments defaults."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    args = cli.parse_arguments([])
    assert args.csv_path is None
    assert args.template_path is None
    assert args.output_path is None
    assert args.chart_dir is None
    assert args.strict is None
    assert args.log_level == "WARNING"


def test_main_passes_options_through(calls):
    """Test Main passes options through."""
    code = cli.main(
        [
            "--csv-path",
            "in/survey.csv",
            "--template-path",
            "in/template.md",
            "--output-path",
            "out/report.md",
            "--chart-dir",
            "out/charts",
            "--strict",
            "--log-level",
            "DEBUG",
        ]
    )
    assert code == 0
    assert calls["run"] == [
        {
            "csv_path": Path("in/survey.csv"),
            "template_path": Path("in/template.md"),
            "output_path": Path("out/report.md"),
            "chart_dir": Path("out/charts"),
            "strict": True,
        }
    ]
    assert calls["logging"] == [("DEBUG", False)]


def test_main_leaves_unset_options_to_config(calls):
    """Test Main leaves unset options to config."""
    assert cli.main([]) == 0
    assert calls["run"][0] == {
        "csv_path": None,
        "template_path": None,
        "output_path": None,
        "chart_dir": None,
        "strict": None,
    }


def test_main_returns_one_on_failure(calls):
    """Test Main returns one on failure."""
    calls["result"] = False
    assert cli.main([]) == 1
