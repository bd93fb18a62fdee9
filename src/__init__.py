"""Survey Report Pipeline package.

This module serves as the root of the Survey Report Pipeline Python package,
which turns a survey CSV export and a report template containing
``{{{ ... }}}`` directives into a finished report: text statistics are
substituted in place and graph directives become chart-ready series data.

Package Structure
-----------------
- `pipeline/survey_data/`:
    CSV import with the two-row header convention and per-column frequency
    aggregation.
- `pipeline/report_generator/`:
    Directive parsing, column resolution and normalization, text rendering,
    chart series assembly, the sequential processing loop and the reference
    template/chart collaborators.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: The project-specific exception hierarchy.
- `generate_report.py`: Command line entrypoint.

Examples
--------
Basic import pattern:

>>> import src
>>> # See src/generate_report.py for the entrypoint.

"""
