"""Tests for the command-line entry point."""

import logging
import re

import pytest

from signgrid.cli.run_report import load_user_config_dict, main, run_grid_report
from signgrid.grid.minimum import find_global_min
from signgrid.grid.sign_runs import min_replacements

pytestmark = pytest.mark.unit

ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture(autouse=True)
def restore_logging():
    """run_grid_report replaces root handlers; put them back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_default_run(text_stream):
    grid = run_grid_report(stream=text_stream)

    assert len(grid) == 10
    assert all(len(row) == 10 for row in grid)
    lines = text_stream.getvalue().split("\n")
    assert lines[0] == ""
    assert lines[1].split("|")[1].split() == [f"c{i}" for i in range(10)]
    assert len(lines) == 1 + 2 + 10 + 2 + 1 + 1


def test_report_matches_analysis(text_stream):
    grid = run_grid_report(cli_args={"rows": 4, "cols": 6, "seed": 3}, stream=text_stream)
    lines = text_stream.getvalue().split("\n")

    for row_index, row in enumerate(grid):
        assert lines[3 + row_index].rstrip().endswith(f"| {min_replacements(row):>7}")

    result = find_global_min(grid)
    positions = ", ".join(str(p) for p in result.positions)
    assert lines[-3] == f"Global minimum: {result.value} found at positions: {positions}"


def test_seed_makes_runs_reproducible(text_stream, tty_stream):
    args = {"rows": 3, "cols": 3, "seed": 11, "use_colors": False}
    assert run_grid_report(cli_args=args, stream=text_stream) == \
        run_grid_report(cli_args=args, stream=tty_stream)


def test_colors_follow_stream_unless_configured(tty_stream, text_stream):
    run_grid_report(cli_args={"rows": 2, "cols": 2}, stream=tty_stream)
    assert ANSI.search(tty_stream.getvalue())

    run_grid_report(cli_args={"rows": 2, "cols": 2, "use_colors": True}, stream=text_stream)
    assert ANSI.search(text_stream.getvalue())


def test_user_config_file(tmp_path, text_stream):
    path = tmp_path / "my_config.py"
    path.write_text('CONFIG = {"ROWS": 2, "COLS": 3, "MIN_VALUE": 1, "MAX_VALUE": 1}\n')

    grid = run_grid_report(str(path), {"cols": 4}, stream=text_stream)

    assert grid == [[1, 1, 1, 1], [1, 1, 1, 1]]
    assert "Global minimum: 1 found at positions: (r0,c0), (r0,c1)" in text_stream.getvalue()


def test_load_user_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_user_config_dict(str(tmp_path / "missing.py"))

    path = tmp_path / "empty.py"
    path.write_text("SETTINGS = {}\n")
    with pytest.raises(ValueError, match="No CONFIG dict"):
        load_user_config_dict(str(path))


def test_main_prints_report(capsys):
    main(["--rows", "3", "--cols", "2", "--seed", "5", "--no-color"])

    out = capsys.readouterr().out
    assert "Global minimum:" in out
    assert not ANSI.search(out)


def test_main_rejects_zero_rows(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--rows", "0"])

    assert exc_info.value.code == 2
    assert "rows" in capsys.readouterr().err
