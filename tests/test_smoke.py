"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from grid_layout.__main__ import main


def test_import():
    import grid_layout

    assert grid_layout is not None


def test_version_non_empty_and_stable():
    from grid_layout import get_version

    assert get_version()
    assert get_version() == get_version()


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "JSON graph" in result.output
