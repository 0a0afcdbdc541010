"""Tests for the schema CLI commands."""

from typer.testing import CliRunner

from textschema.cli.main import app as cli_app


def test_check_lists_schemas(schema_file):
    runner = CliRunner()

    result = runner.invoke(cli_app, ["check", str(schema_file)])

    assert result.exit_code == 0
    assert "2 schemas compiled" in result.stdout
    assert "x3" in result.stdout


def test_check_reports_syntax_error(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("let $x\nbad!\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli_app, ["check", str(path)])

    assert result.exit_code == 1
    assert "line 2: unable to parse schema 'bad!'" in result.stdout


def test_check_missing_file(tmp_path):
    runner = CliRunner()

    result = runner.invoke(cli_app, ["check", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "unable to open file" in result.stdout


def test_match_prints_captures(schema_file):
    runner = CliRunner()

    result = runner.invoke(cli_app, ["match", str(schema_file), "x is the sum of y and z"])

    assert result.exit_code == 0
    assert "sum" in result.stdout
    assert "Remaining: ''" in result.stdout


def test_match_without_result(schema_file):
    runner = CliRunner()

    result = runner.invoke(cli_app, ["match", str(schema_file), "42"])

    assert result.exit_code == 1
    assert "No schema matched" in result.stdout


def test_unknown_log_level_rejected(schema_file):
    runner = CliRunner()

    result = runner.invoke(cli_app, ["--log-level", "chatty", "check", str(schema_file)])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


def test_log_level_is_case_insensitive(schema_file):
    runner = CliRunner()

    result = runner.invoke(cli_app, ["--log-level", "debug", "check", str(schema_file)])

    assert result.exit_code == 0
