"""Tests for the decode command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from slugline.cli import cli


class TestDecodeCommands:
    @pytest.mark.parametrize(
        "kind,slug,expected",
        [
            ("id", "my-report-name-7", "7"),
            ("uid", "task-12", "12"),
            ("string", "policy-abc123", "abc123"),
            ("index", "prod-eu-1", "0"),
            ("residual", "report-42", "report"),
            ("project", "shop-db-101", "projects/shop-db"),
            ("worksheet", "shop-db-101", "worksheets/101"),
        ],
    )
    def test_quiet_value(self, cli_runner: CliRunner, kind: str, slug: str, expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", kind, slug])
        assert result.exit_code == 0
        assert result.stdout == f"{expected}\n"

    def test_id_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "id", "report-42"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "decode_id"
        assert data["data"]["value"] == 42

    def test_invalid_id_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "id", "not-a-slug"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR" in result.output

    def test_invalid_id_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "id", "report"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_SLUG"

    def test_empty_slug(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "id", ""])
        assert result.exit_code == 1

    def test_leading_delimiter_after_double_dash(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "id", "--", "-5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "5"

    def test_index_nan_is_null(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "index", "prod-eu"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["value"] is None
        assert data["warnings"]


@pytest.mark.usefixtures("int_digit_limit")
def test_overlong_id_exits_cleanly(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "decode", "id", "report-" + "7" * 5000])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert json.loads(result.output)["error"]["code"] == "INVALID_SLUG"
