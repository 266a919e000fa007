"""Tests for the encode command group."""

from __future__ import annotations

import json

from click.testing import CliRunner

from slugline.cli import cli


class TestEncodeCommands:
    def test_issue(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["encode", "issue", "Add index on users.email", "42"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "add-index-on-users-email-42" in result.output

    def test_quiet_prints_slug_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode", "plan", "Q3 Rollout", "1007"])
        assert result.exit_code == 0
        assert result.stdout == "q3-rollout-1007\n"

    def test_task_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "encode", "task", "Backfill orders", "9"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "encode_task"
        assert data["data"]["slug"] == "backfill-orders-9"

    def test_stage_is_one_based(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode", "stage", "Prod (EU)", "0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "prod-eu-1"

    def test_stage_bad_index_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "encode", "stage", "Prod", "first"])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.output)
        assert data["error"]["code"] == "INVALID_INDEX"

    def test_policy_verbatim(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode", "policy", "prod-policy", "--title", "Prod"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "prod-policy"

    def test_worksheet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "encode", "worksheet", "projects/shop-db", "worksheets/101"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "shop-db-101"

    def test_empty_token_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode", "issue", "!!!", "5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-5"
        assert "WARNING" in result.output
        assert "WARNING" not in result.stdout

    def test_config_prefixes(self, cli_runner: CliRunner, tmp_path) -> None:
        config = tmp_path / "alt.toml"
        config.write_text('[names]\nproject_prefix = "orgs/"\n')
        result = cli_runner.invoke(
            cli,
            ["-q", "-c", str(config), "encode", "worksheet", "orgs/acme", "worksheets/3"],
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "acme-3"
