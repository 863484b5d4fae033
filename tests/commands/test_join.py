"""Tests for the join command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from dnsnames.cli import cli


class TestJoinCommand:
    def test_fully_qualified_base(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "join", "www", "example.org."])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["name"] == "www.example.org."
        assert data["kind"] == "full"

    def test_quiet_partial_base(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "join", "api.v2", "internal"])
        assert result.output.strip() == "api.v2.internal"

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["join", "www", "example.org."])
        assert "www.example.org." in result.output

    def test_invalid_join_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "join", "www", "*.example.org."])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_JOIN"

    def test_quiet_prints_joined_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "join", "www", "example.org."])
        assert result.exit_code == 0
        assert result.output.strip() == "www.example.org."
