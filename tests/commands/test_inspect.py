"""Tests for the inspect CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from nulluuid.cli import cli

SAMPLE = "12345678-abcd-1234-abcd-0123456789ab"


class TestInspectCommand:
    def test_present(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "inspect", "urn:uuid:" + SAMPLE])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "inspect"
        assert data["data"]["encodings"]["json"] == f'"{SAMPLE}"'
        assert data["data"]["database"]["stored"] == SAMPLE
        assert data["data"]["database"]["roundtrip_equal"] is True

    def test_absent_json_carries_warnings(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "inspect"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["database"]["stored"] is None
        assert len(data["warnings"]) == 2

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["inspect", SAMPLE])
        assert result.exit_code == 0
        assert "encodings:" in result.output
        assert "    binary: 12345678abcd1234abcd0123456789ab" in result.output

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["inspect", "xyz"])
        assert result.exit_code == 1
