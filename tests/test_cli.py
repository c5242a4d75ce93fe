"""Tests for CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from taxestimator.cli.main import cli


@pytest.fixture
def store_args(tmp_path: Path) -> list[str]:
    return ["--store", str(tmp_path / "store.json")]


class TestCLI:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_calculate(self, store_args: list[str]) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [*store_args, "calculate", "--income", "50000", "--filing-status", "single",
             "--state", "low"],
        )
        assert result.exit_code == 0
        assert "$4,118.00" in result.output
        assert "$44,382.00" in result.output
        assert "12.0%" in result.output

    def test_calculate_records_history(self, store_args: list[str]) -> None:
        runner = CliRunner()
        runner.invoke(cli, [*store_args, "calculate", "--income", "40000",
                            "--filing-status", "single"])
        runner.invoke(cli, [*store_args, "calculate", "--income", "90000",
                            "--filing-status", "marriedJointly"])
        result = runner.invoke(cli, [*store_args, "history"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 2
        assert "$90,000.00" in lines[0]
        assert "$40,000.00" in lines[1]

    def test_zero_income_is_rejected(self, store_args: list[str]) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, [*store_args, "calculate", "--income", "0", "--filing-status", "single"]
        )
        assert result.exit_code == 1
        assert "Please enter your income and filing status." in result.output
        history = runner.invoke(cli, [*store_args, "history"])
        assert "No calculations yet." in history.output

    def test_missing_filing_status_is_rejected(self, store_args: list[str]) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, [*store_args, "calculate", "--income", "50000"])
        assert result.exit_code == 1

    def test_negative_income_is_bad_parameter(self, store_args: list[str]) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, [*store_args, "calculate", "--income", "-5", "--filing-status", "single"]
        )
        assert result.exit_code == 2

    @pytest.mark.parametrize("income", ["inf", "nan", "1e307"])
    def test_non_finite_income_is_bad_parameter(
        self, store_args: list[str], tmp_path: Path, income: str
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, [*store_args, "calculate", "--income", income, "--filing-status", "single"]
        )
        assert result.exit_code == 2
        assert not isinstance(result.exception, OverflowError)
        assert not (tmp_path / "store.json").exists()

    def test_no_history_flag(self, store_args: list[str], tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [*store_args, "calculate", "--income", "50000", "--filing-status", "single",
             "--no-history"],
        )
        assert result.exit_code == 0
        assert not (tmp_path / "store.json").exists()

    def test_output_file(self, store_args: list[str], tmp_path: Path) -> None:
        output_file = tmp_path / "result.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [*store_args, "calculate", "--income", "50000", "--filing-status", "single",
             "--state", "low", "--output", str(output_file)],
        )
        assert result.exit_code == 0
        data = json.loads(output_file.read_text())
        assert data["totalTax"] == pytest.approx(5618.0)

    def test_clear_history(self, store_args: list[str]) -> None:
        runner = CliRunner()
        runner.invoke(cli, [*store_args, "calculate", "--income", "50000",
                            "--filing-status", "single"])
        result = runner.invoke(cli, [*store_args, "clear-history"])
        assert result.exit_code == 0
        history = runner.invoke(cli, [*store_args, "history"])
        assert history.output.strip() == "No calculations yet."

    def test_store_from_environment(self, tmp_path: Path) -> None:
        store_path = tmp_path / "env_store.json"
        runner = CliRunner(env={"TAXESTIMATOR_STORE": str(store_path)})
        result = runner.invoke(
            cli, ["calculate", "--income", "50000", "--filing-status", "single"]
        )
        assert result.exit_code == 0
        assert store_path.exists()
