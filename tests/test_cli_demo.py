from pathlib import Path
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from entropykit import __version__
from entropykit.cli import cli


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


def test_demo_default(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["demo", "--num-symbols", "500"])
    assert result.exit_code == 0
    assert "Symbol entropy" in result.output
    assert "Winner" in result.output


def test_demo_markdown(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["demo", "--num-symbols", "300", "--format", "markdown"])
    assert result.exit_code == 0
    assert "| Scheme |" in result.output


def test_demo_json_output_file(cli_runner: CliRunner, tmp_path: Path):
    out = tmp_path / "reports" / "demo.json"
    result = cli_runner.invoke(
        cli,
        ["demo", "--num-symbols", "400", "--seed", "3", "--format", "json", "--output", str(out)],
    )
    assert result.exit_code == 0
    assert out.exists()
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["num_symbols"] == 400
    assert data["rans"]["roundtrip"] is True


def test_demo_custom_probabilities(cli_runner: CliRunner, tmp_path: Path):
    out = tmp_path / "demo.json"
    result = cli_runner.invoke(
        cli,
        ["demo", "--num-symbols", "100", "--probabilities", "0,0,0,1", "--format", "json", "--output", str(out)],
    )
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["symbol_counts"] == [0, 0, 0, 100]


def test_demo_invalid_probabilities(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["demo", "--probabilities", "0.5,0.5"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_demo_unparseable_probabilities(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["demo", "--probabilities", "a,b,c,d"])
    assert result.exit_code != 0


def test_demo_invalid_num_symbols(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["demo", "--num-symbols", "0"])
    assert result.exit_code != 0


def test_demo_invalid_format(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["demo", "--format", "pdf"])
    assert result.exit_code != 0


def test_demo_verbose_configures_logging(cli_runner: CliRunner):
    with patch("entropykit.commands.demo.logging.basicConfig") as basic:
        result = cli_runner.invoke(cli, ["demo", "--num-symbols", "50", "--verbose"])
    assert result.exit_code == 0
    basic.assert_called_once()


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
