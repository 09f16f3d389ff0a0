"""Unit tests for the command-line interface."""

import json
from click.testing import CliRunner
from interfaces.cli import cli

CHAIN_ARGS = [
    "chain",
    "--asset-name", "SPY",
    "--asset-low", "100", "--asset-high", "100",
    "--strike-low", "95", "--strike-high", "105", "--strike-step", "5",
    "--days-low", "0", "--days-high", "30", "--days-step", "15",
    "--rate", "0.05",
    "--vol", "0.2",
]


def test_chain_json():
    result = CliRunner().invoke(cli, CHAIN_ARGS + ["--type", "Put", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output[result.output.index("{"):])
    assert data["assetName"] == "SPY"
    assert data["request"]["optionType"] == "Put"

    strikes = data["values"][0]["strikeExpiryPrices"]
    assert [s["strikePrice"] for s in strikes] == [95.0, 100.0, 105.0]
    assert [e["daysToExpiry"] for e in strikes[0]["expiryPrices"]] == [30.0, 15.0]


def test_chain_table():
    result = CliRunner().invoke(cli, CHAIN_ARGS)

    assert result.exit_code == 0, result.output
    assert "Call chain for SPY" in result.output
    assert "Asset price 100" in result.output


def test_chain_invalid_span_reports_error():
    args = [a if a != "95" else "95.1" for a in CHAIN_ARGS]
    result = CliRunner().invoke(cli, args)

    assert result.exit_code == 1
    assert "multiple of 0.25" in result.output


def test_price_command():
    result = CliRunner().invoke(
        cli, ["price", "-S", "100", "-K", "100", "-d", "365", "-r", "0.05", "-v", "0.2"]
    )

    assert result.exit_code == 0, result.output
    assert "Call Option Price: $10.45" in result.output


def test_price_command_zero_volatility():
    result = CliRunner().invoke(
        cli, ["price", "-S", "100", "-K", "100", "-d", "30", "-r", "0.05", "-v", "0", "-t", "Put"]
    )

    assert result.exit_code == 1
    assert "zero" in result.output


def test_verbose_is_a_group_option():
    """--verbose goes before the command name and applies to every command."""
    result = CliRunner().invoke(cli, ["--verbose"] + CHAIN_ARGS + ["--json"])
    assert result.exit_code == 0, result.output

    misplaced = CliRunner().invoke(cli, CHAIN_ARGS + ["--verbose"])
    assert misplaced.exit_code == 2
    assert "No such option" in misplaced.output
