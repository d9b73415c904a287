from __future__ import annotations

import json

from click.testing import CliRunner

from dimquant.cli.main import cli


def test_cli_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "convert" in result.output


def test_cli_parse() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["parse", "9.81 m/s^2"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "9.81 m s^-2 [L T^-2]"


def test_cli_parse_json() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["parse", "--json", "100 kΩ"], catch_exceptions=False)
    payload = json.loads(result.output)
    assert payload["value"] == 100000.0
    assert payload["canonical"] == "100000 Ω"


def test_cli_parse_error_exits_non_zero() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["parse", "1 Qm"])
    assert result.exit_code == 1
    assert "Unknown unit symbol" in result.output


def test_cli_convert() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", "12.5 km/h", "m/s", "--format", ".2f"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "3.47 m/s"

    mismatch = runner.invoke(cli, ["convert", "1 m", "s"])
    assert mismatch.exit_code == 1
    assert "Incompatible dimensions" in mismatch.output


def test_cli_units_file(tmp_path) -> None:
    path = tmp_path / "units.txt"
    path.write_text("furlong: 201.168 m\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--units-file", str(path), "convert", "2 furlong", "m", "--format", ".3f"], catch_exceptions=False
    )
    assert result.exit_code == 0
    assert result.output.strip() == "402.336 m"


def test_cli_check(tmp_path) -> None:
    good = tmp_path / "good.txt"
    good.write_text("Ki-: 1024\nfurlong: 201.168 m\n", encoding="utf-8")
    bad = tmp_path / "bad.txt"
    bad.write_text("furlong 201.168 m\nx: 1 nope\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, ["check", str(good)], catch_exceptions=False)
    assert result.exit_code == 0
    assert "unit furlong = 201.168 m" in result.output
    assert "prefix Ki = 1024.0" in result.output

    result = runner.invoke(cli, ["check", str(bad)])
    assert result.exit_code == 1
    assert "2 problem(s)" in result.output
