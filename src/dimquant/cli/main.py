"""Command-line interface for dimquant."""

from __future__ import annotations

import json
from pathlib import Path

import click

from ..config import load_settings
from ..core.dimensions import DimensionError
from ..observability import configure_logging
from ..units.errors import ParsingError
from ..units.format import format_quantity, si_format
from ..units.loader import build_symbol_table, load_definitions_file
from ..units.parser import QuantityParser
from ..units.si import si_symbols


def _symbols(ctx: click.Context):
    obj = ctx.ensure_object(dict)
    if "symbols" not in obj:
        try:
            obj["symbols"] = build_symbol_table(obj.get("units_file"))
        except OSError as exc:
            raise click.ClickException(f"Cannot read units file: {exc}") from exc
    return obj["symbols"]


@click.group()
@click.option(
    "--units-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Definitions file loaded on top of the SI units.",
)
@click.option("--log-level", default=None, help="Logging level, e.g. DEBUG.")
@click.pass_context
def cli(ctx: click.Context, units_file: Path | None, log_level: str | None) -> None:
    """Parse, convert and check unit expressions."""

    settings = load_settings()
    configure_logging(log_level or settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["units_file"] = units_file or settings.units_file


@cli.command("parse")
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Emit structured JSON.")
@click.pass_context
def parse_cmd(ctx: click.Context, text: str, as_json: bool) -> None:
    """Parse TEXT and print its canonical form and dimensions."""

    symbols = _symbols(ctx)
    try:
        quantity = QuantityParser(symbols).parse(text)
    except ParsingError as exc:
        raise click.ClickException(str(exc)) from exc

    canonical = format_quantity(quantity, symbols)
    if as_json:
        payload = {
            "text": text,
            "value": float(quantity.raw_value),
            "dimensions": {dim.symbol: str(dim.power) for dim in quantity.dimensions},
            "canonical": canonical,
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    click.echo(f"{canonical} {quantity.dimensions}")


@cli.command("convert")
@click.argument("text")
@click.argument("target")
@click.option("--format", "fmt", default="", show_default=True, help="Format spec for the value, e.g. .2f")
@click.pass_context
def convert_cmd(ctx: click.Context, text: str, target: str, fmt: str) -> None:
    """Express TEXT in the unit TARGET."""

    symbols = _symbols(ctx)
    try:
        quantity = QuantityParser(symbols).parse(text)
        click.echo(si_format(f"{{:{fmt}}} {target}", quantity, symbols))
    except ParsingError as exc:
        raise click.ClickException(str(exc)) from exc
    except DimensionError as exc:
        raise click.ClickException(str(exc)) from exc
    except ValueError as exc:
        raise click.ClickException(f"Invalid format: {exc}") from exc


@cli.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_cmd(path: Path) -> None:
    """Check a definitions file against the SI units."""

    table = si_symbols()
    report = load_definitions_file(path, table)
    for symbol in report.prefixes:
        click.echo(f"prefix {symbol} = {table.prefixes[symbol]}")
    for symbol in report.units:
        unit = format_quantity(table.units[symbol], table, prefer_named=False)
        click.echo(f"unit {symbol} = {unit}")
    for warning in report.warnings:
        click.echo(f"warning: {warning}", err=True)
    for diag in report.diagnostics:
        click.echo(f"error: {diag.name}: {diag.message}", err=True)
    if not report.ok:
        raise click.ClickException(f"{path} has {len(report.warnings) + len(report.diagnostics)} problem(s)")


if __name__ == "__main__":
    cli()
