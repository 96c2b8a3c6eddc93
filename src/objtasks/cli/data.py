"""CLI commands: objtasks area / json -- rectangle and JSON helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from objtasks.config import ObjtasksConfig
from objtasks.serialize import ParseError, parse_json, to_json
from objtasks.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    value = Rectangle(width, height).area()
    click.echo(f"{value:g}")


@click.command("json")
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option("--indent", default=None, type=int, help="Pretty-print with this indent")
@click.pass_obj
def json_cmd(config: ObjtasksConfig | None, jsonfile: str, indent: int | None) -> None:
    """Read a JSON file and print it in canonical compact form."""
    config = config or ObjtasksConfig()
    try:
        source = Path(jsonfile).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        click.echo(f"Parse error: not UTF-8 text ({exc.reason} at byte {exc.start})", err=True)
        sys.exit(1)
    try:
        data = parse_json(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc} (line {exc.line}, column {exc.column})", err=True)
        sys.exit(1)
    click.echo(to_json(data, indent=indent if indent is not None else config.json_indent))
