"""Command line interface for the srtparse toolkit."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from .models import Item
from .reader import ReaderOptions, SrtReadError, parse_srt, read_srt_text
from .srt import SrtParseError, iter_srt_results
from .workbook import create_items_workbook, save_workbook

app = typer.Typer(help="SRT subtitle parsing utilities")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Parse and inspect SubRip subtitle files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_items(srt: Path, encoding: str) -> list[Item]:
    try:
        return parse_srt(srt, ReaderOptions(encoding=encoding))
    except (SrtReadError, SrtParseError) as exc:
        typer.secho(f"{srt}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


def _item_to_dict(item: Item) -> dict:
    return {
        "index": item.index,
        "start": item.start_time.to_string(),
        "end": item.end_time.to_string(),
        "start_ms": item.start_time.to_milliseconds(),
        "end_ms": item.end_time.to_milliseconds(),
        "text": item.text,
    }


@app.command("check")
def check(
    srt: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="SRT subtitle file"),
    all_errors: bool = typer.Option(False, "--all", help="Report every malformed block instead of the first"),
    encoding: str = typer.Option("utf-8-sig", help="Text encoding of the file"),
) -> None:
    """Validate an SRT file and report the number of items."""
    if not all_errors:
        items = _load_items(srt, encoding)
        typer.secho(f"{srt}: {len(items)} subtitle items OK", fg=typer.colors.GREEN)
        return

    try:
        text = read_srt_text(srt, ReaderOptions(encoding=encoding))
    except SrtReadError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    valid = 0
    errors: list[SrtParseError] = []
    for result in iter_srt_results(text):
        if isinstance(result, SrtParseError):
            errors.append(result)
        else:
            valid += 1

    for error in errors:
        typer.secho(f"{srt}: {error}", fg=typer.colors.RED)
    if errors:
        typer.secho(f"{len(errors)} malformed blocks, {valid} valid items", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)
    typer.secho(f"{srt}: {valid} subtitle items OK", fg=typer.colors.GREEN)


@app.command("show")
def show(
    srt: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="SRT subtitle file"),
    as_json: bool = typer.Option(False, "--json", help="Print items as a JSON list"),
    encoding: str = typer.Option("utf-8-sig", help="Text encoding of the file"),
) -> None:
    """Print the parsed subtitle items."""
    items = _load_items(srt, encoding)
    if as_json:
        typer.echo(json.dumps([_item_to_dict(item) for item in items], ensure_ascii=False, indent=2))
        return

    for item in items:
        typer.secho(f"#{item.index} {item.start_time} --> {item.end_time}", fg=typer.colors.CYAN)
        typer.echo(item.text)


@app.command("make-sheet")
def make_sheet(
    srt: Path = typer.Option(..., exists=True, dir_okay=False, readable=True, help="SRT subtitle file"),
    out: Path = typer.Option(..., dir_okay=False, help="Output Excel file"),
    encoding: str = typer.Option("utf-8-sig", help="Text encoding of the file"),
) -> None:
    """Create a workbook listing the SRT subtitles."""
    items = _load_items(srt, encoding)
    save_workbook(create_items_workbook(items), out)
    typer.secho(f"Workbook created: {out}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
