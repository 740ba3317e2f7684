"""daycell CLI (Typer 기반)."""

import logging
from datetime import date
from pathlib import Path

import typer

from daycell.config import AppConfig
from daycell.exceptions import DayCellError
from daycell.logging_config import setup_logging
from daycell.models import DayCell, DayContext, dump_cells, save_json
from daycell.schemas import load_context
from daycell.services import date_utils
from daycell.services.composer import DayResolver

logger = logging.getLogger(__name__)

app = typer.Typer(help="Calendar day-cell state resolver")


def _echo(msg: str = "", err: bool = False) -> None:
    typer.echo(msg, err=err)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
) -> None:
    """Calendar day-cell state resolver."""
    level = logging.DEBUG if verbose else logging.INFO
    setup_logging(level)


def _get_config() -> AppConfig:
    return AppConfig()


def _handle_error(e: DayCellError) -> None:
    _echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _parse_date(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        _echo(f"Error: {name} must be YYYY-MM-DD, got '{value}'", err=True)
        raise typer.Exit(code=1)


def _parse_monthly(value: str) -> tuple[int, int]:
    try:
        year, month = value.split("-")
        return int(year), int(month)
    except ValueError:
        _echo(f"Error: --monthly must be YEAR-MONTH, got '{value}'", err=True)
        raise typer.Exit(code=1)


def _load_context(context_path: str | None, config: AppConfig) -> DayContext:
    """--context 파일이 없으면 빈 컨텍스트."""
    if context_path is None:
        return DayContext(date_format=config.date_format)
    return load_context(Path(context_path), config)


def _format_cell(cell: DayCell) -> str:
    line = f"{cell.date.isoformat() if cell.date else '?'} {cell.state.value}"
    if cell.reasons:
        line += " (" + ", ".join(sorted(r.value for r in cell.reasons)) + ")"
    if cell.marked:
        line += " [marked:selected]" if cell.marked_selected else " [marked:active]"
    return line


@app.command()
def resolve(
    target_date: str = typer.Argument(help="Day to resolve (YYYY-MM-DD)"),
    context: str = typer.Option(None, "--context", "-c", help="Day context JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the resolved cell as JSON"),
    output: str = typer.Option(None, "--output", "-o", help="Write the resolved cell JSON to a file"),
) -> None:
    """Resolve the state and style layers of a single day."""
    config = _get_config()
    target = _parse_date(target_date, "target_date")
    try:
        ctx = _load_context(context, config)
        cell = DayResolver(config).resolve_date(target, ctx)
    except DayCellError as e:
        _handle_error(e)

    if output:
        save_json(cell, Path(output))
        logger.info("Saved resolved cell to %s", output)

    if as_json:
        _echo(dump_cells(cell))
        return

    _echo(_format_cell(cell))
    _echo(f"  pressable: {'yes' if cell.pressable else 'no'}")
    _echo(f"  container: {cell.container_style}")
    if cell.pressable:
        _echo(f"  surface:   {cell.pressable_style}")
    _echo(f"  label:     {cell.label_style}")


@app.command()
def states(
    since: str = typer.Option(None, help="Range start (YYYY-MM-DD)"),
    until: str = typer.Option(None, help="Range end (YYYY-MM-DD)"),
    monthly: str = typer.Option(None, help="YEAR-MONTH, e.g. 2024-3"),
    context: str = typer.Option(None, "--context", "-c", help="Day context JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print resolved cells as JSON"),
) -> None:
    """List the resolved state of every day in a range, one per line."""
    if monthly is not None and (since is not None or until is not None):
        _echo("Error: Only one of --since/--until or --monthly can be specified.", err=True)
        raise typer.Exit(code=1)

    if monthly is not None:
        year, month = _parse_monthly(monthly)
        try:
            start, end = date_utils.monthly_range(year, month)
        except ValueError as e:
            _echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    elif since is not None and until is not None:
        start = _parse_date(since, "--since")
        end = _parse_date(until, "--until")
    else:
        _echo("Error: --since and --until must be used together (or use --monthly).", err=True)
        raise typer.Exit(code=1)

    if start > end:
        _echo(f"Error: range start {start} is after end {end}", err=True)
        raise typer.Exit(code=1)

    config = _get_config()
    try:
        ctx = _load_context(context, config)
        cells = DayResolver(config).resolve_range(start, end, ctx)
    except DayCellError as e:
        _handle_error(e)

    if as_json:
        _echo(dump_cells(cells))
        return
    for cell in cells:
        _echo(_format_cell(cell))
