"""Typer CLI entrypoint and command definitions for sessionize."""

import json
from pathlib import Path

import typer

from sessionize.report.export import ExportFormat

app = typer.Typer()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
) -> None:
    """Group user events into sessions and print the merged records."""
    from sessionize.core.logging import configure_logging

    configure_logging(verbose)


# -- demo ---------------------------------------------------------------------


@app.command("demo")
def demo_cmd() -> None:
    """Sessionize the built-in demonstration events and print JSON."""
    from sessionize.report.export import SessionExportError, sessions_to_json
    from sessionize.sessions.build import sessionize
    from sessionize.sessions.demo import DEMO_EVENTS

    sessions = sessionize(DEMO_EVENTS)
    try:
        typer.echo(sessions_to_json(sessions))
    except SessionExportError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


# -- merge --------------------------------------------------------------------


@app.command("merge")
def merge_cmd(
    input_file: str = typer.Option(..., "--input", help="Path to a JSON array of events (user_id, ts, type, meta)"),
    out: str | None = typer.Option(None, "--out", help="Write to this file instead of stdout"),
    fmt: ExportFormat = typer.Option(ExportFormat.json, "--format", case_sensitive=False, help="Output format when --out is given"),
) -> None:
    """Sessionize events from a JSON file."""
    from pydantic import ValidationError

    from sessionize.core.types import Event
    from sessionize.report.export import SessionExportError, export_sessions, sessions_to_json
    from sessionize.sessions.build import sessionize

    if fmt is ExportFormat.csv and out is None:
        typer.echo("--format csv requires --out", err=True)
        raise typer.Exit(code=1)

    in_path = Path(input_file)
    if not in_path.exists():
        typer.echo(f"File not found: {in_path}", err=True)
        raise typer.Exit(code=1)

    try:
        raw = json.loads(in_path.read_text("utf-8"))
    except json.JSONDecodeError as exc:
        typer.echo(f"Invalid JSON in {in_path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not isinstance(raw, list):
        typer.echo("Expected a JSON array of events", err=True)
        raise typer.Exit(code=1)

    try:
        events = [Event.model_validate(item) for item in raw]
    except ValidationError as exc:
        typer.echo(f"Invalid event: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    sessions = sessionize(events)

    try:
        if out is None:
            typer.echo(sessions_to_json(sessions))
            return
        out_path = export_sessions(sessions, Path(out), fmt)
    except SessionExportError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wrote {len(sessions)} sessions to {out_path}", err=True)
