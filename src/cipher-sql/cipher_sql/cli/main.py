"""CLI entrypoint for cipher-sql — typer app with `serve`, `assignments` and `verify` commands."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer
import uvicorn
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cipher_sql.api.app import create_app
from cipher_sql.api.container import Container, build_container
from cipher_sql.config.domain.config import StudioConfig
from cipher_sql.config.infrastructure.observer import StructlogConfigObserver
from cipher_sql.config.infrastructure.yaml_loader import YamlConfigLoader
from cipher_sql.core.errors import CipherSqlError
from cipher_sql.result.domain.result import NormalizedResult
from cipher_sql.verification.domain.verdict import Verdict

app = typer.Typer(add_completion=False)

_console = Console()

_NULL_MARK = "NULL"


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and minimum level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        typer.echo(f"Invalid log level: {log_level!r}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path) -> StudioConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    try:
        return loader.load(path=config_path)
    except CipherSqlError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


def _result_table(title: str, result: NormalizedResult) -> Table:
    table = Table(title=title, title_justify="left")
    for column in result.columns:
        table.add_column(escape(column))
    for row in result.rows:
        table.add_row(
            *(
                _NULL_MARK if row.get(column) is None else escape(str(row[column]))
                for column in result.columns
            )
        )
    return table


def _print_verdict(verdict: Verdict) -> None:
    if verdict.correct:
        _console.print("[bold green]Correct[/bold green]")
    else:
        detail = escape(verdict.mismatch or "")
        _console.print(f"[bold red]Incorrect[/bold red]  [dim]{detail}[/dim]")
    _console.print(_result_table(title="Expected", result=verdict.expected))
    _console.print(_result_table(title="Got", result=verdict.got))


async def _verify(config: StudioConfig, assignment_id: str, query: str) -> Verdict:
    container: Container = build_container(config)
    try:
        return await container.verifier.verify(
            assignment_id=assignment_id,
            candidate_query=query,
        )
    finally:
        await container.aclose()


@app.command()
def serve(
    config_path: Path = typer.Argument(..., help="Path to the cipher-sql config YAML"),
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(5000, "--port", "-p", help="Port to listen on"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option("info", "--log-level", help="Minimum log level"),
) -> None:
    """Serve the assignment and validation API over HTTP."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    config = _load_config(config_path=config_path)
    try:
        container = build_container(config)
    except CipherSqlError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    uvicorn.run(create_app(container), host=host, port=port, log_level=log_level)


@app.command()
def assignments(
    config_path: Path = typer.Argument(..., help="Path to the cipher-sql config YAML"),
    log_level: str = typer.Option("warning", "--log-level", help="Minimum log level"),
) -> None:
    """List the assignment catalog as learners see it."""
    _configure_structlog(log_format="console", log_level=log_level)
    config = _load_config(config_path=config_path)
    try:
        container = build_container(config)
    except CipherSqlError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    try:
        table = Table(title="Assignments", title_justify="left")
        table.add_column("ID")
        table.add_column("Title")
        table.add_column("Difficulty")
        table.add_column("Tables")
        for item in container.catalog.list_assignments():
            table.add_row(
                item.id,
                item.title,
                item.difficulty,
                ", ".join(t.name for t in item.tables),
            )
        _console.print(table)
    finally:
        asyncio.run(container.aclose())


@app.command()
def verify(
    config_path: Path = typer.Argument(..., help="Path to the cipher-sql config YAML"),
    assignment_id: str = typer.Argument(..., help="Assignment to grade against"),
    query: str = typer.Argument(..., help="Candidate SQL query"),
    log_level: str = typer.Option("warning", "--log-level", help="Minimum log level"),
) -> None:
    """Grade QUERY against an assignment. Exits 0 when correct, 1 otherwise."""
    _configure_structlog(log_format="console", log_level=log_level)
    config = _load_config(config_path=config_path)

    try:
        verdict = asyncio.run(
            _verify(config=config, assignment_id=assignment_id, query=query)
        )
    except CipherSqlError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    _print_verdict(verdict)
    if not verdict.correct:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
