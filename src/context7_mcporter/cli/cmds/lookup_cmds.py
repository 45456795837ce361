"""
CLI commands for Context7 lookups.

Usage:
    context7-lookup query "how to add middleware" --library FastAPI
    context7-lookup query "routing" --library /tiangolo/fastapi --json
    context7-lookup resolve FastAPI
"""

from __future__ import annotations

import asyncio
import json
from typing import NoReturn

import typer

from context7_mcporter.bridge import McporterBridge
from context7_mcporter.cli.output import err_console, print_cli_error, print_kv
from context7_mcporter.errors import BridgeProcessError, Context7Error
from context7_mcporter.lookup import (
    RESOLVE_LIBRARY_ID,
    Context7Lookup,
    extract_library_id,
    extract_text,
)
from context7_mcporter.settings import ENV_CONFIG_PATH, Context7Config

_CONFIG_HELP = f"mcporter config path (default: ${ENV_CONFIG_PATH})"


def _load_config(
    config_path: str | None,
    server: str | None,
    max_chars: int | None,
) -> Context7Config:
    return Context7Config.from_env().merged(
        mcporter_config_path=config_path,
        server_name=server,
        max_chars=max_chars,
    )


def _fail(error: Context7Error) -> NoReturn:
    print_cli_error(error.message, hint=error.hint)
    if isinstance(error, BridgeProcessError) and error.stderr:
        err_console.print(f"[dim]{error.stderr}[/dim]", highlight=False)
    raise typer.Exit(1)


def query_cmd(
    query: str = typer.Argument(..., help="What you want to know"),
    library: str | None = typer.Option(
        None,
        "--library",
        "-l",
        help="Library name (e.g. FastAPI) or Context7 libraryId (e.g. /tiangolo/fastapi)",
    ),
    config_path: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    server: str | None = typer.Option(None, "--server", "-s", help="Server name in the config"),
    max_chars: int | None = typer.Option(None, "--max-chars", help="Clip bound for docs text"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output the tool result as JSON"),
):
    """Look up documentation for a library."""
    try:
        config = _load_config(config_path, server, max_chars)
        result = asyncio.run(Context7Lookup(config).lookup(query, library=library))
    except Context7Error as e:
        _fail(e)

    if output_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(result.text)


def resolve_cmd(
    library: str = typer.Argument(..., help="Library name to resolve"),
    config_path: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    server: str | None = typer.Option(None, "--server", "-s", help="Server name in the config"),
    show_output: bool = typer.Option(
        False, "--output", "-o", help="Also print the raw resolver text"
    ),
):
    """Resolve a library name to a Context7 libraryId."""
    try:
        config = _load_config(config_path, server, None)
        bridge = McporterBridge.from_config(config)
        response = asyncio.run(bridge.call(RESOLVE_LIBRARY_ID, {"query": library}))
    except Context7Error as e:
        _fail(e)

    text = extract_text(response)
    library_id = extract_library_id(text)
    if library_id is None:
        print_cli_error(f"No libraryId found for {library!r}")
        typer.echo(text)
        raise typer.Exit(1)

    print_kv("libraryId", library_id)
    if show_output:
        typer.echo(text)


def register_lookup(app: typer.Typer) -> None:
    app.command("query")(query_cmd)
    app.command("resolve")(resolve_cmd)
