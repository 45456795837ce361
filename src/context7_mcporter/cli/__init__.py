from __future__ import annotations

import typer

from context7_mcporter import __version__
from context7_mcporter.cli.cmds import register_lookup
from context7_mcporter.cli.output import console
from context7_mcporter.logging import configure_logging

_TYPER_HELP = """Look up official library documentation via Context7, through mcporter.

**Quick start:**

* `context7-lookup query "how to add middleware" -l FastAPI`
* `context7-lookup query "routing" -l /tiangolo/fastapi`
* `context7-lookup resolve FastAPI`
"""

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=_TYPER_HELP,
    rich_markup_mode="markdown",
)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"context7-mcporter v{__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="CONTEXT7_LOG_LEVEL",
        help="Log level for bridge and lookup diagnostics.",
    ),
):
    """context7-lookup: Context7 documentation from the command line."""
    configure_logging(level=log_level)


register_lookup(app)


def main():
    app()


if __name__ == "__main__":
    main()
