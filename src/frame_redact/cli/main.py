"""Main CLI entry point for frame-redact.

Provides commands for:
- sanitize: Redact a saved HTML page or frame
- check: Report sensitive identifiers left in files
- live: Redact a frame of a running browser in place
"""

from __future__ import annotations

import logging

try:
    import typer
except ImportError as e:
    raise ImportError("CLI dependencies not installed. Install with: pip install frame-redact[cli]") from e

from frame_redact.cli.check import check
from frame_redact.cli.live import live
from frame_redact.cli.sanitize import sanitize

app = typer.Typer(
    name="frame-redact",
    help="Redact sensitive identifiers from web pages before sharing screenshots.",
    no_args_is_help=True,
)

app.command()(sanitize)
app.command()(check)
app.command()(live)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: True if --version flag was provided
    """
    if value:
        from frame_redact import __version__

        typer.echo(f"frame-redact {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output (skipped nodes, rule loading) to stderr.",
    ),
) -> None:
    r"""Redact sensitive identifiers from web pages.

    \b
    Examples:
        frame-redact sanitize page.html > clean.html
        frame-redact check clean.html
        frame-redact live --cdp http://localhost:9222 --frame-url reactblade
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
