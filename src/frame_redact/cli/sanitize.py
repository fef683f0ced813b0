"""Sanitize command for frame-redact CLI."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from frame_redact.rules import RuleLoadError


def sanitize(
    input_file: Annotated[
        Path,
        typer.Argument(help="Saved HTML page or frame ('-' for stdin)"),
    ],
) -> None:
    """Redact sensitive identifiers from saved HTML.

    The sanitized markup is written to stdout and the summary line to
    stderr, so the output can be piped or redirected.

    Args:
        input_file: HTML file to sanitize, or '-' to read stdin

    Example:
        frame-redact sanitize frame.html > frame.clean.html
        pbpaste | frame-redact sanitize - | pbcopy
    """
    from frame_redact.sanitization import sanitize_html

    try:
        if str(input_file) == "-":
            markup = sys.stdin.read()
        else:
            markup = input_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        typer.echo(f"Error: File not found: {input_file}", err=True)
        raise typer.Exit(1) from None
    except PermissionError:
        typer.echo(f"Error: Permission denied: {input_file}", err=True)
        raise typer.Exit(1) from None
    except UnicodeDecodeError as e:
        typer.echo(f"Error: {input_file} is not UTF-8 text: {e.reason}", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.echo(f"Error: I/O error: {e}", err=True)
        raise typer.Exit(1) from None

    try:
        html, stats = sanitize_html(markup)
    except RuleLoadError as e:
        typer.echo(f"Error: Failed to load rules: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(html, nl=False)
    typer.echo(stats.summary(), err=True)
