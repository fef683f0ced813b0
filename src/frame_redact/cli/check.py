"""Check command for frame-redact CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from frame_redact.rules import RuleLoadError


def check(
    files: Annotated[
        list[Path],
        typer.Argument(help="Files to scan for sensitive identifiers"),
    ],
) -> None:
    """Report sensitive identifiers still present in files.

    Useful as a last look before attaching saved pages or exported editor
    content to a ticket. Exits with code 1 when anything is found.

    Args:
        files: Files to scan

    Example:
        frame-redact check frame.clean.html
        frame-redact check exports/*.json
    """
    from frame_redact.sanitization import find_leaks

    total = 0
    for file_path in files:
        if not file_path.exists():
            typer.echo(f"Error: File not found: {file_path}", err=True)
            raise typer.Exit(1)

        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
            leaks = find_leaks(content, filename=str(file_path))
        except RuleLoadError as e:
            typer.echo(f"Error: Failed to load rules: {e}", err=True)
            raise typer.Exit(1) from None
        except OSError as e:
            typer.echo(f"Error: I/O error: {e}", err=True)
            raise typer.Exit(1) from None

        if leaks:
            typer.echo(f"\n{file_path}:")
            for leak in leaks:
                typer.echo(f"  [LEAK] line {leak.line}: {leak.match} ({leak.rule})")
            total += len(leaks)
        else:
            typer.echo(f"[OK] {file_path}: Clean")

    typer.echo(f"\nSummary: {total} leaks in {len(files)} files")

    if total > 0:
        raise typer.Exit(1)
