"""Live command for frame-redact CLI."""

from __future__ import annotations

from typing import Annotated

import typer


def live(
    cdp: Annotated[
        str,
        typer.Option("--cdp", "-c", help="DevTools endpoint of the running browser"),
    ] = "http://localhost:9222",
    frame_url: Annotated[
        str | None,
        typer.Option("--frame-url", "-u", help="Substring of the frame URL to sanitize"),
    ] = None,
    frame_name: Annotated[
        str | None,
        typer.Option("--frame-name", "-n", help="Name of the frame to sanitize"),
    ] = None,
) -> None:
    """Redact a frame of a running browser in place.

    Start Chrome or Edge with --remote-debugging-port=9222, open the page
    to capture, then run this command. The page is not reloaded; take the
    screenshot once the summary is printed.

    Args:
        cdp: DevTools endpoint of the running browser
        frame_url: Substring of the URL of the frame to sanitize
        frame_name: Name of the frame to sanitize

    Example:
        frame-redact live
        frame-redact live --frame-url reactblade
        frame-redact live --cdp http://127.0.0.1:9333 --frame-name editor
    """
    from frame_redact.live import attach_and_sanitize

    if frame_url is not None and frame_name is not None:
        typer.echo("Error: Use either --frame-url or --frame-name, not both", err=True)
        raise typer.Exit(1)

    typer.echo(f"Attaching to {cdp}...")
    result = attach_and_sanitize(cdp, frame_url=frame_url, frame_name=frame_name)

    if not result.success or result.stats is None:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(1)

    typer.echo(f"  Frame: {result.frame_url}")
    typer.echo(f"  {result.stats.summary()}")
    typer.echo()
    typer.echo("WARNING: Redaction is best-effort and only covers the built-in identifiers.")
    typer.echo("Content loaded after this run is not redacted; re-run before each screenshot.")
