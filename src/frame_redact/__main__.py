"""Entry point for the frame-redact command and python -m frame_redact."""

from __future__ import annotations

CLI_INSTALL_HINT = "pip install frame-redact[cli]"


def main() -> None:
    """Run the redaction CLI (sanitize, check, live)."""
    try:
        from frame_redact.cli.main import app
    except ImportError as e:
        import sys

        print("The frame-redact command needs typer, which is not installed.", file=sys.stderr)
        print(f"Install with: {CLI_INSTALL_HINT}", file=sys.stderr)
        print("sanitize_html() and find_leaks() can still be imported from frame_redact.", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    app()


if __name__ == "__main__":
    main()
