"""termbrowse CLI — entry-point for the terminal page viewer.

Usage:
    python cli/main.py [URL]
    python cli/main.py URL --dump
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from browser.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer
from rich.console import Console

from browser.errors import BrowserError
from browser.logs import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="termbrowse",
    help="Minimal terminal web page viewer.",
    add_completion=False,
)


@app.command()
def browse(
    url: Optional[str] = typer.Argument(None, help="Page to open on start-up."),
    dump: bool = typer.Option(
        False, "--dump", help="Print the extracted page to stdout instead of opening the UI."
    ),
) -> None:
    """Open the viewer, optionally loading URL straight away."""
    try:
        log_path = configure_logging()
    except OSError as exc:
        typer.echo(f"Error running browser: cannot open log file: {exc}")
        raise typer.Exit(1)

    if dump:
        if not url:
            typer.echo("[dump] A URL is required with --dump.")
            raise typer.Exit(2)
        _dump(url)
        return

    from cli.app import BrowserApp
    from cli.state import BrowserState

    logger.info("Starting UI (log file: %s)", log_path)
    browser_app = BrowserApp(BrowserState(), initial_url=url)
    try:
        browser_app.run()
    except Exception as exc:
        logger.exception("UI failed")
        typer.echo(f"Error running browser: {exc}")
        raise typer.Exit(1)
    if browser_app.return_code:
        raise typer.Exit(browser_app.return_code)


def _dump(url: str) -> None:
    """Run the fetch → extract → render pipeline once and print the result."""
    from browser.scraper import extract_content, fetch_url, normalize_url
    from cli.rendering import render_page

    try:
        page = extract_content(fetch_url(normalize_url(url)))
    except BrowserError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(1)

    Console().print(render_page(page))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
def run() -> None:
    app()


if __name__ == "__main__":
    run()
