"""Terminal UI: URL bar, scrollable page pane and status line.

The app is the view controller.  Submitting the URL bar runs
normalise → fetch → extract → render synchronously on the UI thread, so the
interface does not redraw or take input until the request finishes.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Input, Label, Static

from browser.errors import FetchError, ParseError
from browser.scraper import extract_content, fetch_url, normalize_url
from cli.rendering import render_page
from cli.state import BrowserState

logger = logging.getLogger(__name__)


class PageView(VerticalScroll, inherit_bindings=False):
    """Scrollable pane holding the rendered page.

    Only four keys are bound: a line at a time with the arrows, a visible
    page at a time with page up/down.  Offsets are clamped by the widget.
    """

    BINDINGS = [
        Binding("up", "line_up", "Up", show=False),
        Binding("down", "line_down", "Down", show=False),
        Binding("pageup", "page_up", "Page up", show=False),
        Binding("pagedown", "page_down", "Page down", show=False),
    ]

    def action_line_up(self) -> None:
        self.scroll_relative(y=-1, animate=False, immediate=True)

    def action_line_down(self) -> None:
        self.scroll_relative(y=1, animate=False, immediate=True)

    def action_page_up(self) -> None:
        self.scroll_relative(y=-self.scrollable_content_region.height, animate=False, immediate=True)

    def action_page_down(self) -> None:
        self.scroll_relative(y=self.scrollable_content_region.height, animate=False, immediate=True)


class BrowserApp(App[None]):
    """Single-window terminal page viewer."""

    TITLE = "termbrowse"

    CSS = """
    #url-bar {
        height: 1;
    }
    #url-bar Label {
        width: auto;
    }
    #url {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: white;
        color: black;
    }
    #page-view {
        height: 1fr;
        border: solid $primary;
        background: black;
        color: white;
    }
    #status {
        height: 1;
        background: $panel;
        color: white;
        text-align: center;
    }
    """

    def __init__(self, state: Optional[BrowserState] = None, initial_url: Optional[str] = None) -> None:
        super().__init__()
        self.state = state if state is not None else BrowserState()
        self.initial_url = initial_url
        # What the page pane and status line currently show.
        self.shown: Text = self.state.display
        self.status_text = ""

    def compose(self) -> ComposeResult:
        with Horizontal(id="url-bar"):
            yield Label("URL: ")
            yield Input(id="url")
        with PageView(id="page-view"):
            yield Static(self.state.display, id="page")
        yield Static(id="status")

    def on_mount(self) -> None:
        url_input = self.query_one("#url", Input)
        url_input.focus()
        if self.initial_url:
            url_input.value = self.initial_url
            self.load_url(self.initial_url)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "url":
            self.load_url(event.value)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def load_url(self, url: str) -> None:
        """Fetch, extract and display *url*, blocking until it finishes.

        Only the fetch sees the normalised URL; history and the status line
        keep *url* as typed.  A fetch failure only touches the status line.
        A parse failure shows its message in the page pane but leaves the
        display buffer alone.
        """
        target = normalize_url(url)
        self.set_status("Loading...")

        try:
            raw = fetch_url(target)
        except FetchError as exc:
            logger.warning("Load of %s failed: %s", target, exc)
            self.set_status(f"Error: {exc}")
            return

        try:
            page = extract_content(raw)
        except ParseError as exc:
            logger.warning("Could not parse %s: %s", target, exc)
            self.show_page(Text(f"Error parsing HTML: {exc}"))
            self.set_status(f"Error: {exc}")
            return

        display = render_page(page)
        self.state.record_load(url, display)
        self.show_page(display)
        self.set_status(f"Loaded: {url}")
        logger.info("Loaded %s (%d block(s))", target, len(page.blocks))

    # ------------------------------------------------------------------
    # Widget updates
    # ------------------------------------------------------------------

    def show_page(self, text: Text) -> None:
        """Replace the page pane content and scroll back to the top."""
        self.shown = text
        self.query_one("#page", Static).update(text)
        self.query_one("#page-view", PageView).scroll_home(animate=False, immediate=True)

    def set_status(self, message: str) -> None:
        # Text, not markup: error messages may contain square brackets.
        self.status_text = message
        self.query_one("#status", Static).update(Text(message))
