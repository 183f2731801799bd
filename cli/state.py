"""Session state owned by the view controller.

One :class:`BrowserState` is created per run and handed to the app
explicitly; nothing here is module-global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rich.text import Text


@dataclass
class BrowserState:
    current_url: Optional[str] = None
    # Rendered text of the last page that was fetched *and* parsed.
    display: Text = field(default_factory=Text)
    # Append-only; nothing navigates through it yet.
    history: List[str] = field(default_factory=list)

    def record_load(self, url: str, display: Text) -> None:
        """Replace the display buffer after a successful load of *url*."""
        self.current_url = url
        self.display = display
        self.history.append(url)
