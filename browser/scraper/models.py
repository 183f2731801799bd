"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

HEADING = "heading"
PARAGRAPH = "paragraph"


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class Block:
    """One heading or paragraph pulled out of a page body."""

    kind: str
    text: str
    level: Optional[int] = None

    @property
    def is_heading(self) -> bool:
        return self.kind == HEADING


@dataclass
class CleanPage:
    """Readable content extracted from a :class:`RawPage`."""

    url: str
    title: str
    blocks: List[Block] = field(default_factory=list)

    @property
    def text(self) -> str:
        """All block text joined by blank lines, without any styling."""
        return "\n\n".join(block.text for block in self.blocks)
