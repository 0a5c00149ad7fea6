"""Collect body lines into normalized text blocks."""

from __future__ import annotations

from attrs import define, field

from .patterns import is_divider
from .types import LineList

# Blocks shorter than this after trimming are treated as noise.
MIN_CONTENT_LENGTH = 10


@define(slots=True)
class ContentBuffer:
    """Ordered buffer of body lines for one section or article intro."""

    lines: LineList = field(factory=list)

    def add(self, line: str) -> bool:
        """Append ``line`` unless it is blank or a divider.

        Args:
            line: Raw document line.

        Returns:
            Whether the line was kept.
        """

        text = line.strip()
        if not text or is_divider(text):
            return False

        self.lines.append(text)
        return True

    def text(self) -> str:
        """Return the buffered lines joined into one trimmed block."""

        return "\n".join(self.lines).strip()

    def finalize(self, min_length: int = MIN_CONTENT_LENGTH) -> str | None:
        """Return the block, or ``None`` when it is shorter than allowed."""

        text = self.text()
        if len(text) < min_length:
            return None
        return text
