"""Load the agreement text as an ordered sequence of lines."""

from __future__ import annotations

import logging
from pathlib import Path

from attrs import field, frozen

from .errors import DocumentNotFound

logger = logging.getLogger(__name__)


def _split_lines(text: str) -> tuple[str, ...]:
    """Split ``text`` on line feeds, dropping carriage returns."""

    return tuple(line.rstrip("\r") for line in text.split("\n"))


@frozen
class Document:
    """Immutable, 0-indexed sequence of document lines.

    Attributes:
        lines: Raw lines of the document in their original order.
        source: Where the lines were read from.
    """

    lines: tuple[str, ...] = field(converter=tuple, repr=False)
    source: str = "<memory>"

    @classmethod
    def from_text(cls, text: str, source: str = "<memory>") -> Document:
        """Build a document from an in-memory string."""

        return cls(lines=_split_lines(text), source=source)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]


def load_document(path: Path | str, encoding: str = "utf-8") -> Document:
    """Read the document at ``path``.

    Args:
        path: Location of the plain text agreement.
        encoding: Text encoding of the file.

    Returns:
        The loaded document.

    Raises:
        DocumentNotFound: If ``path`` does not point to a file.
    """

    path = Path(path)
    if not path.is_file():
        raise DocumentNotFound(f"Document not found: {path}")

    document = Document.from_text(
        path.read_text(encoding=encoding), source=str(path)
    )
    logger.info(f"Loaded {len(document)} lines from {path}")
    return document
