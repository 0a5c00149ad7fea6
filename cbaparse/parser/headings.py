"""Resolve the heading text that belongs to a marker line."""

from __future__ import annotations

from attrs import frozen

from .document import Document
from .patterns import is_divider, is_marker

# Number of lines after a marker searched for a detached title.
DEFAULT_LOOKAHEAD = 4


@frozen
class Heading:
    """Resolved heading of an article or section.

    Attributes:
        title: Heading text, empty when it could not be resolved.
        line: Index of the line holding a detached title, ``None`` when the
            title shares the marker line or was not found.
    """

    title: str
    line: int | None = None

    @property
    def resolved(self) -> bool:
        return bool(self.title)


def resolve_heading(
    document: Document,
    marker_line: int,
    same_line_title: str | None = None,
    stop: int | None = None,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> Heading:
    """Determine the title that belongs to the marker at ``marker_line``.

    A title written on the marker line itself wins. Otherwise the next
    ``lookahead`` lines are searched for the first one that is neither
    blank nor a divider. Reaching another marker ends the search, so a
    title is never borrowed from the following heading.

    Args:
        document: The loaded document.
        marker_line: Index of the marker line.
        same_line_title: Text following the ordinal on the marker line.
        stop: Exclusive upper bound for the search, usually the span end.
        lookahead: Maximum number of lines searched after the marker.

    Returns:
        The resolved heading; its title is empty when indeterminate.
    """

    if same_line_title is not None and same_line_title.strip():
        return Heading(title=same_line_title.strip())

    limit = min(marker_line + 1 + lookahead, len(document))
    if stop is not None:
        limit = min(limit, stop)

    for index in range(marker_line + 1, limit):
        text = document[index].strip()
        if not text or is_divider(text):
            continue
        if is_marker(text):
            break
        return Heading(title=text, line=index)

    return Heading(title="")
