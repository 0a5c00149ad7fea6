"""Line patterns that mark article and section boundaries."""

from __future__ import annotations

import re

from attrs import frozen

from .roman import is_roman

ARTICLE_PATTERN = re.compile(r"^ARTICLE\s+([IVXLCDM]+)$")
SECTION_ALONE_PATTERN = re.compile(r"^Section\s+([1-9]\d*)\.$")
SECTION_WITH_TITLE_PATTERN = re.compile(r"^Section\s+([1-9]\d*)\.\s+(.+)$")
DIVIDER_PATTERN = re.compile(r"^[-=]+$")


@frozen
class SectionMarker:
    """A recognized section marker line.

    Attributes:
        number: Section number from the marker.
        title: Title written on the marker line, ``None`` when the marker
            carries only the ordinal.
    """

    number: int
    title: str | None = None


def match_article(line: str) -> str | None:
    """Return the Roman numeral when ``line`` is an article marker."""

    match = ARTICLE_PATTERN.match(line.strip())
    if match is None or not is_roman(match.group(1)):
        return None
    return match.group(1)


def match_section(line: str) -> SectionMarker | None:
    """Return the section marker described by ``line`` if any.

    Args:
        line: Raw document line.

    Returns:
        The parsed marker, or ``None`` when the line is not a marker.
    """

    text = line.strip()

    # Title on the same physical line takes precedence.
    match = SECTION_WITH_TITLE_PATTERN.match(text)
    if match:
        return SectionMarker(number=int(match.group(1)), title=match.group(2))

    match = SECTION_ALONE_PATTERN.match(text)
    if match:
        return SectionMarker(number=int(match.group(1)))

    return None


def is_divider(line: str) -> bool:
    """Return whether ``line`` consists only of dashes or equal signs."""

    return DIVIDER_PATTERN.match(line.strip()) is not None


def is_marker(line: str) -> bool:
    """Return whether ``line`` opens an article or a section."""

    return match_article(line) is not None or match_section(line) is not None
