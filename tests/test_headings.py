"""Tests for heading resolution."""

from cbaparse.parser import Document
from cbaparse.parser.headings import resolve_heading


def test_same_line_title_wins() -> None:
    document = Document.from_text("Section 3. Player Conduct\nBody text")
    heading = resolve_heading(
        document, 0, same_line_title="  Player Conduct  "
    )

    assert heading.title == "Player Conduct"
    assert heading.line is None
    assert heading.resolved


def test_next_line_title_skips_blanks_and_dividers() -> None:
    document = Document.from_text(
        "Section 4.\n\n-----\n  Player Conduct  \nBody text"
    )
    heading = resolve_heading(document, 0)

    assert heading.title == "Player Conduct"
    assert heading.line == 3


def test_title_outside_window_is_indeterminate() -> None:
    document = Document.from_text("Section 4.\n\n\n\n\nLate Title")
    heading = resolve_heading(document, 0)

    assert heading.title == ""
    assert heading.line is None
    assert not heading.resolved


def test_wider_window_reaches_title() -> None:
    document = Document.from_text("Section 4.\n\n\n\n\nLate Title")
    heading = resolve_heading(document, 0, lookahead=5)

    assert heading.title == "Late Title"
    assert heading.line == 5


def test_search_stops_at_next_marker() -> None:
    document = Document.from_text("Section 4.\nSection 5. Next\nBody")
    assert resolve_heading(document, 0).title == ""


def test_search_stops_at_span_end() -> None:
    document = Document.from_text("ARTICLE I\n\nDEFINITIONS")
    assert resolve_heading(document, 0, stop=2).title == ""
    assert resolve_heading(document, 0).title == "DEFINITIONS"
