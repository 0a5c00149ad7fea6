"""Tests for marker and divider recognition."""

import pytest

from cbaparse.parser.patterns import (
    SectionMarker,
    is_divider,
    is_marker,
    match_article,
    match_section,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("ARTICLE VII", "VII"),
        ("  ARTICLE XLII  ", "XLII"),
        ("ARTICLE  IX", "IX"),
        ("ARTICLE VII PLAYER CONDUCT", None),
        ("Article VII", None),
        ("ARTICLE IIII", None),
        ("ARTICLE", None),
        ("See ARTICLE VII", None),
    ],
)
def test_match_article(line: str, expected: str | None) -> None:
    assert match_article(line) == expected


def test_match_section_same_line_title() -> None:
    marker = match_section("Section 3. Player Conduct")
    assert marker == SectionMarker(number=3, title="Player Conduct")


def test_match_section_alone() -> None:
    assert match_section("  Section 12.  ") == SectionMarker(number=12)


@pytest.mark.parametrize(
    "line",
    ["Section 0.", "Section 3", "Section 03.", "See Section 3. below", ""],
)
def test_match_section_rejects(line: str) -> None:
    assert match_section(line) is None


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("-----", True),
        ("=====", True),
        (" -=- ", True),
        ("", False),
        ("- a -", False),
    ],
)
def test_is_divider(line: str, expected: bool) -> None:
    assert is_divider(line) is expected


def test_is_marker() -> None:
    assert is_marker("ARTICLE I")
    assert is_marker("Section 1.")
    assert not is_marker("DEFINITIONS")
