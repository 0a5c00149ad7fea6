"""Shared sample agreements for the test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

# Body of an article without section markers, well above the noise limit.
CONTRACTS_BODY = (
    "Every Player Contract entered into during the term of this Agreement "
    "shall be in the form of the Uniform Player Contract annexed hereto. "
    "No Team may enter into a Player Contract that deviates from that form."
)

MINIMAL_LINES = [
    "ARTICLE I",
    "DEFINITIONS",
    "Section 1.",
    "Player",
    "A Player is any person who signs a Player Contract.",
    "Section 2. Team",
    "A Team is a member club of the League.",
    "ARTICLE II",
    "PLAYER CONTRACTS",
    CONTRACTS_BODY,
]

MINIMAL_TEXT = "\n".join(MINIMAL_LINES)

TOC_LINES = [
    "COLLECTIVE BARGAINING AGREEMENT",
    "TABLE OF CONTENTS",
    "ARTICLE I",
    "DEFINITIONS",
    "ARTICLE II",
    "PLAYER CONTRACTS",
    "",
    "ARTICLE I",
    "DEFINITIONS",
    "Section 1. Player",
    "A Player is any person who signs a contract.",
    "ARTICLE II",
    "PLAYER CONTRACTS",
    "Every Player Contract shall be in the approved form.",
]

TOC_TEXT = "\n".join(TOC_LINES)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing agreement text to a temporary file."""

    def _write(text: str, name: str = "cba.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_path(write_document: Callable[[str], Path]) -> Path:
    """Temporary file holding the minimal two article agreement."""

    return write_document(MINIMAL_TEXT)


@pytest.fixture
def minimal_text() -> str:
    """The minimal two article agreement as text."""

    return MINIMAL_TEXT


@pytest.fixture
def toc_text() -> str:
    """An agreement whose table of contents repeats the markers."""

    return TOC_TEXT


@pytest.fixture
def contracts_body() -> str:
    """Body text of the article without sections in the minimal sample."""

    return CONTRACTS_BODY
