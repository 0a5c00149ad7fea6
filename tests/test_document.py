"""Tests for loading the agreement text."""

from pathlib import Path
from typing import Callable

import pytest

from cbaparse.parser import Document, DocumentNotFound, load_document


def test_load_document_preserves_line_numbers(
    write_document: Callable[[str], Path],
) -> None:
    """Lines are returned in order and indexed from zero."""

    path = write_document("ARTICLE I\nDEFINITIONS\n\nSection 1.")
    document = load_document(path)

    assert len(document) == 4
    assert document[0] == "ARTICLE I"
    assert document[2] == ""
    assert document[3] == "Section 1."
    assert document.source == str(path)


def test_load_document_strips_carriage_returns(
    write_document: Callable[[str], Path],
) -> None:
    """Windows line endings do not leak into the lines."""

    path = write_document("ARTICLE I\r\nDEFINITIONS\r\n")
    document = load_document(path)

    assert document.lines == ("ARTICLE I", "DEFINITIONS", "")


def test_form_feed_stays_inside_its_line() -> None:
    """Page breaks do not shift the line numbering."""

    document = Document.from_text("page one\x0cpage two\nnext")

    assert len(document) == 2
    assert document[1] == "next"


def test_load_document_missing_file(tmp_path: Path) -> None:
    """A missing document raises ``DocumentNotFound``."""

    with pytest.raises(DocumentNotFound):
        load_document(tmp_path / "missing.txt")


def test_load_document_rejects_directory(tmp_path: Path) -> None:
    """A directory is not a readable document."""

    with pytest.raises(FileNotFoundError):
        load_document(tmp_path)
