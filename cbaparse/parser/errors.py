"""Errors raised by the parser."""

from __future__ import annotations


class DocumentNotFound(FileNotFoundError):
    """The source document does not exist or is not a regular file."""
