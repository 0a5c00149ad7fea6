"""Tunable parser settings."""

from __future__ import annotations

from attrs import field, frozen, validators

from .accumulator import MIN_CONTENT_LENGTH
from .headings import DEFAULT_LOOKAHEAD


@frozen
class ParserOptions:
    """Tunable parser settings.

    Attributes:
        min_content_length: Shortest section or intro text that is kept.
        lookahead: Lines searched after a marker for a detached title.
        start_line: Lines before this index are never parsed.
        detect_restart: Treat a leading table of contents that repeats the
            article markers as front matter.
    """

    min_content_length: int = field(
        default=MIN_CONTENT_LENGTH, validator=validators.ge(0)
    )
    lookahead: int = field(
        default=DEFAULT_LOOKAHEAD, validator=validators.ge(1)
    )
    start_line: int = field(default=0, validator=validators.ge(0))
    detect_restart: bool = True
