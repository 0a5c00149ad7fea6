"""Line range claimed by one article."""

from __future__ import annotations

from attrs import frozen


@frozen
class ArticleSpan:
    """Line range claimed by one article.

    Attributes:
        numeral: Roman numeral read from the marker line.
        start: Index of the marker line.
        end: Index one past the last line of the span.
    """

    numeral: str
    start: int
    end: int
