"""Non-fatal structural findings collected while parsing."""

from __future__ import annotations

from attrs import define

FRONT_MATTER = "front_matter"
DUPLICATE_ARTICLE = "duplicate_article"
OUT_OF_ORDER_ARTICLE = "out_of_order_article"
UNTITLED_ARTICLE = "untitled_article"
UNTITLED_SECTION = "untitled_section"
NO_ARTICLES = "no_articles"


@define(slots=True)
class Anomaly:
    """Non-fatal structural finding.

    Attributes:
        kind: One of the kind constants defined in this module.
        message: Human readable description.
        line: Document line the finding refers to, if any.
        article: Roman numeral of the affected article, if any.
    """

    kind: str
    message: str
    line: int | None = None
    article: str | None = None

    def __str__(self) -> str:
        where = f" (line {self.line})" if self.line is not None else ""
        return f"{self.kind}: {self.message}{where}"
