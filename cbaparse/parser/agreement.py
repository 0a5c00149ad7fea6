"""Parsed hierarchy of a whole agreement."""

from __future__ import annotations

from attrs import define, field

from .document import Document
from .types import AnomalyList, ArticleList


@define(slots=True)
class ParsedAgreement:
    """Parsed hierarchy of a whole agreement.

    Attributes:
        document: The document the hierarchy was built from.
        articles: Articles in document order.
        anomalies: Non-fatal structural findings, in discovery order.
        front_matter_end: First line index that belongs to an article.
    """

    document: Document = field(repr=False)
    articles: ArticleList = field(factory=list)
    anomalies: AnomalyList = field(factory=list)
    front_matter_end: int = 0

    @property
    def section_count(self) -> int:
        return sum(len(article.sections) for article in self.articles)
