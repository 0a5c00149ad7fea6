"""Represents a single article of the agreement."""

from __future__ import annotations

from attrs import define, field

from .types import SectionList


@define(slots=True)
class Article:
    """Represents a single article of the agreement.

    Attributes:
        number: Roman numeral of the article such as "VII".
        title: Heading text of the article.
        intro_content: Text found before the first section marker.
        sections: Sections of the article in document order.
        start: Index of the article marker line.
        end: Index one past the last line of the article span.
    """

    number: str
    title: str
    intro_content: str = ""
    sections: SectionList = field(factory=list, repr=False)
    start: int = field(default=0, repr=False)
    end: int = field(default=0, repr=False)

    @property
    def label(self) -> str:
        """Label used in the serialized records, such as "Article VII"."""

        return f"Article {self.number}"
