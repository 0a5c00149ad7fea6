"""Represents a single section inside an article."""

from __future__ import annotations

from attrs import define, field


@define(slots=True)
class Section:
    """Represents a single section inside an article.

    Attributes:
        number: Section number exactly as written in the marker.
        title: Heading text; empty when none could be resolved.
        content: Normalized body text of the section.
        line: Index of the marker line in the document.
    """

    number: int
    title: str
    content: str
    line: int = field(default=-1, repr=False)

    @property
    def label(self) -> str:
        """Label used in the serialized records, such as "Section 4"."""

        return f"Section {self.number}"
