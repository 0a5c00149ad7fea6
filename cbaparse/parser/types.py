"""Common type aliases for parser structures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .anomaly import Anomaly  # noqa: F401
    from .article import Article  # noqa: F401
    from .section import Section  # noqa: F401
    from .span import ArticleSpan  # noqa: F401


LineList = list[str]
SectionList = list["Section"]
ArticleList = list["Article"]
SpanList = list["ArticleSpan"]
AnomalyList = list["Anomaly"]
