"""Split one article span into its sections."""

from __future__ import annotations

import logging

from attrs import define, field

from .accumulator import ContentBuffer
from .anomaly import UNTITLED_ARTICLE, UNTITLED_SECTION, Anomaly
from .article import Article
from .document import Document
from .headings import Heading, resolve_heading
from .options import ParserOptions
from .patterns import match_section
from .section import Section
from .span import ArticleSpan
from .types import AnomalyList, SectionList

logger = logging.getLogger(__name__)


@define(slots=True)
class _OpenSection:
    """Section whose body is still being collected."""

    number: int
    heading: Heading
    line: int
    buffer: ContentBuffer = field(factory=ContentBuffer)


@define(slots=True)
class _ArticleState:
    """Scan state for a single article span."""

    intro: ContentBuffer = field(factory=ContentBuffer)
    current: _OpenSection | None = None
    sections: SectionList = field(factory=list)
    title_line: int | None = None

    @property
    def buffer(self) -> ContentBuffer:
        """Buffer receiving body lines at this point of the scan."""

        return self.current.buffer if self.current else self.intro


def _close_section(
    state: _ArticleState, numeral: str, options: ParserOptions
) -> None:
    """Emit the open section, dropping it when its body is noise."""

    open_section = state.current
    if open_section is None:
        return
    state.current = None

    content = open_section.buffer.finalize(options.min_content_length)
    if content is None:
        logger.debug(
            f"Dropping Article {numeral} Section {open_section.number} "
            f"at line {open_section.line}: content below "
            f"{options.min_content_length} characters"
        )
        return

    state.sections.append(
        Section(
            number=open_section.number,
            title=open_section.heading.title,
            content=content,
            line=open_section.line,
        )
    )


def tokenize_article(
    document: Document,
    span: ArticleSpan,
    options: ParserOptions | None = None,
) -> tuple[Article, AnomalyList]:
    """Build the article held by ``span``.

    Lines before the first section marker become the intro content. Every
    section marker closes the previous section and opens a new one whose
    number is taken verbatim from the marker. Only the article title line
    is left out of the content; a section title found on the following
    lines stays part of the section body.

    Args:
        document: The loaded document.
        span: Line range of the article, starting at its marker.
        options: Parser settings; defaults are used when omitted.

    Returns:
        The article and the anomalies found while reading it.
    """

    options = options or ParserOptions()
    anomalies: AnomalyList = []
    state = _ArticleState()

    # Resolve the article title from the lines after the marker.
    title = resolve_heading(
        document, span.start, stop=span.end, lookahead=options.lookahead
    )
    if title.line is not None:
        state.title_line = title.line
    else:
        anomalies.append(
            Anomaly(
                kind=UNTITLED_ARTICLE,
                message=f"No title found for ARTICLE {span.numeral}",
                line=span.start,
                article=span.numeral,
            )
        )
        logger.warning(f"ARTICLE {span.numeral} has no resolvable title")

    for index in range(span.start + 1, span.end):
        if index == state.title_line:
            continue

        line = document[index]
        marker = match_section(line)
        if marker is None:
            state.buffer.add(line)
            continue

        _close_section(state, span.numeral, options)

        heading = resolve_heading(
            document,
            index,
            same_line_title=marker.title,
            stop=span.end,
            lookahead=options.lookahead,
        )
        if not heading.resolved:
            anomalies.append(
                Anomaly(
                    kind=UNTITLED_SECTION,
                    message=(
                        f"No title found for Article {span.numeral} "
                        f"Section {marker.number}"
                    ),
                    line=index,
                    article=span.numeral,
                )
            )
            logger.warning(
                f"Article {span.numeral} Section {marker.number} at line "
                f"{index} has no resolvable title"
            )

        state.current = _OpenSection(
            number=marker.number, heading=heading, line=index
        )

    _close_section(state, span.numeral, options)

    intro = state.intro.finalize(options.min_content_length) or ""
    article = Article(
        number=span.numeral,
        title=title.title,
        intro_content=intro,
        sections=state.sections,
        start=span.start,
        end=span.end,
    )
    logger.debug(
        f"Article {span.numeral}: {len(state.sections)} sections, "
        f"lines {span.start}-{span.end - 1}"
    )
    return article, anomalies
