"""Split a document into article spans using the article marker lines."""

from __future__ import annotations

import logging

from attrs import define, field

from .accumulator import MIN_CONTENT_LENGTH, ContentBuffer
from .anomaly import (
    DUPLICATE_ARTICLE,
    FRONT_MATTER,
    NO_ARTICLES,
    OUT_OF_ORDER_ARTICLE,
    Anomaly,
)
from .document import Document
from .headings import DEFAULT_LOOKAHEAD, resolve_heading
from .patterns import match_article, match_section
from .roman import roman_to_int
from .span import ArticleSpan
from .types import AnomalyList, SpanList

logger = logging.getLogger(__name__)

# (line index, numeral) pairs in document order.
MarkerList = list[tuple[int, str]]


@define(slots=True)
class Segmentation:
    """Result of splitting a document into article spans.

    Attributes:
        spans: Article spans in document order.
        front_matter_end: First line index that belongs to an article.
            Lines before it form the excluded front matter.
        anomalies: Structural findings made while segmenting.
    """

    spans: SpanList = field(factory=list)
    front_matter_end: int = 0
    anomalies: AnomalyList = field(factory=list)


def find_article_markers(
    document: Document, start_line: int = 0
) -> MarkerList:
    """Return every article marker at or after ``start_line``.

    Args:
        document: The loaded document.
        start_line: First line index to look at.

    Returns:
        Pairs of line index and Roman numeral, in document order.
    """

    markers: MarkerList = []
    for index in range(max(start_line, 0), len(document)):
        numeral = match_article(document[index])
        if numeral is not None:
            markers.append((index, numeral))
    return markers


def _is_listing_entry(
    document: Document,
    line: int,
    end: int,
    min_content_length: int,
    lookahead: int,
) -> bool:
    """Tell whether the marker at ``line`` only names an article.

    A table of contents entry holds the marker and its title. It has no
    section markers and no body text beyond the title line.
    """

    heading = resolve_heading(document, line, stop=end, lookahead=lookahead)
    buffer = ContentBuffer()

    for index in range(line + 1, end):
        if match_section(document[index]) is not None:
            return False
        if index != heading.line:
            buffer.add(document[index])

    text = buffer.text()
    return not text or len(text) < min_content_length


def _drop_table_of_contents(
    document: Document,
    markers: MarkerList,
    anomalies: AnomalyList,
    min_content_length: int,
    lookahead: int,
) -> MarkerList:
    """Discard markers listed before the body restarts the sequence.

    A table of contents repeats the article markers ahead of the body. When
    the numeral of the first marker shows up again and every marker before
    that reappearance is a bare listing entry, those markers belong to the
    front matter. A reappearance after real article bodies is left alone
    and reported as a duplicate later on.
    """

    if not markers:
        return markers

    first_numeral = markers[0][1]
    restarts = [
        pos
        for pos, (_, numeral) in enumerate(markers)
        if pos > 0 and numeral == first_numeral
    ]
    if not restarts:
        return markers

    body_start = restarts[0]
    line = markers[body_start][0]

    # Every earlier span must be a bare listing entry.
    for pos in range(body_start):
        entry_line = markers[pos][0]
        entry_end = markers[pos + 1][0]
        if not _is_listing_entry(
            document, entry_line, entry_end, min_content_length, lookahead
        ):
            logger.debug(
                f"ARTICLE {first_numeral} repeats at line {line}, but the "
                f"article at line {entry_line} has a body; keeping all "
                "markers"
            )
            return markers

    anomalies.append(
        Anomaly(
            kind=FRONT_MATTER,
            message=(
                f"Article sequence restarts at ARTICLE {first_numeral}; "
                f"{body_start} earlier marker(s) treated as front matter"
            ),
            line=line,
            article=first_numeral,
        )
    )
    logger.warning(
        f"Skipping {body_start} article markers before line {line} "
        "(table of contents)"
    )
    return markers[body_start:]


def _check_order(markers: MarkerList, anomalies: AnomalyList) -> None:
    """Record duplicate and out of order numerals without reordering."""

    seen: set[str] = set()
    previous = 0

    for line, numeral in markers:
        value = roman_to_int(numeral)

        if numeral in seen:
            anomalies.append(
                Anomaly(
                    kind=DUPLICATE_ARTICLE,
                    message=f"ARTICLE {numeral} appears more than once",
                    line=line,
                    article=numeral,
                )
            )
            logger.warning(f"Duplicate ARTICLE {numeral} at line {line}")
        elif value <= previous:
            anomalies.append(
                Anomaly(
                    kind=OUT_OF_ORDER_ARTICLE,
                    message=f"ARTICLE {numeral} follows a higher numeral",
                    line=line,
                    article=numeral,
                )
            )
            logger.warning(f"Out of order ARTICLE {numeral} at line {line}")

        seen.add(numeral)
        previous = max(previous, value)


def segment_articles(
    document: Document,
    start_line: int = 0,
    detect_restart: bool = True,
    min_content_length: int = MIN_CONTENT_LENGTH,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> Segmentation:
    """Split ``document`` into disjoint article spans.

    Each span runs from its marker line up to the next marker; the last one
    extends to the end of the document. Anomalies in the numeral sequence
    are recorded but never change the document order of the spans.

    Args:
        document: The loaded document.
        start_line: Lines before this index are never parsed.
        detect_restart: Treat a repeated listing of the markers (table of
            contents) as front matter.
        min_content_length: Body text below this length does not make a
            listed marker a real article.
        lookahead: Lines searched after a marker for its title.

    Returns:
        The spans, the front matter boundary and any anomalies.
    """

    anomalies: AnomalyList = []
    markers = find_article_markers(document, start_line)

    if detect_restart:
        markers = _drop_table_of_contents(
            document, markers, anomalies, min_content_length, lookahead
        )

    if not markers:
        anomalies.append(
            Anomaly(kind=NO_ARTICLES, message="No article markers found")
        )
        logger.warning(f"No article markers found in {document.source}")
        return Segmentation(
            spans=[], front_matter_end=len(document), anomalies=anomalies
        )

    _check_order(markers, anomalies)

    # Close each span at the following marker.
    ends = [line for line, _ in markers[1:]] + [len(document)]
    spans: SpanList = [
        ArticleSpan(numeral=numeral, start=line, end=end)
        for (line, numeral), end in zip(markers, ends)
    ]

    logger.info(
        f"Found {len(spans)} articles; front matter ends at line "
        f"{spans[0].start}"
    )
    return Segmentation(
        spans=spans, front_matter_end=spans[0].start, anomalies=anomalies
    )
