"""Parse a loaded document into articles and sections."""

from __future__ import annotations

import logging
from pathlib import Path

from .agreement import ParsedAgreement
from .document import Document, load_document
from .options import ParserOptions
from .segmenter import segment_articles
from .tokenizer import tokenize_article
from .types import AnomalyList, ArticleList

logger = logging.getLogger(__name__)


def parse_document(
    document: Document, options: ParserOptions | None = None
) -> ParsedAgreement:
    """Parse ``document`` into its article and section hierarchy.

    Args:
        document: The loaded document.
        options: Parser settings; defaults are used when omitted.

    Returns:
        The parsed agreement with articles in document order.
    """

    options = options or ParserOptions()

    segmentation = segment_articles(
        document,
        start_line=options.start_line,
        detect_restart=options.detect_restart,
        min_content_length=options.min_content_length,
        lookahead=options.lookahead,
    )

    articles: ArticleList = []
    anomalies: AnomalyList = list(segmentation.anomalies)

    # Each span is independent, so articles are built one after another.
    for span in segmentation.spans:
        article, found = tokenize_article(document, span, options)
        articles.append(article)
        anomalies.extend(found)

    agreement = ParsedAgreement(
        document=document,
        articles=articles,
        anomalies=anomalies,
        front_matter_end=segmentation.front_matter_end,
    )
    logger.info(
        f"Parsed {len(articles)} articles with "
        f"{agreement.section_count} sections"
    )
    return agreement


def parse_file(
    path: Path | str, options: ParserOptions | None = None
) -> ParsedAgreement:
    """Load the document at ``path`` and parse it.

    Raises:
        DocumentNotFound: If ``path`` does not point to a file.
    """

    return parse_document(load_document(path), options)
