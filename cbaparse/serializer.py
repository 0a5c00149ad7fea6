"""Serialize parsed articles into structured records and files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import yaml  # type: ignore[import-untyped]

from cbaparse.json_utils import json_dumps, json_loads
from cbaparse.parser.article import Article
from cbaparse.xlsx import write_workbook

logger = logging.getLogger(__name__)

Record = dict[str, Any]
RecordList = list[Record]

COMBINED_STEM = "all_articles"

# Mapping from format names to file extensions.
EXTENSIONS = {"json": ".json", "yaml": ".yaml", "xlsx": ".xlsx"}


def article_record(article: Article) -> Record:
    """Return the structured record of one article.

    Args:
        article: Parsed article.

    Returns:
        Mapping with the article label, title, intro content and sections.
    """

    return {
        "article_number": article.label,
        "title": article.title,
        "intro_content": article.intro_content,
        "sections": [
            {
                "section_number": section.label,
                "section_title": section.title,
                "content": section.content,
            }
            for section in article.sections
        ],
    }


def article_records(articles: Iterable[Article]) -> RecordList:
    """Return the combined record: every article record in order."""

    return [article_record(article) for article in articles]


def dumps(data: object, output_format: str = "json") -> str:
    """Render ``data`` as JSON or YAML text.

    The output only depends on ``data`` so unchanged input always renders
    to identical text.

    Args:
        data: Record or list of records.
        output_format: Either ``json`` or ``yaml``.

    Returns:
        Text ending with a newline.
    """

    if output_format == "json":
        return json_dumps(data, indent=True) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    raise ValueError(f"Unsupported text format: {output_format}")


def article_file_name(position: int, article: Article, ext: str) -> str:
    """Return the file name of an article record.

    Args:
        position: 1-based position of the article in the document.
        article: Parsed article.
        ext: File extension including the dot.

    Returns:
        Name such as ``article_07_article_vii.json``.
    """

    slug = article.label.replace(" ", "_").lower()
    return f"article_{position:02d}_{slug}{ext}"


def write_outputs(
    articles: Iterable[Article],
    output_dir: Path,
    output_format: str = "json",
) -> list[Path]:
    """Write per-article records and the combined record.

    Args:
        articles: Parsed articles in document order.
        output_dir: Destination directory; created when missing.
        output_format: ``json``, ``yaml`` or ``xlsx``. The workbook format
            only produces the combined file.

    Returns:
        Paths of the written files, combined file last.
    """

    articles = list(articles)
    ext = EXTENSIONS[output_format]
    output_dir.mkdir(parents=True, exist_ok=True)
    records = article_records(articles)
    written: list[Path] = []

    if output_format == "xlsx":
        path = output_dir / f"{COMBINED_STEM}{ext}"
        write_workbook(records, path)
        logger.info(f"Saved workbook {path}")
        return [path]

    # Save each article as a separate file.
    for position, (article, record) in enumerate(
        zip(articles, records), start=1
    ):
        path = output_dir / article_file_name(position, article, ext)
        path.write_text(dumps(record, output_format), encoding="utf-8")
        written.append(path)

    combined = output_dir / f"{COMBINED_STEM}{ext}"
    combined.write_text(dumps(records, output_format), encoding="utf-8")
    written.append(combined)

    logger.info(
        f"Saved {len(articles)} article files and {combined.name} "
        f"to {output_dir}"
    )
    return written


def load_records(path: Path) -> RecordList:
    """Read a combined record written by :func:`write_outputs`.

    Args:
        path: Location of the JSON or YAML file.

    Returns:
        The list of article records.
    """

    text = path.read_text(encoding="utf-8")

    # Decode JSON or YAML depending on file extension.
    if path.suffix == ".json":
        data = json_loads(text)
    else:
        data = yaml.safe_load(text)

    if not isinstance(data, list):
        raise ValueError(f"{path} does not hold a list of article records")
    return data
