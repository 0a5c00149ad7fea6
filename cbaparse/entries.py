"""Flatten article records into ordered storage rows."""

from __future__ import annotations

from typing import Any, Iterable

Entry = dict[str, Any]
EntryList = list[Entry]


def flatten_entries(records: Iterable[dict[str, Any]]) -> EntryList:
    """Turn the combined record into one row per article and section.

    Every article contributes a header row followed by one row per
    section. ``order_index`` numbers all rows contiguously from zero.

    Args:
        records: Article records as produced by the serializer.

    Returns:
        Rows ready to be handed to a storage layer.
    """

    entries: EntryList = []

    for record in records:
        article_number = record["article_number"]
        article_title = record.get("title", "")

        # Articles without intro text still need a readable body.
        content = record.get("intro_content") or (
            f"This is {article_number}: {article_title}"
        )
        entries.append(
            {
                "type": "article",
                "article_number": article_number,
                "article_title": article_title,
                "section_number": None,
                "title": article_title,
                "content": content,
                "order_index": len(entries),
            }
        )

        for section in record.get("sections", []):
            entries.append(
                {
                    "type": "section",
                    "article_number": article_number,
                    "article_title": article_title,
                    "section_number": section["section_number"],
                    "title": section.get("section_title", ""),
                    "content": section.get("content", ""),
                    "order_index": len(entries),
                }
            )

    return entries


def summarize_entries(entries: Iterable[Entry]) -> dict[str, int]:
    """Count article rows, section rows and all rows."""

    summary = {"articles": 0, "sections": 0, "total": 0}
    for entry in entries:
        if entry["type"] == "article":
            summary["articles"] += 1
        elif entry["type"] == "section":
            summary["sections"] += 1
        summary["total"] += 1
    return summary
