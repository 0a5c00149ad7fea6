"""Cross-check a parsed agreement against the reference table."""

from __future__ import annotations

import logging
from typing import Mapping

from attrs import define, field

from .agreement import ParsedAgreement
from .article import Article
from .reference import REFERENCE_SECTION_COUNTS
from .types import AnomalyList

logger = logging.getLogger(__name__)

MATCH = "match"
MISMATCH = "mismatch"
MISSING = "missing"
UNEXPECTED = "unexpected"


@define(slots=True)
class ArticleCheck:
    """Expected against found section count for one article.

    Attributes:
        number: Roman numeral of the article.
        title: Article title, empty for missing articles.
        expected: Count from the reference table, ``None`` when the article
            is not listed there.
        found: Number of sections produced, ``None`` when the article is
            missing from the output.
        status: One of ``match``, ``mismatch``, ``missing``, ``unexpected``.
    """

    number: str
    title: str
    expected: int | None
    found: int | None
    status: str

    @property
    def ok(self) -> bool:
        return self.status == MATCH


@define(slots=True)
class VerificationReport:
    """Outcome of verifying a parsed agreement.

    Attributes:
        checks: One row per reference article, then unexpected articles.
        articles_found: Number of articles produced.
        articles_expected: Number of articles in the reference table.
        sections_found: Total number of sections produced.
        sections_expected: Total of the reference section counts.
        anomalies: Structural findings carried over from parsing.
    """

    checks: list[ArticleCheck] = field(factory=list)
    articles_found: int = 0
    articles_expected: int = 0
    sections_found: int = 0
    sections_expected: int = 0
    anomalies: AnomalyList = field(factory=list)

    @property
    def mismatches(self) -> list[ArticleCheck]:
        return [check for check in self.checks if not check.ok]

    @property
    def ok(self) -> bool:
        """Whether every article and the totals agree with the reference."""

        return (
            not self.mismatches
            and self.articles_found == self.articles_expected
        )


def verify(
    agreement: ParsedAgreement,
    reference: Mapping[str, int] | None = None,
) -> VerificationReport:
    """Compare the parsed hierarchy with the expected section counts.

    Differences are reported, never raised. When an article occurs more
    than once the first occurrence is compared; the duplicate itself is
    already listed among the parse anomalies.

    Args:
        agreement: The parsed agreement.
        reference: Expected section count per article numeral. Defaults to
            the counts of the 2023 agreement.

    Returns:
        The verification report.
    """

    reference = REFERENCE_SECTION_COUNTS if reference is None else reference

    # First occurrence of each article number.
    produced: dict[str, Article] = {}
    for article in agreement.articles:
        produced.setdefault(article.number, article)

    checks: list[ArticleCheck] = []
    for number, expected in reference.items():
        article = produced.get(number)
        if article is None:
            checks.append(
                ArticleCheck(
                    number=number,
                    title="",
                    expected=expected,
                    found=None,
                    status=MISSING,
                )
            )
            continue

        found = len(article.sections)
        checks.append(
            ArticleCheck(
                number=number,
                title=article.title,
                expected=expected,
                found=found,
                status=MATCH if found == expected else MISMATCH,
            )
        )

    # Articles the reference does not know about, in document order.
    for number, article in produced.items():
        if number not in reference:
            checks.append(
                ArticleCheck(
                    number=number,
                    title=article.title,
                    expected=None,
                    found=len(article.sections),
                    status=UNEXPECTED,
                )
            )

    report = VerificationReport(
        checks=checks,
        articles_found=len(agreement.articles),
        articles_expected=len(reference),
        sections_found=agreement.section_count,
        sections_expected=sum(reference.values()),
        anomalies=list(agreement.anomalies),
    )

    for check in report.mismatches:
        logger.warning(
            f"Article {check.number}: {check.status} "
            f"(expected {check.expected}, found {check.found})"
        )
    if report.articles_found != report.articles_expected:
        logger.warning(
            f"Expected {report.articles_expected} articles, "
            f"found {report.articles_found}"
        )
    return report


def format_report(report: VerificationReport) -> list[str]:
    """Render ``report`` as printable lines.

    Args:
        report: The verification report.

    Returns:
        Lines describing each article check, the anomalies and the totals.
    """

    lines = ["Summary (Expected vs Found):"]

    for check in report.checks:
        marker = "OK" if check.ok else "!!"
        title = f": {check.title}" if check.title else ""
        lines.append(f"  {marker} Article {check.number}{title}")

        if check.status == MISSING:
            lines.append(
                f"     Expected: {check.expected} sections, not found"
            )
        elif check.status == UNEXPECTED:
            lines.append(
                f"     Not in reference table, found: {check.found} sections"
            )
        else:
            lines.append(
                f"     Expected: {check.expected} sections, "
                f"Found: {check.found} sections"
            )

    if report.anomalies:
        lines.append("Warnings:")
        lines.extend(f"  - {anomaly}" for anomaly in report.anomalies)

    lines.append(
        f"Articles: found {report.articles_found} of "
        f"{report.articles_expected} expected"
    )
    lines.append(
        f"Sections: found {report.sections_found} of "
        f"{report.sections_expected} expected"
    )
    lines.append(
        "Verification passed" if report.ok else "Verification found problems"
    )
    return lines
