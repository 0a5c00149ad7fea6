"""Parser package for collective bargaining agreements."""

from .agreement import ParsedAgreement
from .article import Article
from .document import Document, load_document
from .errors import DocumentNotFound
from .options import ParserOptions
from .parse_document import parse_document, parse_file
from .section import Section
from .verifier import VerificationReport, format_report, verify

__all__ = [
    "Article",
    "Document",
    "DocumentNotFound",
    "ParsedAgreement",
    "ParserOptions",
    "Section",
    "VerificationReport",
    "format_report",
    "load_document",
    "parse_document",
    "parse_file",
    "verify",
]
