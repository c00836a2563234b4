"""Markdown rendering of project documentation."""

from .language import LANGUAGE_BY_EXTENSION, language_for
from .markdown_document import BINARY_PLACEHOLDER, READ_ERROR_PLACEHOLDER, MarkdownDocument

__all__ = [
    "BINARY_PLACEHOLDER",
    "LANGUAGE_BY_EXTENSION",
    "MarkdownDocument",
    "READ_ERROR_PLACEHOLDER",
    "language_for",
]
