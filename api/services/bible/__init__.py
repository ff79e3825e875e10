# api/services/bible/__init__.py
"""
Bible corpus lookup services.

This package provides:
- Bible: Selection context (language, version, book, chapter, verse)
- BibleService: Option lists and multi-verse fetch for selection forms
- CorpusStore: Read-only access to the JSON corpus tree
- parse_reference: Parse "Book Chapter:Verse" strings
- resolve / lookup: Stateless resolution of Locators and references
"""

from .models import Book, Chapter, Verse, Locator
from .storage import (
    CorpusStore,
    ConfigurationError,
    LanguageNotFoundError,
    VersionNotFoundError,
    CorpusMissingError,
)
from .reference_parser import (
    ParsedReference,
    ReferenceParseError,
    parse_reference,
    normalize_book_name,
    is_valid_reference,
    format_verse_range,
    format_reference,
)
from .lookup import (
    resolve,
    resolve_book,
    resolve_chapter,
    resolve_verse,
    lookup,
)
from .bible import Bible
from .bible_service import BibleService, VerseSelection

__all__ = [
    # Selection context (primary interface)
    "Bible",
    "BibleService",
    "VerseSelection",
    # Models
    "Book",
    "Chapter",
    "Verse",
    "Locator",
    # Storage
    "CorpusStore",
    "ConfigurationError",
    "LanguageNotFoundError",
    "VersionNotFoundError",
    "CorpusMissingError",
    # Reference parsing
    "ParsedReference",
    "ReferenceParseError",
    "parse_reference",
    "normalize_book_name",
    "is_valid_reference",
    "format_verse_range",
    "format_reference",
    # Resolution
    "resolve",
    "resolve_book",
    "resolve_chapter",
    "resolve_verse",
    "lookup",
]
