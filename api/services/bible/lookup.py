# api/services/bible/lookup.py
"""
Resolve Locators against the corpus.

These functions hold no state: every call reads from the store for the
given language and version. Any missing piece (book document, chapter,
verse, verse text) resolves to None.
"""

import logging
from typing import Optional

from .models import Book, Chapter, Locator, Verse
from .reference_parser import ReferenceParseError, normalize_book_name, parse_reference
from .storage import CorpusStore

logger = logging.getLogger(__name__)


def _in_bounds(index: Optional[int], size: int) -> bool:
    return index is not None and 0 <= index < size


def resolve_book(store: CorpusStore, language: str, version: str, locator: Locator) -> Optional[Book]:
    if not locator.book:
        return None
    return store.load_book(language, version, normalize_book_name(locator.book))


def resolve_chapter(store: CorpusStore, language: str, version: str, locator: Locator) -> Optional[Chapter]:
    if locator.chapter is None:
        return None

    book = resolve_book(store, language, version, locator)
    if book is None or not _in_bounds(locator.chapter_index, book.chapter_count):
        return None

    return book.chapters[locator.chapter_index]


def resolve_verse(store: CorpusStore, language: str, version: str, locator: Locator) -> Optional[Verse]:
    if locator.verse is None:
        return None

    chapter = resolve_chapter(store, language, version, locator)
    if chapter is None or not _in_bounds(locator.verse_index, chapter.verse_count):
        return None

    return chapter.verses[locator.verse_index]


def resolve(store: CorpusStore, language: str, version: str, locator: Locator) -> Optional[str]:
    """
    Get the text of the verse a Locator points at.

    Returns:
        Verse text, or None if any part of the locator does not resolve
    """
    verse = resolve_verse(store, language, version, locator)
    if verse is None:
        logger.debug(f"No verse at {locator} ({language}/{version})")
        return None
    return verse.text


def lookup(store: CorpusStore, language: str, version: str, reference: str) -> Optional[str]:
    """
    Parse a reference string and resolve it.

    Returns:
        Verse text, or None if the reference is malformed or not found
    """
    try:
        parsed = parse_reference(reference)
    except ReferenceParseError as e:
        logger.debug(f"Unparseable reference: {e}")
        return None

    return resolve(store, language, version, parsed.to_locator())
