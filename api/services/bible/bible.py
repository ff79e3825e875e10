# api/services/bible/bible.py
"""
Selection context for Bible lookups.

A Bible instance tracks the current language, version, book, chapter and
verse. It is a plain object: create one per request or session. There is
no internal locking.
"""

import logging
from typing import Optional

from core.config import BibleSettings, get_settings
from services.cache import BookIndexCache

from .lookup import resolve, resolve_book, resolve_chapter
from .models import Book, Chapter, Locator
from .reference_parser import ReferenceParseError, normalize_book_name, parse_reference
from .storage import (
    CorpusMissingError,
    CorpusStore,
    LanguageNotFoundError,
    VersionNotFoundError,
)

logger = logging.getLogger(__name__)

UNCONFIGURED = "unconfigured"
LANGUAGE_SET = "language_set"
BOOK_SET = "book_set"
CHAPTER_SET = "chapter_set"
VERSE_SET = "verse_set"


class Bible:
    """
    Fluent cursor over a Bible corpus.

    Usage:
        bible = Bible("en", "kjv")

        # One-shot lookup
        text = bible.get("John 3:16")

        # Fluent selection
        text = bible.book("John").chapter(3).verse(16).get_verse()

        # Structure for selection UIs
        books = bible.get_books()
        chapters = bible.book("John").chapter_count()

    Setting a book does not clear a previously selected chapter or verse.
    Call clear() before selecting a different book if the old chapter and
    verse should not carry over.
    """

    def __init__(
        self,
        language: str = None,
        version: str = None,
        corpus_path=None,
        settings: BibleSettings = None,
        store: CorpusStore = None,
    ):
        settings = settings or get_settings()
        self.store = store or CorpusStore(corpus_path or settings.corpus_root_path)
        self._index_cache = BookIndexCache(self.store)

        self.lang: Optional[str] = None
        self.version: Optional[str] = None
        self._book: Optional[str] = None
        self._chapter: Optional[int] = None
        self._verse: Optional[int] = None

        self.set_lang(language or settings.default_language)
        self.set_version(version or settings.default_version)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_lang(self, language: str) -> "Bible":
        """
        Select a language.

        Raises:
            LanguageNotFoundError: If the language has no corpus subtree
            CorpusMissingError: If the language's Books.json is missing or
                malformed

        The index is loaded here, so a failure leaves the current language
        and its cached index untouched.
        """
        if not self.store.exists(language):
            logger.error(f"Language [{language}] not found under {self.store.base_path}")
            raise LanguageNotFoundError(f"The language [{language}] doesn't exist")

        if not self.store.index_exists(language):
            logger.error(f"Books.json missing for [{language}]")
            raise CorpusMissingError(f"Index of available books not found for [{language}]")

        try:
            self._index_cache.get(language)
        except CorpusMissingError as e:
            logger.error(f"Unusable book index for [{language}]: {e}")
            raise

        self.lang = language
        return self

    def set_version(self, version: str) -> "Bible":
        """
        Select a version under the current language.

        Raises:
            VersionNotFoundError: If the version has no subtree
        """
        if not self.store.version_exists(self.lang, version):
            logger.error(f"Version [{version}] not found for [{self.lang}]")
            raise VersionNotFoundError(
                f"The bible version [{version}] for language [{self.lang}] doesn't exist"
            )

        self.version = version
        return self

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def book(self, book_name: str) -> "Bible":
        self._book = normalize_book_name(book_name)
        return self

    def chapter(self, chapter_number: int) -> "Bible":
        """Select a chapter by its 1-based number."""
        self._chapter = int(chapter_number)
        return self

    def verse(self, verse_number: int) -> "Bible":
        """Select a verse by its 1-based number."""
        self._verse = int(verse_number)
        return self

    def clear(self) -> "Bible":
        """Reset the book, chapter and verse selection."""
        self._book = None
        self._chapter = None
        self._verse = None
        return self

    @property
    def locator(self) -> Locator:
        """The current selection."""
        return Locator(book=self._book, chapter=self._chapter, verse=self._verse)

    @property
    def state(self) -> str:
        if self.lang is None:
            return UNCONFIGURED
        if self._verse is not None:
            return VERSE_SET
        if self._chapter is not None:
            return CHAPTER_SET
        if self._book is not None:
            return BOOK_SET
        return LANGUAGE_SET

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_books(self) -> list[str]:
        """Return the ordered book list for the current language."""
        return self._index_cache.get(self.lang)

    get_bible_index = get_books

    def get_book(self) -> Optional[Book]:
        return resolve_book(self.store, self.lang, self.version, self.locator)

    def get_chapter(self) -> Optional[Chapter]:
        return resolve_chapter(self.store, self.lang, self.version, self.locator)

    def get_verse(self) -> Optional[str]:
        return resolve(self.store, self.lang, self.version, self.locator)

    def get(self, reference: str) -> Optional[str]:
        """
        Look up a "Book Chapter:Verse" reference.

        On a successful parse the book, chapter and verse become the
        current selection. A malformed reference leaves the selection
        untouched.

        Returns:
            Verse text, or None if the reference is malformed or not found
        """
        try:
            parsed = parse_reference(reference)
        except ReferenceParseError as e:
            logger.debug(f"Unparseable reference: {e}")
            return None

        return self.book(parsed.book).chapter(parsed.chapter).verse(parsed.verse).get_verse()

    def chapter_count(self) -> int:
        """Number of chapters in the selected book (0 if it doesn't resolve)."""
        book = self.get_book()
        return book.chapter_count if book else 0

    def verse_count(self) -> int:
        """Number of verses in the selected chapter (0 if it doesn't resolve)."""
        chapter = self.get_chapter()
        return chapter.verse_count if chapter else 0

    def __repr__(self) -> str:
        return f"<Bible {self.lang}/{self.version} {self.locator}>"
