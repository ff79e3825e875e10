# api/services/bible/bible_service.py
"""
Verse selection service for book/chapter/verse pickers.

Builds the option lists a selection form needs and fetches a set of
selected verses from one chapter as a single combined passage.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .bible import Bible
from .reference_parser import format_reference

logger = logging.getLogger(__name__)


@dataclass
class VerseSelection:
    """
    Result of fetching several verses from one chapter.

    Attributes:
        book: Book name as selected
        chapter: 1-based chapter number
        verses: Requested verse numbers, sorted
        text: Found verses as "N. text", separated by blank lines
        reference: Display reference, e.g. "John 1:3-5 (KJV)"
        missing: Requested verse numbers that did not resolve
        version: Version the verses were read from
    """
    book: str
    chapter: int
    verses: list[int]
    text: str
    reference: str
    missing: list[int] = field(default_factory=list)
    version: Optional[str] = None

    @property
    def found(self) -> bool:
        """False when none of the requested verses resolved."""
        return bool(self.text)

    def to_dict(self) -> dict:
        return {
            "book": self.book,
            "chapter": self.chapter,
            "verses": self.verses,
            "text": self.text,
            "reference": self.reference,
            "missing": self.missing,
            "version": self.version,
            "found": self.found,
        }


def _number_options(count: int) -> list[str]:
    return [str(i) for i in range(1, count + 1)]


class BibleService:
    """
    Selection-form helpers on top of a Bible cursor.

    Usage:
        service = BibleService(Bible("en", "kjv"))

        service.book_options()              # ["Genesis", "Exodus", ...]
        service.chapter_options("John")     # ["1", ..., "21"]
        service.verse_options("John", 3)    # ["1", ..., "36"]

        selection = service.fetch_selection("John", 1, [3, 4, 5])
        print(selection.reference)          # "John 1:3-5 (KJV)"
    """

    def __init__(self, bible: Bible = None):
        self.bible = bible or Bible()

    def book_options(self) -> list[str]:
        return self.bible.get_books()

    def chapter_options(self, book: str) -> list[str]:
        """Chapter numbers of a book; empty if the book is not found."""
        count = self.bible.clear().book(book).chapter_count()
        return _number_options(count)

    def verse_options(self, book: str, chapter: int) -> list[str]:
        """Verse numbers of a chapter; empty if it is not found."""
        count = self.bible.clear().book(book).chapter(chapter).verse_count()
        return _number_options(count)

    def fetch_selection(
        self,
        book: str,
        chapter: int,
        verses: Iterable[Union[int, str]],
    ) -> VerseSelection:
        """
        Fetch several verses of one chapter.

        Verses that do not resolve are skipped and reported in `missing`.
        If none resolve the result has `found == False`.
        """
        ordered = sorted({int(v) for v in verses})
        found_text = []
        missing = []

        # Fluent selection rather than get() so multi-word book names work.
        # The chapter is read once; verses are picked from it.
        resolved = self.bible.clear().book(book).chapter(chapter).get_chapter()
        verses_by_number = {v.number: v for v in resolved.verses} if resolved else {}

        for verse_num in ordered:
            verse = verses_by_number.get(verse_num)
            text = verse.text if verse else None
            if text:
                found_text.append(f"{verse_num}. {text}")
            else:
                missing.append(verse_num)

        if not found_text:
            logger.info(f"No verses found for {book} {chapter}:{ordered}")

        return VerseSelection(
            book=book,
            chapter=int(chapter),
            verses=ordered,
            text="\n\n".join(found_text),
            reference=format_reference(book, chapter, ordered, self.bible.version),
            missing=missing,
            version=self.bible.version,
        )
