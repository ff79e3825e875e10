# api/services/bible/models.py
"""
Value types for corpus content and verse coordinates.

Chapter and verse numbers are 1-based everywhere outside this module's
``*_index`` helpers, which convert to 0-based list positions.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Verse:
    """
    A single verse record.

    Attributes:
        number: 1-based verse number within its chapter
        text: Verse text (None if the record carries no text)
        metadata: Any other keys present in the underlying record
    """
    number: int
    text: Optional[str] = None
    metadata: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, number: int, data: dict) -> "Verse":
        text = data.get("text")
        return cls(
            number=number,
            text=text if isinstance(text, str) else None,
            metadata={k: v for k, v in data.items() if k != "text"},
        )


@dataclass
class Chapter:
    """A chapter: an ordered list of verses."""
    number: int
    verses: list[Verse] = field(default_factory=list)

    @property
    def verse_count(self) -> int:
        return len(self.verses)

    @classmethod
    def from_dict(cls, number: int, data: dict) -> "Chapter":
        verses = data.get("verses") or []
        return cls(
            number=number,
            verses=[
                Verse.from_dict(i + 1, v if isinstance(v, dict) else {})
                for i, v in enumerate(verses)
            ],
        )


@dataclass
class Book:
    """A book document: an ordered list of chapters."""
    name: str
    chapters: list[Chapter] = field(default_factory=list)

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "Book":
        """
        Build a Book from a parsed ``{"chapters": [{"verses": [...]}, ...]}``
        document.

        Raises:
            ValueError: If the document does not have that shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("chapters"), list):
            raise ValueError(f"Book document for {name} has no chapters list")

        chapters = []
        for i, chapter in enumerate(data["chapters"]):
            if not isinstance(chapter, dict) or not isinstance(chapter.get("verses", []), list):
                raise ValueError(f"Chapter {i + 1} of {name} is malformed")
            chapters.append(Chapter.from_dict(i + 1, chapter))

        return cls(name=name, chapters=chapters)


@dataclass(frozen=True)
class Locator:
    """
    Coordinates of a book, chapter or verse.

    Attributes:
        book: Book name as used for the document filename
        chapter: 1-based chapter number (None if not selected)
        verse: 1-based verse number (None if not selected)
    """
    book: Optional[str] = None
    chapter: Optional[int] = None
    verse: Optional[int] = None

    @property
    def chapter_index(self) -> Optional[int]:
        """0-based chapter position; chapter 0 maps to -1."""
        return None if self.chapter is None else self.chapter - 1

    @property
    def verse_index(self) -> Optional[int]:
        """0-based verse position; verse 0 maps to -1."""
        return None if self.verse is None else self.verse - 1

    def __str__(self) -> str:
        parts = self.book or ""
        if self.chapter is not None:
            parts += f" {self.chapter}"
            if self.verse is not None:
                parts += f":{self.verse}"
        return parts
