# api/services/bible/reference_parser.py
"""
Scripture reference parser.

Grammar:
    reference := bookName " " chapter ":" verse

The book name ends at the first space, so multi-word names such as
"1 Samuel" or "Song of Solomon" are not addressable through a reference
string. Use the fluent Bible.book() setter for those.

Chapter and verse must be plain digit strings. "John three:16" is rejected
rather than coerced to chapter 0.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .models import Locator

_NUMBER_RE = re.compile(r"^[0-9]+$")


class ReferenceParseError(Exception):
    """Raised when a reference cannot be parsed."""
    pass


@dataclass(frozen=True)
class ParsedReference:
    """
    A parsed scripture reference.

    Attributes:
        book: Normalized book name (first letter capitalized)
        chapter: 1-based chapter number
        verse: 1-based verse number
        original: Original input string
    """
    book: str
    chapter: int
    verse: int
    original: str = ""

    @property
    def normalized(self) -> str:
        """Return normalized reference string."""
        return f"{self.book} {self.chapter}:{self.verse}"

    def to_locator(self) -> Locator:
        return Locator(book=self.book, chapter=self.chapter, verse=self.verse)


def normalize_book_name(name: str) -> str:
    """
    Capitalize the first letter of a book name, leaving the rest as given.

    "john" -> "John", "jOHN" -> "JOHN", "1 samuel" -> "1 samuel"
    """
    if not name:
        return name
    return name[0].upper() + name[1:]


def _parse_number(value: str, label: str, reference: str) -> int:
    value = value.strip()
    if not _NUMBER_RE.match(value):
        raise ReferenceParseError(f"Invalid {label} {value!r} in reference {reference!r}")
    return int(value)


def parse_reference(reference: str) -> ParsedReference:
    """
    Parse a "Book Chapter:Verse" reference string.

    Args:
        reference: e.g. "John 3:16"

    Returns:
        ParsedReference

    Raises:
        ReferenceParseError: If the string does not match the grammar
    """
    if not isinstance(reference, str) or not reference:
        raise ReferenceParseError("Empty reference")

    parts = reference.split(" ", 1)
    if len(parts) != 2 or not parts[0]:
        raise ReferenceParseError(f"Reference {reference!r} has no chapter:verse part")

    book, rest = parts
    chapter_verse = rest.split(":")
    if len(chapter_verse) != 2:
        raise ReferenceParseError(f"Reference {reference!r} is not in Chapter:Verse form")

    return ParsedReference(
        book=normalize_book_name(book),
        chapter=_parse_number(chapter_verse[0], "chapter", reference),
        verse=_parse_number(chapter_verse[1], "verse", reference),
        original=reference,
    )


def is_valid_reference(reference: str) -> bool:
    """Check if a string parses as a reference."""
    try:
        parse_reference(reference)
    except ReferenceParseError:
        return False
    return True


def _sorted_verses(verses: Iterable[Union[int, str]]) -> list[int]:
    return sorted({int(v) for v in verses})


def is_consecutive_range(verses: list[int]) -> bool:
    """Check if sorted verse numbers have no gaps."""
    return all(b == a + 1 for a, b in zip(verses, verses[1:]))


def format_verse_range(verses: Iterable[Union[int, str]]) -> str:
    """
    Format selected verse numbers of one chapter.

    {5} -> "5", {3, 4, 5} -> "3-5", {3, 5, 7} -> "3, 5, 7"
    """
    ordered = _sorted_verses(verses)
    if not ordered:
        return ""
    if len(ordered) == 1:
        return str(ordered[0])
    if is_consecutive_range(ordered):
        return f"{ordered[0]}-{ordered[-1]}"
    return ", ".join(str(v) for v in ordered)


def format_reference(
    book: str,
    chapter: Union[int, str],
    verses: Iterable[Union[int, str]],
    version: Optional[str] = None,
) -> str:
    """
    Build a display reference such as "John 1:3-5 (KJV)".
    """
    ref = f"{book} {chapter}:{format_verse_range(verses)}"
    if version:
        ref += f" ({version.upper()})"
    return ref
