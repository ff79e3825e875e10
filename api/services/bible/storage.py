# api/services/bible/storage.py
"""
Read-only access to the on-disk Bible corpus.

Directory structure:
    {corpus_root}/
    ├── en/
    │   ├── Books.json          ordered array of book names
    │   ├── kjv/
    │   │   ├── Genesis.json    {"chapters": [{"verses": [{"text": ...}]}]}
    │   │   └── ...
    │   └── asv/
    └── fr/

Missing languages, versions and index documents are configuration errors
and raise. A missing book document is an ordinary lookup miss and returns
None.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .models import Book

logger = logging.getLogger(__name__)

INDEX_FILENAME = "Books.json"


class ConfigurationError(Exception):
    """Base exception for a misconfigured corpus or selection."""
    pass


class LanguageNotFoundError(ConfigurationError):
    """Raised when a language has no corpus subtree."""
    pass


class VersionNotFoundError(ConfigurationError):
    """Raised when a version has no subtree under the selected language."""
    pass


class CorpusMissingError(ConfigurationError):
    """Raised when a language's book index is absent or malformed."""
    pass


class CorpusStore:
    """
    File-backed corpus reader.

    Usage:
        store = CorpusStore("/srv/bibles")
        if store.version_exists("en", "kjv"):
            books = store.load_index("en")
            john = store.load_book("en", "kjv", "John")
    """

    def __init__(self, base_path):
        self.base_path = Path(base_path)
        self._index_reads = 0
        self._book_reads = 0

    def language_path(self, language: str) -> Path:
        return self.base_path / language

    def index_path(self, language: str) -> Path:
        return self.language_path(language) / INDEX_FILENAME

    def version_path(self, language: str, version: str) -> Path:
        return self.language_path(language) / version

    def book_path(self, language: str, version: str, book_name: str) -> Path:
        return self.version_path(language, version) / f"{book_name}.json"

    @staticmethod
    def _is_safe_name(name: str) -> bool:
        return bool(name) and "/" not in name and "\\" not in name and name not in (".", "..")

    def exists(self, language: str) -> bool:
        """Check if a language subtree exists."""
        return self._is_safe_name(language) and self.language_path(language).is_dir()

    def index_exists(self, language: str) -> bool:
        """Check if a language has a Books.json index."""
        return self.exists(language) and self.index_path(language).is_file()

    def version_exists(self, language: str, version: str) -> bool:
        """Check if a version subtree exists under a language."""
        return (
            self.exists(language)
            and self._is_safe_name(version)
            and self.version_path(language, version).is_dir()
        )

    def list_languages(self) -> list[str]:
        """Return language codes that have a corpus subtree."""
        if not self.base_path.is_dir():
            return []
        return sorted(p.name for p in self.base_path.iterdir() if p.is_dir())

    def list_versions(self, language: str) -> list[str]:
        """Return versions installed under a language."""
        if not self.exists(language):
            return []
        return sorted(p.name for p in self.language_path(language).iterdir() if p.is_dir())

    def load_index(self, language: str) -> list[str]:
        """
        Load the ordered book list for a language.

        Returns:
            Book names in canonical order

        Raises:
            CorpusMissingError: If the language or its index is missing,
                unreadable, or not a list of unique strings
        """
        if not self.exists(language):
            raise CorpusMissingError(f"The language [{language}] doesn't exist")

        path = self.index_path(language)
        try:
            with open(path, "r", encoding="utf-8") as f:
                books = json.load(f)
        except FileNotFoundError:
            raise CorpusMissingError(f"Index of available books not found for [{language}]")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read book index {path}: {e}")
            raise CorpusMissingError(f"Index of available books for [{language}] is unreadable")
        finally:
            self._index_reads += 1

        if not isinstance(books, list) or not all(isinstance(b, str) for b in books):
            raise CorpusMissingError(f"Index of available books for [{language}] is not a list of names")

        if len(set(books)) != len(books):
            raise CorpusMissingError(f"Index of available books for [{language}] has duplicate names")

        logger.debug(f"Loaded {len(books)} books for [{language}]")
        return books

    def load_book(self, language: str, version: str, book_name: str) -> Optional[Book]:
        """
        Load a book document.

        Returns:
            Book, or None if the document is missing or malformed
        """
        if not self._is_safe_name(book_name):
            logger.debug(f"Rejected book name {book_name!r}")
            return None

        path = self.book_path(language, version, book_name)
        if not path.is_file():
            logger.debug(f"Book not found: {path}")
            return None

        self._book_reads += 1
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Book.from_dict(book_name, data)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load book {path}: {e}")
            return None

    def stats(self) -> dict:
        """Return document read counters."""
        return {
            "index_reads": self._index_reads,
            "book_reads": self._book_reads,
        }
