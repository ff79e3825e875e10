"""
Book Index Cache

Holds the parsed Books.json index for one language so repeated book-list
queries do not re-read the document. Owned by a single Bible selection
context; never shared between instances.
"""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class BookIndexCache:
    """Caches the book index of the current language."""

    def __init__(self, store):
        self.store = store
        self._language: Optional[str] = None
        self._books: Optional[List[str]] = None
        self.loads = 0

    @property
    def cached_language(self) -> Optional[str]:
        """Language whose index is currently held, if any."""
        return self._language if self._books is not None else None

    def get(self, language: str) -> List[str]:
        """Get the book index for a language, loading it on a miss."""
        if self._books is None or self._language != language:
            books = self.store.load_index(language)
            self._language = language
            self._books = books
            self.loads += 1
            logger.debug(f"Book index cached for [{language}] (load #{self.loads})")

        return list(self._books)

    def invalidate(self):
        """Drop the cached index; the next get() reloads it."""
        self._language = None
        self._books = None
