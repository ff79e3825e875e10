"""
Cache Services

In-memory caches for corpus structure.
"""

from .book_index_cache import BookIndexCache

__all__ = ["BookIndexCache"]
