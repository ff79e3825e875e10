# api/tests/test_storage.py
"""
Tests for storage.py (CorpusStore) and the book index cache.
"""

import os
import sys
import tempfile

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from corpus_fixture import JOHN_3_16, build_corpus
from services.bible.models import Book
from services.bible.storage import CorpusMissingError, CorpusStore
from services.cache import BookIndexCache


def test_existence_checks():
    """Test language, index and version existence checks."""
    print("\n=== Testing existence checks ===")

    with tempfile.TemporaryDirectory() as tmpdir:
        store = CorpusStore(build_corpus(tmpdir))

        assert store.exists("en")
        assert not store.exists("zz")
        assert not store.exists("../en")
        print("✓ exists: language subtree")

        assert store.index_exists("en")
        assert not store.index_exists("de")
        print("✓ index_exists: Books.json")

        assert store.version_exists("en", "kjv")
        assert store.version_exists("en", "asv")
        assert not store.version_exists("en", "lsg")
        assert not store.version_exists("zz", "kjv")
        print("✓ version_exists: version subtree under language")

        assert store.list_languages() == ["de", "en", "fr", "xx"]
        assert store.list_versions("en") == ["asv", "kjv"]
        assert store.list_versions("zz") == []
        print("✓ list_languages / list_versions")

    print("Existence checks: All tests passed!")


def test_load_index():
    """Test Books.json loading and failure modes."""
    print("\n=== Testing load_index ===")

    with tempfile.TemporaryDirectory() as tmpdir:
        root = build_corpus(tmpdir)
        store = CorpusStore(root)

        assert store.load_index("en") == ["Genesis", "John", "Jude"]
        print("✓ load_index: ordered book list")

        for lang in ("zz", "de", "xx"):
            try:
                store.load_index(lang)
                assert False, f"Should have raised CorpusMissingError for {lang}"
            except CorpusMissingError:
                pass
        print("✓ load_index: missing language, missing index, invalid JSON")

        (root / "en" / "Books.json").write_text('{"books": []}', encoding="utf-8")
        try:
            store.load_index("en")
            assert False, "Should have raised CorpusMissingError"
        except CorpusMissingError as e:
            assert "not a list" in str(e)

        (root / "en" / "Books.json").write_text('["John", "John"]', encoding="utf-8")
        try:
            store.load_index("en")
            assert False, "Should have raised CorpusMissingError"
        except CorpusMissingError as e:
            assert "duplicate" in str(e)
        print("✓ load_index: rejects non-list and duplicate indexes")

    print("load_index: All tests passed!")


def test_load_book():
    """Test book documents load, and misses return None."""
    print("\n=== Testing load_book ===")

    with tempfile.TemporaryDirectory() as tmpdir:
        root = build_corpus(tmpdir)
        store = CorpusStore(root)

        book = store.load_book("en", "kjv", "John")
        assert isinstance(book, Book)
        assert book.name == "John"
        assert book.chapter_count == 3
        assert [c.verse_count for c in book.chapters] == [7, 3, 16]
        assert book.chapters[2].verses[15].text == JOHN_3_16
        assert book.chapters[2].verses[15].number == 16
        assert book.chapters[2].verses[15].metadata == {"verse": 16}
        assert book.chapters[1].verses[1].text is None
        print("✓ load_book: chapters and verses")

        assert store.load_book("en", "kjv", "Jude") is None
        assert store.load_book("en", "kjv", "john") is None
        assert store.load_book("en", "lsg", "John") is None
        print("✓ load_book: missing document is None (case-sensitive)")

        assert store.load_book("en", "kjv", "../kjv/John") is None
        assert store.load_book("en", "kjv", "") is None
        print("✓ load_book: rejects names with path separators")

        (root / "en" / "kjv" / "Broken.json").write_text("{", encoding="utf-8")
        (root / "en" / "kjv" / "Odd.json").write_text('{"chapters": "none"}', encoding="utf-8")
        assert store.load_book("en", "kjv", "Broken") is None
        assert store.load_book("en", "kjv", "Odd") is None
        print("✓ load_book: malformed documents are None")

    print("load_book: All tests passed!")


def test_book_index_cache():
    """Test the index is read once per language and reloaded on switch."""
    print("\n=== Testing BookIndexCache ===")

    with tempfile.TemporaryDirectory() as tmpdir:
        store = CorpusStore(build_corpus(tmpdir))
        cache = BookIndexCache(store)

        assert cache.cached_language is None
        assert cache.get("en") == ["Genesis", "John", "Jude"]
        assert cache.get("en") == ["Genesis", "John", "Jude"]
        assert cache.loads == 1
        assert store.stats()["index_reads"] == 1
        assert cache.cached_language == "en"
        print("✓ get: second read is a cache hit")

        books = cache.get("en")
        books.append("Mutated")
        assert cache.get("en") == ["Genesis", "John", "Jude"]
        print("✓ get: returns a copy")

        assert cache.get("fr") == ["Jean"]
        assert cache.loads == 2
        assert cache.cached_language == "fr"
        print("✓ get: different language reloads")

        cache.invalidate()
        assert cache.cached_language is None
        assert cache.get("fr") == ["Jean"]
        assert cache.loads == 3
        print("✓ invalidate: forces reload on next get")

    print("BookIndexCache: All tests passed!")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Corpus Storage Test Suite")
    print("=" * 60)

    test_existence_checks()
    test_load_index()
    test_load_book()
    test_book_index_cache()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
