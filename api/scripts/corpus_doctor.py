#!/usr/bin/env python3
"""
Bible Corpus Doctor
- Checks every language has a readable Books.json of unique names.
- Checks every version has a well-formed document for each indexed book.
- Exits nonzero if problems found.

Usage:
    cd api && python -m scripts.corpus_doctor
    cd api && python -m scripts.corpus_doctor --root /srv/bibles --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import get_settings
from services.bible.storage import CorpusMissingError, CorpusStore


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def check_corpus(store: CorpusStore) -> tuple[list[str], list[str]]:
    """
    Inspect a corpus tree.

    Returns:
        (failures, warnings)
    """
    failures: list[str] = []
    warns: list[str] = []

    languages = store.list_languages()
    if not languages:
        failures.append(f"No languages found under {store.base_path}")
        return failures, warns

    for lang in languages:
        try:
            books = store.load_index(lang)
        except CorpusMissingError as e:
            failures.append(f"[{lang}] {e}")
            continue

        versions = store.list_versions(lang)
        if not versions:
            warns.append(f"[{lang}] has no versions installed")

        for version in versions:
            for name in books:
                if not store.book_path(lang, version, name).is_file():
                    failures.append(f"[{lang}/{version}] missing document for {name}")
                    continue

                book = store.load_book(lang, version, name)
                if book is None:
                    failures.append(f"[{lang}/{version}] malformed document for {name}")
                    continue

                if not book.chapters:
                    warns.append(f"[{lang}/{version}] {name} has no chapters")

                for chapter in book.chapters:
                    missing_text = [v.number for v in chapter.verses if v.text is None]
                    if missing_text:
                        warns.append(
                            f"[{lang}/{version}] {name} {chapter.number} verses without text: {missing_text}"
                        )

            indexed = set(books)
            extra = sorted(
                p.stem for p in store.version_path(lang, version).glob("*.json")
                if p.stem not in indexed
            )
            if extra:
                warns.append(f"[{lang}/{version}] documents not in Books.json: {', '.join(extra)}")

    return failures, warns


def main() -> int:
    ap = argparse.ArgumentParser(description="Sanity-check a Bible corpus tree.")
    ap.add_argument(
        "--root",
        default=None,
        help="Corpus root (default: $BIBLE_CORPUS_PATH or corpus_root_path from config/bible.yml)",
    )
    ap.add_argument("--json", action="store_true", help="Print a JSON report instead of text")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    root = args.root or get_settings().corpus_root_path
    if not os.path.isdir(root):
        eprint(f"[FAIL] Corpus root not found: {root}")
        return 2

    store = CorpusStore(root)
    failures, warns = check_corpus(store)

    if args.json:
        print(json.dumps({
            "root": str(root),
            "ok": not failures,
            "failures": failures,
            "warnings": warns,
        }, indent=2))
        return 1 if failures else 0

    for w in warns:
        eprint(f"[WARN] {w}")

    if failures:
        for f in failures:
            eprint(f"[FAIL] {f}")
        eprint(f"\nCorpus Doctor: FAIL ({len(failures)} issues, {len(warns)} warnings)")
        return 1

    print(f"Corpus Doctor: OK ({len(warns)} warnings)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
