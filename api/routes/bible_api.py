# routes/bible_api.py
"""
API endpoints for Bible verse lookup and selection forms.

Provides access to:
- Installed languages and versions
- Book lists, chapter counts and verse counts for pickers
- Single reference lookup
- Multi-verse selection from one chapter

Every request gets its own Bible cursor; nothing is shared between
requests.
"""

from flask import Blueprint, current_app, request, jsonify

from services.bible import (
    Bible,
    BibleService,
    ConfigurationError,
    CorpusStore,
)
from core.config import get_settings
from utils.errors import (
    configuration_error,
    invalid_field,
    missing_field,
    not_found,
    error_response,
)

bible_bp = Blueprint("bible_api", __name__, url_prefix="/api/bible")

# Longest chapter (Psalm 119) has 176 verses
MAX_SELECTION_VERSES = 200


def _corpus_path():
    return current_app.config.get("BIBLE_CORPUS_PATH") or get_settings().corpus_root_path


def get_bible(data: dict = None) -> Bible:
    """Create a Bible for the lang/version given in the request."""
    data = data if data is not None else request.args
    return Bible(
        language=data.get("lang"),
        version=data.get("version"),
        corpus_path=_corpus_path(),
    )


@bible_bp.errorhandler(ConfigurationError)
def handle_configuration_error(e: ConfigurationError):
    return configuration_error(e)


# =============================================================================
# Corpus Endpoints
# =============================================================================

@bible_bp.get("/languages")
def list_languages():
    """
    List installed languages.

    Returns:
        {"languages": ["en", "fr"]}
    """
    store = CorpusStore(_corpus_path())
    return jsonify({"languages": store.list_languages()})


@bible_bp.get("/languages/<lang>/versions")
def list_versions(lang: str):
    """
    List installed versions for a language.

    Returns:
        {"lang": "en", "versions": ["asv", "kjv"]}
    """
    store = CorpusStore(_corpus_path())
    if not store.exists(lang):
        return error_response("language_not_found", 404, f"The language [{lang}] doesn't exist")
    return jsonify({"lang": lang, "versions": store.list_versions(lang)})


# =============================================================================
# Selection Endpoints
# =============================================================================

@bible_bp.get("/books")
def list_books():
    """
    List books for a language in canonical order.

    Query params:
        lang: Language code (optional, default from config)
        version: Version (optional, default from config)
    """
    bible = get_bible()
    return jsonify({
        "lang": bible.lang,
        "version": bible.version,
        "books": BibleService(bible).book_options(),
    })


@bible_bp.get("/books/<book>/chapters")
def list_chapters(book: str):
    """
    Chapter options for a book.

    Returns:
        {"book": "John", "chapter_count": 21, "chapters": ["1", ..., "21"]}
    """
    chapters = BibleService(get_bible()).chapter_options(book)
    if not chapters:
        return not_found("book", book=book)

    return jsonify({
        "book": book,
        "chapter_count": len(chapters),
        "chapters": chapters,
    })


@bible_bp.get("/books/<book>/chapters/<int:chapter>/verses")
def list_verses(book: str, chapter: int):
    """
    Verse options for a chapter.

    Returns:
        {"book": "John", "chapter": 3, "verse_count": 36, "verses": ["1", ...]}
    """
    verses = BibleService(get_bible()).verse_options(book, chapter)
    if not verses:
        return not_found("chapter", book=book, chapter=chapter)

    return jsonify({
        "book": book,
        "chapter": chapter,
        "verse_count": len(verses),
        "verses": verses,
    })


# =============================================================================
# Lookup Endpoints
# =============================================================================

@bible_bp.get("/lookup")
def lookup_reference():
    """
    Look up a single verse.

    Query params:
        ref: Reference string (required) e.g., "John 3:16"
        lang, version: optional overrides

    Returns:
        {"ref": "John 3:16", "lang": "en", "version": "kjv", "text": "For God so loved..."}
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref")

    bible = get_bible()
    text = bible.get(ref)
    if text is None:
        return not_found("verse", ref=ref)

    return jsonify({
        "ref": ref,
        "lang": bible.lang,
        "version": bible.version,
        "text": text,
    })


@bible_bp.post("/selection")
def fetch_selection():
    """
    Fetch several verses of one chapter.

    Body:
        {
            "book": "John",
            "chapter": 1,
            "verses": [3, 4, 5],
            "lang": "en",        (optional)
            "version": "kjv"     (optional)
        }

    Returns:
        VerseSelection dict; 404 verses_not_found if none resolved
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return invalid_field("body", "request body must be a JSON object")

    for field in ("book", "chapter", "verses"):
        if not data.get(field):
            return missing_field(field)

    for field in ("book", "lang", "version"):
        if field in data and data[field] is not None and not isinstance(data[field], str):
            return invalid_field(field, f"{field} must be a string")

    verses = data["verses"]
    if not isinstance(verses, list):
        return invalid_field("verses", "verses must be a list of verse numbers")
    if len(verses) > MAX_SELECTION_VERSES:
        return invalid_field("verses", f"at most {MAX_SELECTION_VERSES} verses per selection")

    try:
        chapter = int(data["chapter"])
    except (TypeError, ValueError):
        return invalid_field("chapter", "chapter must be a number")

    try:
        verse_numbers = [int(v) for v in verses]
    except (TypeError, ValueError):
        return invalid_field("verses", "verses must be numbers")

    selection = BibleService(get_bible(data)).fetch_selection(
        data["book"], chapter, verse_numbers
    )
    if not selection.found:
        return error_response(
            "verses_not_found", 404, "Verses not found", reference=selection.reference
        )

    return jsonify(selection.to_dict())
