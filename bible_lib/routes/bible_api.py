# bible_lib/routes/bible_api.py
"""
API endpoints for Bible verse lookup.

Provides access to:
- Enabled translations
- Book, chapter and verse listings
- Verse, range and chapter text
- Random verses
- Reference detection in text

Every endpoint accepts an optional `translation` query parameter holding a
built-in translation code (e.g., "kjv"). The default translation is used
when it is absent.
"""

import logging
import threading

from flask import Blueprint, jsonify, request

from bible_lib.services.bible import (
    Bible,
    BibleLibError,
    BibleLookup,
    BookNotFound,
    ChapterNotFound,
    VerseNotFound,
    Translation,
    capitalize_book,
    detect_references,
)
from bible_lib.utils.errors import (
    bible_error,
    invalid_field,
    missing_field,
)

logger = logging.getLogger(__name__)

bible_bp = Blueprint("bible_api", __name__, url_prefix="/api/bible")

# Lazily built Bible instances, keyed by Translation
_bibles = {}
_bibles_lock = threading.Lock()

TRUE_VALUES = ("1", "true", "yes")


class UnknownTranslation(ValueError):
    pass


def get_bible(code: str = None) -> Bible:
    """Get or create the Bible for a translation code (default if None)."""
    if code:
        try:
            translation = Translation.from_code(code)
        except BibleLibError:
            raise UnknownTranslation(code)
    else:
        translation = Translation.default()

    with _bibles_lock:
        if translation not in _bibles:
            _bibles[translation] = Bible(translation)
        return _bibles[translation]


def reset_bibles():
    """Drop cached Bible instances."""
    with _bibles_lock:
        _bibles.clear()


def _use_superscripts() -> bool:
    return request.args.get("superscripts", "").lower() in TRUE_VALUES


def _translation_arg():
    return request.args.get("translation")


def _translation_payload(bible: Bible) -> dict:
    translation = bible.translation
    return {
        "code": getattr(translation, "code", None),
        "name": str(translation),
    }


@bible_bp.errorhandler(BibleLibError)
def handle_bible_error(e):
    return bible_error(e)


@bible_bp.errorhandler(UnknownTranslation)
def handle_unknown_translation(e):
    return invalid_field("translation", f"Unknown translation: {e}")


# =============================================================================
# Listing Endpoints
# =============================================================================

@bible_bp.get("/translations")
def list_translations():
    """
    List enabled built-in translations.

    Returns:
        {
            "translations": [{"code": "kjv", "name": "King James Version"}],
            "default": "kjv"
        }
    """
    enabled = Translation.enabled()
    default = Translation.default().code if enabled else None
    return jsonify({
        "translations": [{"code": t.code, "name": t.display_name} for t in enabled],
        "default": default,
    })


@bible_bp.get("/books")
def list_books():
    """List books, sorted by name."""
    bible = get_bible(_translation_arg())
    books = sorted(bible.get_books())
    return jsonify({
        "translation": _translation_payload(bible),
        "books": [{"book": b, "name": capitalize_book(b)} for b in books],
    })


@bible_bp.get("/books/<book>/chapters")
def list_chapters(book):
    """List the chapters of a book."""
    bible = get_bible(_translation_arg())
    return jsonify({
        "book": book.lower(),
        "name": capitalize_book(book.lower()),
        "chapters": sorted(bible.get_chapters(book)),
    })


@bible_bp.get("/books/<book>/chapters/<int:chapter>/verses")
def list_verses(book, chapter):
    """List the verse numbers of a chapter."""
    bible = get_bible(_translation_arg())
    return jsonify({
        "book": book.lower(),
        "chapter": chapter,
        "verses": sorted(bible.get_verses(book, chapter)),
        "max_verse": bible.get_max_verse(book, chapter),
    })


# =============================================================================
# Text Endpoints
# =============================================================================

@bible_bp.get("/books/<book>/chapters/<int:chapter>")
def get_chapter(book, chapter):
    """
    Get the text of a whole chapter.

    Query params:
        superscripts: Prefix verses with superscript numbers (optional)
    """
    bible = get_bible(_translation_arg())
    text = bible.get_chapter(book, chapter, use_superscripts=_use_superscripts())
    return jsonify({
        "book": book.lower(),
        "chapter": chapter,
        "text": text.strip(),
        "translation": _translation_payload(bible),
    })


@bible_bp.get("/verse")
def get_verse():
    """
    Look up a verse or verse range.

    Query params:
        ref: Reference string (required) e.g., "John 3:16-17"
        superscripts: Prefix verses with superscript numbers (optional)

    Returns:
        {
            "ref": "John 3:16-17",
            "book": "john",
            "chapter": 3,
            "verse": 16,
            "thru_verse": 17,
            "text": "For God so loved...",
            "translation": {...}
        }
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref")

    lookup = BibleLookup.parse(ref)
    bible = get_bible(_translation_arg())
    payload = lookup.to_dict()
    payload["text"] = bible.get_verse(lookup, use_superscripts=_use_superscripts())
    payload["translation"] = _translation_payload(bible)
    return jsonify(payload)


@bible_bp.get("/random")
def random_verse():
    """Get a random verse and its text."""
    bible = get_bible(_translation_arg())
    lookup = bible.random_verse()
    payload = lookup.to_dict()
    payload["text"] = bible.get_verse(lookup)
    payload["translation"] = _translation_payload(bible)
    return jsonify(payload)


# =============================================================================
# Detection Endpoint
# =============================================================================

@bible_bp.post("/detect")
def detect():
    """
    Detect verse references in text.

    Body:
        {"text": "Read John 3:16 and Romans 8:28"}

    Returns:
        {
            "references": [
                {"ref": "John 3:16", ..., "text": "For God so loved..."}
            ]
        }

    References not present in the translation are returned with text null.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    text = data.get("text")
    if text is None or text == "":
        return missing_field("text")
    if not isinstance(text, str):
        return invalid_field("text", "text must be a string")

    bible = get_bible(_translation_arg())
    references = []
    for lookup in detect_references(text):
        item = lookup.to_dict()
        try:
            item["text"] = bible.get_verse(lookup)
        except (BookNotFound, ChapterNotFound, VerseNotFound) as e:
            logger.debug(f"Detected reference {lookup} not in translation: {e}")
            item["text"] = None
        references.append(item)

    return jsonify({
        "translation": _translation_payload(bible),
        "references": references,
    })
