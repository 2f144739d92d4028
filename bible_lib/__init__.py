# bible_lib/__init__.py
"""Bible text lookup: load a translation, then query books, chapters and verses."""

from bible_lib.services.bible import (
    Bible,
    BibleLookup,
    Translation,
    CustomTranslation,
    parse_text,
    load_text,
    detect_references,
    capitalize_book,
    replace_superscript,
    BibleLibError,
    InvalidCustomTranslationFile,
    BibleIOError,
    TranslationUnavailable,
    BookNotFound,
    ChapterNotFound,
    VerseNotFound,
    InvalidVerseFormat,
    CorpusParseError,
)

__version__ = "0.1.0"

__all__ = [
    "Bible",
    "BibleLookup",
    "Translation",
    "CustomTranslation",
    "parse_text",
    "load_text",
    "detect_references",
    "capitalize_book",
    "replace_superscript",
    "BibleLibError",
    "InvalidCustomTranslationFile",
    "BibleIOError",
    "TranslationUnavailable",
    "BookNotFound",
    "ChapterNotFound",
    "VerseNotFound",
    "InvalidVerseFormat",
    "CorpusParseError",
]
