# bible_lib/services/bible/__init__.py
"""
Bible translation loading and verse lookup.

This package provides:
- Bible: Parsed translation answering verse, chapter and book lookups
- BibleLookup: Lookup key for one verse or an inclusive verse range
- Translation / CustomTranslation: Built-in and file-based translations
- parse_text: Raw translation text to verse index
- detect_references: Find verse references in free text
- capitalize_book / replace_superscript: Display helpers
"""

from .errors import (
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
from .lookup import (
    BibleLookup,
    capitalize_book,
    replace_superscript,
)
from .translations import (
    Translation,
    CustomTranslation,
    load_text,
)
from .bible import (
    Bible,
    parse_text,
)
from .detection import detect_references

__all__ = [
    # Index and queries
    "Bible",
    "parse_text",
    "BibleLookup",
    # Translations
    "Translation",
    "CustomTranslation",
    "load_text",
    # Detection
    "detect_references",
    # Display
    "capitalize_book",
    "replace_superscript",
    # Errors
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
