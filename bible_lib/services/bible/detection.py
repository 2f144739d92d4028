# bible_lib/services/bible/detection.py
"""
Detect verse references in free text.

Finds "<Book> <chapter>:<verse>" and "<Book> <chapter>:<verse>-<verse>" for
the 66 books of the Protestant canon, case-insensitively, and returns them as
BibleLookup values ready for Bible.get_verse.
"""

import re
from typing import List

from .lookup import BibleLookup

# Numbered books accept an optional space ("1samuel", "1 samuel")
BOOK_PATTERN = (
    r"(?:"
    r"genesis|exodus|leviticus|numbers|deuteronomy|joshua|judges|ruth|"
    r"[12]\s?samuel|[12]\s?kings|[12]\s?chronicles|ezra|nehemiah|esther|job|"
    r"psalms|proverbs|ecclesiastes|song\s+of\s+solomon|isaiah|jeremiah|"
    r"lamentations|ezekiel|daniel|hosea|joel|amos|obadiah|jonah|micah|nahum|"
    r"habakkuk|zephaniah|haggai|zechariah|malachi|"
    r"matthew|mark|luke|john|acts|romans|[12]\s?corinthians|galatians|"
    r"ephesians|philippians|colossians|[12]\s?thessalonians|[12]\s?timothy|"
    r"titus|philemon|hebrews|james|[12]\s?peter|[123]\s?john|jude|revelation"
    r")"
)

VERSE_PATTERN = re.compile(
    rf"\b(?P<book>{BOOK_PATTERN})\s+(?P<chapter>[0-9]+):(?P<verse>[0-9]+)"
    rf"(?:-(?P<thru>[0-9]+))?\b",
    re.IGNORECASE,
)

_NUMBERED_BOOK_RE = re.compile(r"^([123])\s*")


def normalize_detected_book(name: str) -> str:
    """Normalize a matched book name to index form ("1Samuel" -> "1 samuel")."""
    name = " ".join(name.lower().split())
    return _NUMBERED_BOOK_RE.sub(r"\1 ", name)


def detect_references(text: str) -> List[BibleLookup]:
    """
    Find all verse references in a text block.

    Args:
        text: Text to search for references

    Returns:
        BibleLookup values in order of appearance (duplicates kept)
    """
    lookups = []
    for match in VERSE_PATTERN.finditer(text or ""):
        book = normalize_detected_book(match.group("book"))
        chapter = int(match.group("chapter"))
        verse = int(match.group("verse"))
        thru = match.group("thru")
        lookups.append(BibleLookup(
            book=book,
            chapter=chapter,
            verse=verse,
            thru_verse=int(thru) if thru else None,
        ))
    return lookups
