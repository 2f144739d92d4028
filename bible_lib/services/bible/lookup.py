# bible_lib/services/bible/lookup.py
"""
Verse lookup keys and display helpers.

A BibleLookup names a book, chapter and either one verse or an inclusive
verse range. Book names are stored lowercase, matching the index keys.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidVerseFormat


SUPERSCRIPT_DIGITS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")

# "Song of Solomon 2:4", "1 John 3:16-18", "john 3:16"
REFERENCE_PATTERN = re.compile(
    r"^(?P<book>.+?)\s+(?P<chapter>[0-9]+)\s*:\s*(?P<verse>[0-9]+)"
    r"(?:\s*[-–—]\s*(?P<thru>[0-9]+))?$"
)


def replace_superscript(value: Union[str, int]) -> str:
    """Render ASCII digits as Unicode superscripts ("16" -> "¹⁶")."""
    return str(value).translate(SUPERSCRIPT_DIGITS)


def capitalize_book(name: str) -> str:
    """
    Capitalize a lowercase book name for display.

    Every word is capitalized unless it starts with a number, so
    "1 samuel" -> "1 Samuel" and "song of solomon" -> "Song Of Solomon".
    """
    words = []
    for word in name.split():
        if word[0].isnumeric():
            words.append(word)
        else:
            words.append(word[0].upper() + word[1:])
    return " ".join(words)


def normalize_book(name: str) -> str:
    """Lowercase a book name and collapse whitespace to single spaces."""
    return " ".join(name.lower().split())


@dataclass(frozen=True)
class BibleLookup:
    """
    A verse lookup.

    Attributes:
        book: Book name, lowercased on construction (e.g., "1 samuel")
        chapter: Chapter number
        verse: Verse number, or the first verse of a range
        thru_verse: Last verse of an inclusive range (None for a single verse)
    """
    book: str
    chapter: int
    verse: int
    thru_verse: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "book", normalize_book(self.book))

    @classmethod
    def single(cls, book: str, chapter: int, verse: int) -> "BibleLookup":
        return cls(book, chapter, verse)

    @classmethod
    def range(cls, book: str, chapter: int, verse: int, thru_verse: int) -> "BibleLookup":
        return cls(book, chapter, verse, thru_verse)

    @classmethod
    def parse(cls, ref: str) -> "BibleLookup":
        """
        Parse a reference string such as "John 3:16" or "1 Samuel 3:1-10".

        Raises:
            InvalidVerseFormat: if the string is not a verse reference or the
                range ends before it starts
        """
        match = REFERENCE_PATTERN.match(" ".join((ref or "").split()))
        if not match:
            raise InvalidVerseFormat(f"cannot parse reference {ref!r}")

        chapter = int(match.group("chapter"))
        verse = int(match.group("verse"))
        thru = match.group("thru")
        if chapter < 1 or verse < 1:
            raise InvalidVerseFormat(f"chapter and verse must be positive in {ref!r}")
        if thru is None:
            return cls(match.group("book"), chapter, verse)

        thru_verse = int(thru)
        if thru_verse < verse:
            raise InvalidVerseFormat(f"range ends before it starts in {ref!r}")
        return cls(match.group("book"), chapter, verse, thru_verse)

    @staticmethod
    def detect_from_string(text: str) -> list:
        """Find every verse reference in free text. See detection.detect_references."""
        from .detection import detect_references
        return detect_references(text)

    @property
    def is_range(self) -> bool:
        return self.thru_verse is not None

    @property
    def display_book(self) -> str:
        return capitalize_book(self.book)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "ref": str(self),
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "thru_verse": self.thru_verse,
        }

    def __str__(self) -> str:
        if self.thru_verse is not None:
            return f"{self.display_book} {self.chapter}:{self.verse}-{self.thru_verse}"
        return f"{self.display_book} {self.chapter}:{self.verse}"
