# bible_lib/services/bible/bible.py
"""
Verse index and queries.

parse_text turns a translation's raw text into a read-only three-level
mapping (book -> chapter -> verse -> text); Bible answers lookups against it.

Usage:
    bible = Bible(Translation.KING_JAMES)

    bible.get_verse(BibleLookup.single("John", 3, 16))
    bible.get_verse(BibleLookup.range("John", 3, 16, 17), use_superscripts=True)
    bible.get_chapter("psalms", 23)
"""

import logging
import random
import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .errors import (
    BookNotFound,
    ChapterNotFound,
    CorpusParseError,
    VerseNotFound,
)
from .lookup import BibleLookup, normalize_book, replace_superscript
from .translations import Translation, TranslationSelector

logger = logging.getLogger(__name__)

VerseIndex = Mapping[str, Mapping[int, Mapping[int, str]]]

_NUMBER_RE = re.compile(r"[0-9]+")


def _parse_number(token: str, what: str, line_number: int, line: str) -> int:
    if not _NUMBER_RE.fullmatch(token):
        raise CorpusParseError(line_number, line, f"{what} {token!r} is not a number")
    number = int(token)
    if number < 1:
        raise CorpusParseError(line_number, line, f"{what} must be at least 1")
    return number


def parse_text(text: str) -> VerseIndex:
    """
    Parse raw translation text into a verse index.

    Each non-blank line is `<Book> <Chapter>:<Verse> <Text>`. The line is split
    on its first colon; the last word before it is the chapter and the words
    before that are the book. The first word after the colon is the verse and
    the rest is the text. A later line for the same verse replaces an earlier
    one.

    Raises:
        CorpusParseError: on the first malformed line
    """
    verses: Dict[str, Dict[int, Dict[int, str]]] = {}

    # one verse per "\n"; other line-breaking characters belong to the verse text
    for line_number, line in enumerate(text.lstrip("\ufeff").split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue

        # split on ':' first so multi-word books like `1 samuel` survive
        head, sep, tail = line.partition(":")
        if not sep:
            raise CorpusParseError(line_number, line, "missing ':'")

        book_chapter = head.split()
        if len(book_chapter) < 2:
            raise CorpusParseError(line_number, line, "expected a book name and chapter")
        chapter = _parse_number(book_chapter[-1], "chapter", line_number, line)
        book = " ".join(book_chapter[:-1]).lower()

        verse_text = tail.split()
        if not verse_text:
            raise CorpusParseError(line_number, line, "missing verse number")
        verse = _parse_number(verse_text[0], "verse", line_number, line)

        verses.setdefault(book, {}).setdefault(chapter, {})[verse] = " ".join(verse_text[1:])

    logger.debug(f"Parsed {len(verses)} books")
    return _freeze(verses)


def _freeze(verses: Dict[str, Dict[int, Dict[int, str]]]) -> VerseIndex:
    return MappingProxyType({
        book: MappingProxyType({
            chapter: MappingProxyType(chapter_verses)
            for chapter, chapter_verses in chapters.items()
        })
        for book, chapters in verses.items()
    })


def _render(verse: int, text: str, use_superscripts: bool) -> str:
    if use_superscripts:
        return f"{replace_superscript(verse)}{text}"
    return text


class Bible:
    """
    A parsed translation.

    The index is read-only once built, so one instance can be shared by any
    number of readers.
    """

    def __init__(
        self,
        translation: Optional[TranslationSelector] = None,
        text: Optional[str] = None,
    ):
        """
        Load and index a translation.

        Args:
            translation: Translation to load; the default translation if None
            text: Raw text to index instead of reading the translation
        """
        if text is None:
            if translation is None:
                translation = Translation.default()
            text = translation.get_text()
        self._translation = translation
        self._verses = parse_text(text)
        source = translation if translation is not None else "in-memory text"
        logger.info(f"Indexed {source}: {self.verse_count} verses in {len(self._verses)} books")

    @classmethod
    def from_text(cls, text: str, translation: Optional[TranslationSelector] = None) -> "Bible":
        """Build a Bible from raw text already in memory."""
        return cls(translation, text=text)

    @property
    def translation(self) -> Optional[TranslationSelector]:
        return self._translation

    def get_translation(self) -> Optional[TranslationSelector]:
        return self._translation

    @property
    def verses(self) -> VerseIndex:
        """The read-only verse index."""
        return self._verses

    @property
    def verse_count(self) -> int:
        return sum(
            len(chapter_verses)
            for chapters in self._verses.values()
            for chapter_verses in chapters.values()
        )

    def _get_chapters(self, book: str) -> Mapping[int, Mapping[int, str]]:
        chapters = self._verses.get(normalize_book(book))
        if chapters is None:
            raise BookNotFound(book)
        return chapters

    def _get_chapter_verses(self, book: str, chapter: int) -> Mapping[int, str]:
        chapter_verses = self._get_chapters(book).get(chapter)
        if chapter_verses is None:
            raise ChapterNotFound(f"{book} {chapter}")
        return chapter_verses

    def _get_text(self, book: str, chapter: int, verse: int) -> str:
        text = self._get_chapter_verses(book, chapter).get(verse)
        if text is None:
            raise VerseNotFound(f"{book} {chapter}:{verse}")
        return text

    def get_verse(self, lookup: BibleLookup, use_superscripts: bool = False) -> str:
        """
        Get the text of a verse or range of verses.

        Range verses are joined by single spaces. A missing verse anywhere in
        a range fails the whole lookup.

        Raises:
            BookNotFound, ChapterNotFound, VerseNotFound
        """
        if lookup.thru_verse is None:
            text = self._get_text(lookup.book, lookup.chapter, lookup.verse)
            return _render(lookup.verse, text, use_superscripts)

        verse_text = ""
        for verse in range(lookup.verse, lookup.thru_verse + 1):
            text = self._get_text(lookup.book, lookup.chapter, verse)
            verse_text += _render(verse, text, use_superscripts) + " "
        return verse_text.strip()

    def get_chapter(self, book: str, chapter: int, use_superscripts: bool = False) -> str:
        """
        Get the text of an entire chapter in verse order.

        Every verse is followed by a single space.
        """
        chapter_verses = self._get_chapter_verses(book, chapter)
        return "".join(
            _render(verse, chapter_verses[verse], use_superscripts) + " "
            for verse in sorted(chapter_verses)
        )

    def get_book(self, book: str, use_superscripts: bool = False) -> str:
        """
        Get the text of an entire book.

        Chapters are rendered as get_chapter does and each is followed by a
        blank line. This can be a very large string.
        """
        chapters = self._get_chapters(book)
        return "".join(
            self.get_chapter(book, chapter, use_superscripts) + "\n\n"
            for chapter in sorted(chapters)
        )

    def get_books(self) -> List[str]:
        """Get all book names (lowercase). Order is not meaningful."""
        return list(self._verses.keys())

    def get_chapters(self, book: str) -> List[int]:
        """Get all chapter numbers of a book."""
        return list(self._get_chapters(book).keys())

    def get_verses(self, book: str, chapter: int) -> List[int]:
        """
        Get all verse numbers of a chapter.

        A missing book is reported as ChapterNotFound, like a missing chapter.
        """
        chapter_verses = self._verses.get(normalize_book(book), {}).get(chapter)
        if chapter_verses is None:
            raise ChapterNotFound(f"{book} {chapter}")
        return list(chapter_verses.keys())

    def get_max_verse(self, book: str, chapter: int) -> int:
        """Get the highest verse number of a chapter."""
        chapter_verses = self._verses.get(normalize_book(book), {}).get(chapter)
        if not chapter_verses:
            raise ChapterNotFound(f"{book} {chapter}")
        return max(chapter_verses)

    def random_verse(self, rng: Optional[random.Random] = None) -> BibleLookup:
        """
        Pick a random verse.

        Draws a book, then a chapter of that book, then a verse of that
        chapter, each uniformly. Verses in short books are therefore more
        likely than verses in long ones.
        """
        rng = rng or random
        if not self._verses:
            raise BookNotFound("translation has no books")

        book = rng.choice(list(self._verses))
        chapters = self._verses[book]
        chapter = rng.choice(list(chapters))
        verse = rng.choice(list(chapters[chapter]))
        return BibleLookup(book, chapter, verse)
