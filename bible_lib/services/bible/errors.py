# bible_lib/services/bible/errors.py
"""
Errors raised while loading translations and looking up verses.

Every failure is raised to the immediate caller; nothing here retries.
"""

from typing import Optional


class BibleLibError(Exception):
    """Base exception for the Bible library."""

    message = "An error occurred in the Bible library."

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        text = f"{self.message} ({detail})" if detail else self.message
        super().__init__(text)


class InvalidCustomTranslationFile(BibleLibError):
    """Raised when a custom translation path does not exist."""

    message = "The specified custom translation file is invalid or does not exist."


class BibleIOError(BibleLibError):
    """Raised when a translation file exists but cannot be read."""

    message = "An I/O error occurred"

    def __init__(self, original: Exception, detail: Optional[str] = None):
        self.original = original
        super().__init__(detail or str(original))


class TranslationUnavailable(BibleLibError):
    """Raised when a built-in translation is disabled or its text is missing."""

    message = "The requested translation is not available."


class BookNotFound(BibleLibError):
    message = "The specified book was not found in the translation."


class ChapterNotFound(BibleLibError):
    message = "The specified chapter was not found in the translation."


class VerseNotFound(BibleLibError):
    message = "The specified verse was not found in the translation."


class InvalidVerseFormat(BibleLibError):
    """Raised when a reference string cannot be parsed into a lookup."""

    message = "The verse format provided is invalid."


class CorpusParseError(BibleLibError):
    """Raised when a corpus line is not `<Book> <Chapter>:<Verse> <Text>`."""

    message = "The translation text contains a malformed line."

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")
