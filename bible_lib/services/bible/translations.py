# bible_lib/services/bible/translations.py
"""
Translation selection and corpus loading.

Built-in translations are plain-text files named <code>.txt in the configured
translations directory (texts from https://openbible.com/texts.htm). Which of
them may be loaded is controlled by the enabled_translations setting. Custom
translations are read from any path at load time.

Each line of a translation is one verse: `Book Chapter:Verse Text`.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Union

from bible_lib.core import config

from .errors import (
    BibleIOError,
    InvalidCustomTranslationFile,
    TranslationUnavailable,
)

logger = logging.getLogger(__name__)


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BibleIOError(e) from e


@lru_cache(maxsize=None)
def _read_builtin_text(path: str) -> str:
    """Read a built-in translation once per process."""
    text = _read_file(path)
    logger.info(f"Loaded built-in translation text from {path} ({len(text)} chars)")
    return text


class Translation(Enum):
    """Built-in Bible translations."""

    AMERICAN_KING_JAMES = ("akjv", "American King James Version")
    AMERICAN_STANDARD = ("asv", "American Standard Version")
    ENGLISH_REVISED = ("erv", "English Revised Version")
    KING_JAMES = ("kjv", "King James Version")

    def __init__(self, code: str, display_name: str):
        self.code = code
        self.display_name = display_name

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_code(cls, code: str) -> "Translation":
        """Look up a built-in translation by code (case-insensitive)."""
        key = (code or "").strip().lower()
        for translation in cls:
            if translation.code == key:
                return translation
        raise TranslationUnavailable(f"unknown translation code {code!r}")

    @classmethod
    def enabled(cls) -> List["Translation"]:
        """Return enabled built-in translations in declaration order."""
        codes = config.get_enabled_translations()
        return [t for t in cls if t.code in codes]

    @classmethod
    def default(cls) -> "Translation":
        """
        Return the default translation.

        Uses the default_translation setting when it names an enabled
        translation, otherwise the first enabled one.
        """
        enabled = cls.enabled()
        if not enabled:
            raise TranslationUnavailable("no built-in translations are enabled")

        code = config.get_default_translation()
        if code:
            for translation in enabled:
                if translation.code == code:
                    return translation
            logger.warning(f"Default translation {code} is not enabled, using {enabled[0].code}")
        return enabled[0]

    @property
    def is_enabled(self) -> bool:
        return self.code in config.get_enabled_translations()

    @property
    def path(self) -> str:
        return os.path.join(config.get_translations_path(), f"{self.code}.txt")

    def get_text(self) -> str:
        """
        Return the raw text of this translation.

        Raises:
            TranslationUnavailable: translation disabled or its file missing
            BibleIOError: the file exists but could not be read
        """
        if not self.is_enabled:
            raise TranslationUnavailable(f"{self.code} is not enabled")

        path = self.path
        if not os.path.exists(path):
            raise TranslationUnavailable(f"{self.code} text not found at {path}")
        return _read_builtin_text(path)


@dataclass(frozen=True)
class CustomTranslation:
    """
    A translation read from the filesystem.

    Each line must be a verse formatted as `Book Chapter:Verse Text`.
    `name` is strictly for display purposes. The file is re-read on every
    load.
    """
    name: str
    path: str

    def __str__(self) -> str:
        return f"Custom Translation: {self.name}"

    def get_text(self) -> str:
        """
        Return the raw text of the custom translation file.

        Raises:
            InvalidCustomTranslationFile: the path does not exist
            BibleIOError: the path exists but could not be read
        """
        if not os.path.exists(self.path):
            raise InvalidCustomTranslationFile(self.path)

        text = _read_file(self.path)
        logger.info(f"Loaded custom translation {self.name} from {self.path}")
        return text


TranslationSelector = Union[Translation, CustomTranslation]


def load_text(translation: TranslationSelector) -> str:
    """Return the raw verse text for a translation selector."""
    return translation.get_text()
