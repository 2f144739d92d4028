# bible_lib/core/config.py
"""
Settings loader for bible_lib.

Reads bible_lib/config/settings.yml (or the file named by BIBLE_LIB_SETTINGS)
and applies environment overrides. Values from a local .env are loaded first.
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

# Load .env
load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

CONFIG_PATH = os.path.join(PACKAGE_DIR, "config", "settings.yml")
DEFAULT_TRANSLATIONS_PATH = os.path.join(PACKAGE_DIR, "translations")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_default_settings() -> Dict[str, Any]:
    """Return settings used when no config file is present."""
    return {
        "translations_path": DEFAULT_TRANSLATIONS_PATH,
        "enabled_translations": ["akjv", "asv", "erv", "kjv"],
        "default_translation": None,
        "log_level": "INFO",
        "host": "127.0.0.1",
        "port": 5055,
    }


def _split_list(value: str) -> List[str]:
    return [item.strip().lower() for item in value.split(",") if item.strip()]


@lru_cache(maxsize=1)
def load_settings() -> Dict[str, Any]:
    """Load settings from YAML, then apply BIBLE_LIB_* environment overrides."""
    settings = get_default_settings()

    config_path = os.getenv("BIBLE_LIB_SETTINGS", CONFIG_PATH)
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        settings.update({k: v for k, v in loaded.items() if v is not None})

    # ---- ENV OVERRIDES ----
    if os.getenv("BIBLE_LIB_TRANSLATIONS_PATH"):
        settings["translations_path"] = os.getenv("BIBLE_LIB_TRANSLATIONS_PATH")
    if os.getenv("BIBLE_LIB_TRANSLATIONS") is not None:
        settings["enabled_translations"] = _split_list(os.getenv("BIBLE_LIB_TRANSLATIONS"))
    if os.getenv("BIBLE_LIB_DEFAULT_TRANSLATION"):
        settings["default_translation"] = os.getenv("BIBLE_LIB_DEFAULT_TRANSLATION")
    if os.getenv("BIBLE_LIB_LOG_LEVEL"):
        settings["log_level"] = os.getenv("BIBLE_LIB_LOG_LEVEL")
    if os.getenv("BIBLE_LIB_HOST"):
        settings["host"] = os.getenv("BIBLE_LIB_HOST")
    if os.getenv("BIBLE_LIB_PORT"):
        settings["port"] = int(os.getenv("BIBLE_LIB_PORT"))

    # YAML may give a scalar ("kjv" or "kjv, asv") instead of a list
    enabled = settings["enabled_translations"]
    if isinstance(enabled, str):
        enabled = _split_list(enabled)
    settings["enabled_translations"] = [str(code).strip().lower() for code in enabled]
    return settings


def reload_settings() -> Dict[str, Any]:
    """Clear cache and reload settings."""
    load_settings.cache_clear()
    return load_settings()


def get_translations_path() -> str:
    """Directory holding the built-in translation texts (<code>.txt)."""
    return load_settings()["translations_path"]


def get_enabled_translations() -> List[str]:
    """Codes of the built-in translations that may be loaded."""
    return list(load_settings()["enabled_translations"])


def get_default_translation() -> Optional[str]:
    code = load_settings().get("default_translation")
    return code.lower() if code else None


def configure_logging() -> None:
    """Configure root logging from the log_level setting."""
    level = str(load_settings().get("log_level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
