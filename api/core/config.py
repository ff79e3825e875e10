# core/config.py
"""
Bible lookup configuration loader.

Reads defaults from config/bible.yml and lets the environment (or a .env
file) override them.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

# Load .env
load_dotenv()

API_DIR = Path(__file__).resolve().parent.parent

CONFIG_PATH = API_DIR / "config" / "bible.yml"


@dataclass(frozen=True)
class BibleSettings:
    """Resolved configuration for the lookup engine."""
    default_language: str = "en"
    default_version: str = "kjv"
    corpus_root_path: Path = API_DIR / "bibles"


def get_default_config() -> Dict[str, Any]:
    """Return built-in defaults used when the YAML file is missing."""
    return {
        "default_language": "en",
        "default_version": "kjv",
        "corpus_root_path": "bibles",
    }


def load_config_file(path: Path = None) -> Dict[str, Any]:
    """Load raw config values from YAML, falling back to defaults."""
    path = Path(path or os.getenv("BIBLE_CONFIG_PATH") or CONFIG_PATH)
    config = get_default_config()

    if not path.exists():
        return config

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    config.update({k: v for k, v in loaded.items() if v is not None})
    return config


def _resolve_path(value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = API_DIR / path
    return path


@lru_cache(maxsize=1)
def get_settings() -> BibleSettings:
    """Return settings from YAML with environment overrides applied."""
    config = load_config_file()

    return BibleSettings(
        default_language=os.getenv("BIBLE_DEFAULT_LANGUAGE", str(config["default_language"])),
        default_version=os.getenv("BIBLE_DEFAULT_VERSION", str(config["default_version"])),
        corpus_root_path=_resolve_path(
            os.getenv("BIBLE_CORPUS_PATH", str(config["corpus_root_path"]))
        ),
    )


def reload_settings() -> BibleSettings:
    """Clear cache and reload settings."""
    get_settings.cache_clear()
    return get_settings()
