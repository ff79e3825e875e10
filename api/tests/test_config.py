# api/tests/test_config.py
"""
Tests for core/config.py - YAML defaults and environment overrides.
"""

import os
import sys
import tempfile
from pathlib import Path

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import config

ENV_KEYS = (
    "BIBLE_CONFIG_PATH",
    "BIBLE_DEFAULT_LANGUAGE",
    "BIBLE_DEFAULT_VERSION",
    "BIBLE_CORPUS_PATH",
)


def _clear_env() -> dict:
    saved = {k: os.environ.pop(k) for k in ENV_KEYS if k in os.environ}
    config.get_settings.cache_clear()
    return saved


def _restore_env(saved: dict):
    for k in ENV_KEYS:
        os.environ.pop(k, None)
    os.environ.update(saved)
    config.get_settings.cache_clear()


def test_defaults_from_yaml():
    """Test the shipped config/bible.yml."""
    saved = _clear_env()
    try:
        settings = config.get_settings()
        assert settings.default_language == "en"
        assert settings.default_version == "kjv"
        assert settings.corpus_root_path == config.API_DIR / "bibles"
        print("✓ get_settings: values from config/bible.yml")

        assert config.get_settings() is settings
        print("✓ get_settings: cached")
    finally:
        _restore_env(saved)


def test_environment_overrides():
    """Test environment variables and alternate YAML files."""
    saved = _clear_env()
    try:
        with tempfile.TemporaryDirectory() as tmpdir:
            yml = Path(tmpdir) / "bible.yml"
            yml.write_text(
                "default_language: fr\ndefault_version: lsg\ncorpus_root_path: /srv/bibles\n",
                encoding="utf-8",
            )
            os.environ["BIBLE_CONFIG_PATH"] = str(yml)
            settings = config.reload_settings()
            assert (settings.default_language, settings.default_version) == ("fr", "lsg")
            assert settings.corpus_root_path == Path("/srv/bibles")
            print("✓ BIBLE_CONFIG_PATH: alternate YAML file")

            os.environ["BIBLE_DEFAULT_VERSION"] = "darby"
            os.environ["BIBLE_CORPUS_PATH"] = tmpdir
            settings = config.reload_settings()
            assert settings.default_language == "fr"
            assert settings.default_version == "darby"
            assert settings.corpus_root_path == Path(tmpdir)
            print("✓ environment overrides YAML")

            os.environ["BIBLE_CONFIG_PATH"] = str(Path(tmpdir) / "missing.yml")
            assert config.load_config_file() == config.get_default_config()
            print("✓ load_config_file: missing file falls back to defaults")
    finally:
        _restore_env(saved)


def main():
    """Run all tests."""
    print("=" * 60)
    print("Config Test Suite")
    print("=" * 60)

    test_defaults_from_yaml()
    test_environment_overrides()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
