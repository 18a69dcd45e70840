#!/usr/bin/env python3
"""
Word List Loader
================
Loads the built-in English adjective/noun lists and custom word files.

Usage:
    from namekit.wordlists import default_adjectives, default_nouns, load_word_file

    adjectives = default_adjectives()
    nouns = load_word_file("my-nouns.txt")
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple, Union

import yaml

from ..errors import ConfigurationError, EmptyWordListError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Path
# =============================================================================

WORDLISTS_DIR = Path(__file__).parent
BUILTIN_FILE = "english.yaml"

YAML_SUFFIXES = ('.yaml', '.yml')


# =============================================================================
# Built-in Lists
# =============================================================================

@lru_cache(maxsize=4)
def _load_yaml(filename: str) -> Dict:
    """Load a YAML file from the word lists directory."""
    filepath = WORDLISTS_DIR / filename
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _builtin(key: str) -> Tuple[str, ...]:
    words = _load_yaml(BUILTIN_FILE).get(key) or []
    return tuple(str(w) for w in words)


@lru_cache(maxsize=1)
def default_adjectives() -> Tuple[str, ...]:
    """The built-in English adjectives."""
    words = _builtin('adjectives')
    logger.debug(f"Loaded {len(words)} built-in adjectives")
    return words


@lru_cache(maxsize=1)
def default_nouns() -> Tuple[str, ...]:
    """The built-in English nouns."""
    words = _builtin('nouns')
    logger.debug(f"Loaded {len(words)} built-in nouns")
    return words


# =============================================================================
# Custom Word Files
# =============================================================================

def _check_word(word, path: Path) -> str:
    if not isinstance(word, str):
        raise ConfigurationError(
            f"Invalid entry {word!r} in word file {path}: "
            f"entries must be strings (quote values like 'on' or '0042')"
        )
    word = word.strip().lower()
    if not word or any(c.isspace() for c in word):
        raise ConfigurationError(f"Invalid entry {word!r} in word file {path}: expected a single word")
    return word


def _parse_text(text: str, path: Path) -> Tuple[str, ...]:
    words = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        words.append(_check_word(line, path))
    return tuple(words)


def _parse_yaml(text: str, path: Path) -> Tuple[str, ...]:
    data = yaml.safe_load(text)
    if data is None:
        return ()
    if not isinstance(data, list):
        raise ConfigurationError(f"Word file {path} must contain a YAML list")
    return tuple(_check_word(w, path) for w in data)


def load_word_file(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    Load a custom word list from disk.

    YAML files (``.yaml``/``.yml``) hold a top-level list. Anything else is
    read as plain text with one word per line; blank lines and ``#``
    comments are skipped.

    Raises
    ------
    ConfigurationError
        If the file cannot be read or parsed
    EmptyWordListError
        If the file holds no words
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigurationError(f"Cannot read word file {path}: {e}") from e

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            words = _parse_yaml(text, path)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in word file {path}: {e}") from e
    else:
        words = _parse_text(text, path)

    if not words:
        raise EmptyWordListError(f"Word file {path} contains no words")

    logger.debug(f"Loaded {len(words)} words from {path}")
    return words


__all__ = [
    "default_adjectives",
    "default_nouns",
    "load_word_file",
    "WORDLISTS_DIR",
]
