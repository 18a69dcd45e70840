#!/usr/bin/env python3
"""
Word Source
===========
Holds the adjective and noun lists and draws words from them.

Selection is uniform and with replacement: the same word can come up on
consecutive draws, and the adjective and noun lists may overlap.
"""

import logging
import random
from typing import Any, Iterable, Optional, Sequence, Tuple

from .errors import ConfigurationError, EmptyWordListError
from .wordlists import default_adjectives, default_nouns

logger = logging.getLogger(__name__)


def as_word_list(words: Iterable[str], kind: str = "word") -> Tuple[str, ...]:
    """
    Validate and freeze a word list.

    Raises
    ------
    EmptyWordListError
        If there are no words
    ConfigurationError
        If an entry is not a single non-empty word
    """
    if isinstance(words, str):
        raise ConfigurationError(f"{kind} list must be a sequence of words, not a string")

    frozen = tuple(words)
    if not frozen:
        raise EmptyWordListError(f"{kind} list is empty")

    for word in frozen:
        if not isinstance(word, str) or not word or any(c.isspace() for c in word):
            raise ConfigurationError(f"Invalid {kind}: {word!r}")

    return frozen


class WordSource:
    """
    Uniform random selection from an adjective list and a noun list.

    Usage:
        source = WordSource(["rusty"], ["nail"])
        source.pick_adjective()   # 'rusty'
    """

    def __init__(self,
                 adjectives: Optional[Iterable[str]] = None,
                 nouns: Optional[Iterable[str]] = None,
                 rng: Any = None):
        """
        Parameters
        ----------
        adjectives, nouns : iterable of str, optional
            Word lists; default to the built-in English lists
        rng : optional
            Random source with ``choice(seq)``; defaults to a new
            ``random.Random()``
        """
        if adjectives is None:
            adjectives = default_adjectives()
        if nouns is None:
            nouns = default_nouns()

        self._adjectives = as_word_list(adjectives, "adjective")
        self._nouns = as_word_list(nouns, "noun")
        self._rng = rng if rng is not None else random.Random()

    @property
    def adjectives(self) -> Tuple[str, ...]:
        return self._adjectives

    @property
    def nouns(self) -> Tuple[str, ...]:
        return self._nouns

    def pick(self, words: Sequence[str]) -> str:
        """Return one word chosen uniformly at random."""
        if not words:
            raise EmptyWordListError("Cannot pick a word from an empty list")
        return self._rng.choice(words)

    def pick_adjective(self) -> str:
        return self.pick(self._adjectives)

    def pick_noun(self) -> str:
        return self.pick(self._nouns)

    def __repr__(self) -> str:
        return (f"WordSource(adjectives={len(self._adjectives)}, "
                f"nouns={len(self._nouns)})")


__all__ = [
    "WordSource",
    "as_word_list",
]
