#!/usr/bin/env python3
"""
Name Generator
==============
Endless iterator of random names such as ``rusty-nail``.

Each name combines a random adjective, a random noun and, optionally, a
random 4-digit number, rendered in one of the ``CaseStyle`` strategies.

Usage:
    from namekit import Generator, CaseStyle

    gen = Generator()
    next(gen)                       # 'rusty-nail'

    gen = Generator.with_numbers(CaseStyle.TITLE_CASE)
    gen.take(3)                     # ['Pushy Pencil 5602', ...]

    gen = Generator(["imaginary"], ["roll"])
    next(gen)                       # 'imaginary-roll'

The iterator never ends: callers take as many names as they need. Names
may repeat; nothing is de-duplicated.
"""

import logging
import random
from typing import Any, Iterable, Iterator, List, Optional, Union

from .naming import NUMBER_MAX, NUMBER_MIN, CaseStyle, format_name
from .words import WordSource

logger = logging.getLogger(__name__)


class Generator:
    """
    Random name generator combining an adjective, a noun and an optional
    number.

    Not thread-safe: give each thread its own generator.
    """

    def __init__(self,
                 adjectives: Optional[Iterable[str]] = None,
                 nouns: Optional[Iterable[str]] = None,
                 naming: Union[CaseStyle, str, None] = None,
                 numbered: bool = False,
                 rng: Any = None,
                 seed: Optional[int] = None):
        """
        Parameters
        ----------
        adjectives, nouns : iterable of str, optional
            Word lists; default to the built-in English lists
        naming : CaseStyle or str
            Naming strategy (default: ``CaseStyle.default()``, KebabCase)
        numbered : bool
            Append a random 4-digit number. ``Numbered`` always does.
        rng : optional
            Random source providing ``choice(seq)`` and ``randint(a, b)``
        seed : int, optional
            Seed for the default ``random.Random`` source; ignored when
            ``rng`` is given

        Raises
        ------
        ConfigurationError
            Unknown strategy name or invalid word list
        """
        self._naming = CaseStyle.from_str(naming) if naming is not None else CaseStyle.default()
        self._numbered = bool(numbered)
        self._rng = rng if rng is not None else random.Random(seed)
        self._words = WordSource(adjectives, nouns, rng=self._rng)

        logger.debug(
            f"Generator ready: {self._words!r}, naming={self._naming.value}, "
            f"numbered={self._numbered}"
        )

    @classmethod
    def with_naming(cls, naming: Union[CaseStyle, str]) -> "Generator":
        """Built-in word lists, no number appended."""
        return cls(naming=naming, numbered=False)

    @classmethod
    def with_numbers(cls, naming: Union[CaseStyle, str]) -> "Generator":
        """Built-in word lists with a random number appended."""
        return cls(naming=naming, numbered=True)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def naming(self) -> CaseStyle:
        return self._naming

    @property
    def numbered(self) -> bool:
        return self._numbered

    @property
    def words(self) -> WordSource:
        return self._words

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _rand_num(self) -> int:
        return self._rng.randint(NUMBER_MIN, NUMBER_MAX)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        adjective = self._words.pick_adjective()
        noun = self._words.pick_noun()

        number = self._rand_num() if self._numbered else None
        if self._naming.forces_number:
            # Numbered draws its own number; the optional one is discarded
            number = self._rand_num()

        return format_name(self._naming, adjective, noun, number)

    def take(self, count: int) -> List[str]:
        """Return the next ``count`` names."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [next(self) for _ in range(count)]

    def __repr__(self) -> str:
        return (f"Generator(naming={self._naming.value}, "
                f"numbered={self._numbered}, words={self._words!r})")


__all__ = [
    "Generator",
]
