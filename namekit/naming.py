#!/usr/bin/env python3
"""
Naming Strategies
=================
Case styles applied to an (adjective, noun, number) triple.

Every style is described by one entry in a rule table: the separator and
the case applied to each token. The number, when present, is attached with
the same separator as the words, so ``TitleCase`` gives ``Rusty Nail 0042``
and ``CamelCase`` gives ``rustyNail0042``.

``Numbered`` is the odd one out: it always carries a number and always
renders as lowercase kebab, whatever other options the caller passed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from .errors import ConfigurationError


# Numeric suffix range (inclusive), rendered as 4 zero-padded digits
NUMBER_MIN = 1
NUMBER_MAX = 9999
NUMBER_WIDTH = 4


class CaseStyle(Enum):
    """Naming strategy for generated names"""
    PLAIN = "Plain"                                # adjective-noun
    NUMBERED = "Numbered"                          # adjective-noun-0042
    TITLE_CASE = "TitleCase"                       # Adjective Noun
    CAMEL_CASE = "CamelCase"                       # adjectiveNoun
    CLASS_CASE = "ClassCase"                       # AdjectiveNoun
    KEBAB_CASE = "KebabCase"                       # adjective-noun
    TRAIN_CASE = "TrainCase"                       # Adjective-Noun
    SCREAMING_SNAKE_CASE = "ScreamingSnakeCase"    # ADJECTIVE_NOUN
    TABLE_CASE = "TableCase"                       # adjective_noun
    SENTENCE_CASE = "SentenceCase"                 # Adjective noun
    SNAKE_CASE = "SnakeCase"                       # adjective_noun
    PASCAL_CASE = "PascalCase"                     # AdjectiveNoun

    @classmethod
    def default(cls) -> "CaseStyle":
        return cls.KEBAB_CASE

    @classmethod
    def names(cls) -> list:
        """External names of all strategies, in declaration order."""
        return [style.value for style in cls]

    @classmethod
    def from_str(cls, name: str) -> "CaseStyle":
        """
        Parse a strategy from its external name (e.g. ``"SnakeCase"``).

        Raises
        ------
        ConfigurationError
            If the name is not one of the known strategies
        """
        if isinstance(name, cls):
            return name
        for style in cls:
            if style.value == name:
                return style
        available = ', '.join(cls.names())
        raise ConfigurationError(
            f"Unknown naming strategy '{name}'. "
            f"Available strategies: {available}"
        )

    @property
    def forces_number(self) -> bool:
        return self is CaseStyle.NUMBERED

    @property
    def example(self) -> str:
        """Shape of a name in this style, for help output."""
        rule = CASE_RULES[self]
        tokens = [rule.adjective("adjective"), rule.noun("noun")]
        if self.forces_number:
            tokens.append("NNNN")
        return rule.separator.join(tokens)

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Token Primitives
# =============================================================================

def lower(token: str) -> str:
    return token.lower()


def upper(token: str) -> str:
    return token.upper()


def capitalize(token: str) -> str:
    """First character upper, remainder lower."""
    return token[:1].upper() + token[1:].lower()


@dataclass(frozen=True)
class CaseRule:
    """How one style renders its tokens."""
    separator: str
    adjective: Callable[[str], str]
    noun: Callable[[str], str]


CASE_RULES: Dict[CaseStyle, CaseRule] = {
    CaseStyle.PLAIN: CaseRule("-", lower, lower),
    CaseStyle.NUMBERED: CaseRule("-", lower, lower),
    CaseStyle.TITLE_CASE: CaseRule(" ", capitalize, capitalize),
    CaseStyle.CAMEL_CASE: CaseRule("", lower, capitalize),
    CaseStyle.CLASS_CASE: CaseRule("", capitalize, capitalize),
    CaseStyle.KEBAB_CASE: CaseRule("-", lower, lower),
    CaseStyle.TRAIN_CASE: CaseRule("-", capitalize, capitalize),
    CaseStyle.SCREAMING_SNAKE_CASE: CaseRule("_", upper, upper),
    CaseStyle.TABLE_CASE: CaseRule("_", lower, lower),
    CaseStyle.SENTENCE_CASE: CaseRule(" ", capitalize, lower),
    CaseStyle.SNAKE_CASE: CaseRule("_", lower, lower),
    CaseStyle.PASCAL_CASE: CaseRule("", capitalize, capitalize),
}


def format_number(number: int) -> str:
    """Render a suffix number as exactly four zero-padded digits."""
    if not NUMBER_MIN <= number <= NUMBER_MAX:
        raise ValueError(
            f"Number must be between {NUMBER_MIN} and {NUMBER_MAX}, got {number}"
        )
    return f"{number:0{NUMBER_WIDTH}d}"


def join_tokens(separator: str, *tokens: str, number: Optional[int] = None) -> str:
    """Join tokens with a separator, attaching the number the same way."""
    parts = list(tokens)
    if number is not None:
        parts.append(format_number(number))
    return separator.join(parts)


def format_name(style: CaseStyle,
                adjective: str,
                noun: str,
                number: Optional[int] = None) -> str:
    """
    Format an adjective, a noun and an optional number in a case style.

    Parameters
    ----------
    style : CaseStyle
        Naming strategy to apply
    adjective, noun : str
        Word tokens; casing is applied to each token independently
    number : int, optional
        Suffix in 1..9999. Omitted when None, except for ``Numbered``
        which requires one.

    Returns
    -------
    str
        The formatted name
    """
    style = CaseStyle.from_str(style)
    if style.forces_number and number is None:
        raise ValueError(f"{style.value} style requires a number")

    rule = CASE_RULES[style]
    return join_tokens(
        rule.separator,
        rule.adjective(adjective),
        rule.noun(noun),
        number=number,
    )


__all__ = [
    "CaseStyle",
    "CaseRule",
    "CASE_RULES",
    "NUMBER_MIN",
    "NUMBER_MAX",
    "format_name",
    "format_number",
    "join_tokens",
    "capitalize",
    "lower",
    "upper",
]
