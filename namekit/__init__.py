#!/usr/bin/env python3
"""
namekit - Random Name Generator
===============================

Generates friendly random names for containers, projects and other
short-lived resources by combining an adjective, a noun and an optional
4-digit number.

Quick Start
-----------
    from namekit import Generator, CaseStyle

    gen = Generator()
    print(next(gen))                        # rusty-nail

    gen = Generator.with_naming(CaseStyle.NUMBERED)
    print(next(gen))                        # pushy-pencil-5602

    gen = Generator(["imaginary"], ["roll"])
    assert next(gen) == "imaginary-roll"

Modules
-------
    namekit.generator  - The endless name iterator
    namekit.naming     - Case styles and formatting
    namekit.words      - Word selection
    namekit.wordlists  - Built-in and custom word lists
    namekit.settings   - YAML application settings

CLI Usage
---------
    namekit 5 --number
    python -m namekit -s TitleCase 3
"""

__version__ = "0.15.0"

from typing import List, Union

from .errors import ConfigurationError, EmptyWordListError, NameKitError
from .generator import Generator
from .naming import CaseStyle, format_name
from .wordlists import default_adjectives, default_nouns, load_word_file
from .words import WordSource


def generate(count: int = 1,
             naming: Union[CaseStyle, str, None] = None,
             numbered: bool = False) -> List[str]:
    """Quick generation with the built-in word lists."""
    return Generator(naming=naming, numbered=numbered).take(count)


__all__ = [
    "__version__",
    "Generator",
    "CaseStyle",
    "WordSource",
    "format_name",
    "generate",
    "default_adjectives",
    "default_nouns",
    "load_word_file",
    "NameKitError",
    "ConfigurationError",
    "EmptyWordListError",
]
