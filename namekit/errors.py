#!/usr/bin/env python3
"""Exceptions raised by namekit."""


class NameKitError(Exception):
    """Base class for all namekit errors."""


class ConfigurationError(NameKitError, ValueError):
    """Invalid generator configuration (unknown strategy, bad word list, ...)."""


class EmptyWordListError(ConfigurationError):
    """A word list has no entries to choose from."""


__all__ = [
    "NameKitError",
    "ConfigurationError",
    "EmptyWordListError",
]
