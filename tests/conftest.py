"""Shared fixtures for namekit tests."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit import settings


class FixedRandom:
    """Random source that always picks the first word and replays numbers."""

    def __init__(self, numbers=(42,)):
        self.numbers = list(numbers)
        self.choice_calls = 0
        self.randint_calls = []

    def choice(self, seq):
        self.choice_calls += 1
        return seq[0]

    def randint(self, a, b):
        self.randint_calls.append((a, b))
        return self.numbers[(len(self.randint_calls) - 1) % len(self.numbers)]


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against the bundled app.yaml unless it opts out."""
    monkeypatch.delenv(settings.CONFIG_ENV_VAR, raising=False)
    settings.clear_cache()
    yield
    settings.clear_cache()
