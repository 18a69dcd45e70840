"""
Tests for the Name Generator
============================
Iteration, numbering and determinism of namekit.Generator.
"""

import itertools
import random
import re

import pytest

import namekit
from namekit import CaseStyle, Generator
from namekit.errors import ConfigurationError, EmptyWordListError
from namekit.wordlists import default_adjectives, default_nouns

from conftest import FixedRandom


def single(naming, numbered=False, rng=None):
    """Generator over the one-word lists ["true"] / ["truth"]."""
    return Generator(["true"], ["truth"], naming, numbered, rng=rng)


class TestSingleWordLists:
    """Exact output with single-element word lists."""

    def test_kebab_case(self):
        assert re.match(r"^true-truth$", next(single(CaseStyle.KEBAB_CASE)))

    def test_pascal_case(self):
        assert re.match(r"^TrueTruth$", next(single(CaseStyle.PASCAL_CASE)))

    def test_snake_case(self):
        assert re.match(r"^true_truth$", next(single(CaseStyle.SNAKE_CASE)))

    def test_screaming_snake_case(self):
        assert re.match(r"^TRUE_TRUTH$", next(single(CaseStyle.SCREAMING_SNAKE_CASE)))

    def test_plain_case(self):
        assert next(single(CaseStyle.PLAIN)) == "true-truth"

    def test_title_case_numbered(self):
        name = next(single(CaseStyle.TITLE_CASE, numbered=True))
        assert re.match(r"^True Truth \d{4}$", name)

    def test_camel_case_numbered(self):
        assert re.match(r"^trueTruth\d{4}$", next(single(CaseStyle.CAMEL_CASE, True)))

    def test_sentence_case_numbered(self):
        assert re.match(r"^True truth \d{4}$", next(single(CaseStyle.SENTENCE_CASE, True)))

    def test_style_given_by_name(self):
        assert next(single("TrainCase")) == "True-Truth"


class TestNumbers:
    """Tests for the numeric suffix."""

    @pytest.mark.parametrize("style", [s for s in CaseStyle if not s.forces_number])
    def test_suffix_is_four_digits_in_range(self, style):
        gen = Generator(["true"], ["truth"], style, numbered=True, seed=5)
        for name in gen.take(200):
            match = re.search(r"(\d+)$", name)
            assert match, name
            digits = match.group(1)
            assert len(digits) == 4
            assert 1 <= int(digits) <= 9999

    @pytest.mark.parametrize("style", [s for s in CaseStyle if not s.forces_number])
    def test_no_number_no_trailing_separator(self, style):
        name = next(Generator(["true"], ["truth"], style))
        assert not re.search(r"[\d\-_ ]$", name)

    @pytest.mark.parametrize("numbered", [True, False])
    def test_numbered_always_has_number(self, numbered):
        gen = single(CaseStyle.NUMBERED, numbered=numbered)
        for name in gen.take(20):
            assert re.match(r"^true-truth-\d{4}$", name)
            assert name[-4:] != "0000"

    def test_number_drawn_from_full_range(self, fixed_rng):
        next(single(CaseStyle.KEBAB_CASE, numbered=True, rng=fixed_rng))
        assert fixed_rng.randint_calls == [(1, 9999)]

    def test_numbered_draws_its_own_number(self):
        """With the flag on, Numbered still uses a second, separate draw."""
        rng = FixedRandom(numbers=[11, 22])
        name = next(single(CaseStyle.NUMBERED, numbered=True, rng=rng))
        assert name == "true-truth-0022"
        assert len(rng.randint_calls) == 2

    def test_numbered_without_flag_draws_once(self):
        rng = FixedRandom(numbers=[7])
        assert next(single(CaseStyle.NUMBERED, rng=rng)) == "true-truth-0007"
        assert len(rng.randint_calls) == 1

    def test_fresh_number_each_pull(self):
        rng = FixedRandom(numbers=[1, 2, 3])
        gen = single(CaseStyle.SNAKE_CASE, numbered=True, rng=rng)
        assert gen.take(3) == ["true_truth_0001", "true_truth_0002", "true_truth_0003"]


class TestIteration:
    """Tests for the iterator contract."""

    def test_is_its_own_iterator(self):
        gen = Generator()
        assert iter(gen) is gen

    def test_never_exhausts(self):
        gen = Generator(["a"], ["b"])
        names = list(itertools.islice(gen, 5000))
        assert len(names) == 5000
        assert all(names)

    def test_no_deduplication(self):
        """Single-word lists keep yielding the same name."""
        assert single(CaseStyle.KEBAB_CASE).take(3) == ["true-truth"] * 3

    def test_take(self):
        gen = Generator()
        assert len(gen.take(7)) == 7
        assert gen.take(0) == []

    def test_take_negative(self):
        with pytest.raises(ValueError):
            Generator().take(-1)

    def test_works_in_for_loop(self):
        count = 0
        for name in Generator():
            assert name
            count += 1
            if count == 10:
                break
        assert count == 10

    def test_default_names_use_builtin_words(self):
        adjectives = set(default_adjectives())
        nouns = set(default_nouns())
        for name in Generator(seed=1).take(50):
            adjective, noun = name.split("-")
            assert adjective in adjectives
            assert noun in nouns


class TestConstruction:
    """Tests for constructors and configuration errors."""

    def test_defaults(self):
        gen = Generator()
        assert gen.naming is CaseStyle.KEBAB_CASE
        assert gen.numbered is False

    def test_with_naming(self):
        gen = Generator.with_naming(CaseStyle.TITLE_CASE)
        assert gen.naming is CaseStyle.TITLE_CASE
        assert gen.numbered is False
        assert re.match(r"^[A-Z][a-z]+ [A-Z][a-z]+$", next(gen))

    def test_with_numbers(self):
        gen = Generator.with_numbers(CaseStyle.PLAIN)
        assert gen.numbered is True
        assert re.match(r"^[a-z]+-[a-z]+-\d{4}$", next(gen))

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError):
            Generator(naming="Shouty")

    @pytest.mark.parametrize("adjectives,nouns", [([], ["truth"]), (["true"], [])])
    def test_empty_word_list(self, adjectives, nouns):
        with pytest.raises(EmptyWordListError):
            gen = Generator(adjectives, nouns)
            next(gen)

    def test_repr(self):
        assert "KebabCase" in repr(Generator(["a"], ["b"]))


class TestDeterminism:
    """Seeded and injected random sources."""

    def test_same_seed_same_sequence(self):
        assert Generator(seed=42, numbered=True).take(25) == \
            Generator(seed=42, numbered=True).take(25)

    def test_same_injected_source_state(self):
        names1 = Generator(rng=random.Random(9), naming=CaseStyle.NUMBERED).take(10)
        names2 = Generator(rng=random.Random(9), naming=CaseStyle.NUMBERED).take(10)
        assert names1 == names2

    def test_different_seeds_differ(self):
        assert Generator(seed=1).take(20) != Generator(seed=2).take(20)

    def test_rng_overrides_seed(self, fixed_rng):
        gen = Generator(["a", "b"], ["x", "y"], rng=fixed_rng, seed=123)
        assert next(gen) == "a-x"


class TestModuleGenerate:
    """Tests for namekit.generate()."""

    def test_count(self):
        assert len(namekit.generate(4)) == 4

    def test_naming_and_number(self):
        for name in namekit.generate(5, naming="ScreamingSnakeCase", numbered=True):
            assert re.match(r"^[A-Z]+_[A-Z]+_\d{4}$", name)
