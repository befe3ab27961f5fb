"""Tests for sentence sampling."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from nlptk import Corpus, EmptyModelError, English, FrequencyTable, Sampler, Token, UnigramModel
from nlptk.sampler import CategoricalDistribution


class ScriptedRandom(random.Random):
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        super().__init__(0)
        self._draws = list(draws)

    def random(self):
        return self._draws.pop(0)


# ---------------------------------------------------------------------------
# Categorical selection


def test_select_walks_cumulative_sum():
    dist = CategoricalDistribution(["a", "b", "c"], [0.2, 0.3, 0.5])
    assert dist.select(0.0) == "a"
    assert dist.select(0.19) == "a"
    assert dist.select(0.25) == "b"
    assert dist.select(0.75) == "c"


def test_select_tie_goes_to_next_outcome():
    dist = CategoricalDistribution(["a", "b"], [0.5, 0.5])
    assert dist.select(0.5) == "b"


def test_select_clamps_rounding_shortfall():
    dist = CategoricalDistribution(["a", "b"], [0.5, 0.4999999])
    assert dist.select(0.99999999) == "b"


def test_empty_distribution_rejected():
    with pytest.raises(ValueError):
        CategoricalDistribution([], [])


# ---------------------------------------------------------------------------
# Sampler


def test_empty_model_cannot_be_sampled():
    model = UnigramModel.from_corpus(Corpus.from_text("", English))
    with pytest.raises(EmptyModelError):
        Sampler(model)


def test_empty_vocabulary_cannot_be_sampled():
    model = UnigramModel(FrequencyTable(English), [3])
    with pytest.raises(EmptyModelError):
        Sampler(model)


def test_empty_model_error_is_value_error():
    assert issubclass(EmptyModelError, ValueError)


def test_rng_and_seed_are_exclusive(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    with pytest.raises(ValueError):
        Sampler(model, random.Random(1), seed=1)


def test_scripted_draws(mixed_length_corpus):
    # Vocabulary is a b . c d e f ! with probability 1/8 each
    model = UnigramModel.from_corpus(mixed_length_corpus)
    rng = ScriptedRandom([0.0, 0.0, 0.4, 0.99])
    sampler = Sampler(model, rng)
    assert sampler.sample_tokens() == [Token("a"), Token("c"), Token("!")]


def test_sentence_has_drawn_length(cat_corpus):
    sampler = Sampler(UnigramModel.from_corpus(cat_corpus), seed=3)
    for sentence in sampler.generate(20):
        assert len(sentence.split(" ")) == 4


def test_separator(cat_corpus):
    sampler = Sampler(UnigramModel.from_corpus(cat_corpus), seed=3, separator="_")
    assert sampler.sample().count("_") == 3


def test_same_seed_same_output(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    first = list(Sampler(model, random.Random(42)).generate(25))
    second = list(Sampler(model, random.Random(42)).generate(25))
    assert first == second


def test_sampling_does_not_mutate_model(mixed_length_corpus):
    model = UnigramModel.from_corpus(mixed_length_corpus)
    words = model.word_distribution()
    lengths = model.length_distribution()
    list(Sampler(model, seed=0).generate(50))
    assert model.word_distribution() == words
    assert model.length_distribution() == lengths


def test_generate_count():
    model = UnigramModel.from_corpus(Corpus.from_text("x y.", English))
    sampler = Sampler(model, seed=1)
    assert len(list(sampler.generate(7))) == 7
    assert list(sampler.generate(0)) == []
    with pytest.raises(ValueError):
        list(sampler.generate(-1))


def test_length_distribution_converges(mixed_length_corpus):
    sampler = Sampler(UnigramModel.from_corpus(mixed_length_corpus), random.Random(7))
    draws = Counter(sampler.draw_length() for _ in range(10000))
    assert set(draws) == {3, 5}
    assert draws[3] / 10000 == pytest.approx(0.5, abs=0.03)


def test_word_distribution_converges(cat_corpus):
    sampler = Sampler(UnigramModel.from_corpus(cat_corpus), random.Random(11))
    draws = Counter(sampler.draw_token() for _ in range(20000))
    assert draws[Token("the")] / 20000 == pytest.approx(0.25, abs=0.02)
    assert draws[Token("cat")] / 20000 == pytest.approx(0.125, abs=0.02)
