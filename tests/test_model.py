"""Tests for the unigram model."""

from __future__ import annotations

import math

import pytest

from nlptk import Corpus, English, FrequencyTable, Token, UnigramModel


def test_cat_scenario_distributions(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    assert model.length_distribution() == {4: 1.0}
    assert model.probability(Token("the")) == pytest.approx(0.25)
    assert model.probability(Token("cat")) == pytest.approx(0.125)


def test_word_probabilities_sum_to_one():
    text = "A quick brown fox jumps. Over the lazy dog! Again? And again and again."
    model = UnigramModel.from_corpus(Corpus.from_text(text, English))
    assert abs(sum(model.word_distribution().values()) - 1.0) < 1e-9
    assert abs(sum(model.length_distribution().values()) - 1.0) < 1e-9


def test_every_seen_token_has_positive_probability(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    for token in cat_corpus:
        assert model.probability(token) > 0


def test_unseen_token_has_zero_probability(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    assert model.probability(Token("bird")) == 0.0
    assert model.log_probability(Token("bird")) == float("-inf")
    assert Token("bird") not in model


def test_log_probability(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    assert model.log_probability(Token("the")) == pytest.approx(math.log(0.25))


def test_mixed_lengths(mixed_length_corpus):
    model = UnigramModel.from_corpus(mixed_length_corpus)
    assert model.length_distribution() == {3: 0.5, 5: 0.5}
    assert model.lengths() == (3, 5)
    assert model.length_probability(4) == 0.0


def test_empty_corpus_gives_empty_model():
    model = UnigramModel.from_corpus(Corpus.from_text("", English))
    assert model.length_distribution() == {}
    assert model.word_distribution() == {}
    assert not model.has_sentences
    assert model.training_stats["num_sentences"] == 0


def test_vocabulary_in_first_seen_order(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    assert [t.text for t in model.vocabulary()] == ["the", "cat", "sat", ".", "dog", "ran"]


def test_training_stats(cat_corpus):
    stats = UnigramModel.from_corpus(cat_corpus).training_stats
    assert stats == {
        "vocab_size": 6,
        "total_tokens": 8,
        "num_sentences": 2,
        "mean_sentence_length": 4.0,
    }


def test_model_from_table_and_lengths():
    table = FrequencyTable(English, {Token("a"): 1, Token("b"): 3})
    model = UnigramModel(table, [2, 2, 1, 2])
    assert model.probability(Token("b")) == pytest.approx(0.75)
    assert model.length_distribution() == {1: 0.25, 2: 0.75}
    assert model.language is English


def test_non_positive_lengths_rejected():
    table = FrequencyTable(English, {Token("a"): 1})
    with pytest.raises(ValueError):
        UnigramModel(table, [0])


def test_perplexity(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    assert model.perplexity([Token("the"), Token(".")]) == pytest.approx(4.0)
    assert model.perplexity([Token("the"), Token("bird")]) == float("inf")
    with pytest.raises(ValueError):
        model.perplexity([])


def test_top_words(cat_corpus):
    top = UnigramModel.from_corpus(cat_corpus).get_top_words(2)
    assert [t.text for t, _ in top] == ["the", "."]


def test_training_stats_and_language_cannot_be_changed(cat_corpus):
    model = UnigramModel.from_corpus(cat_corpus)
    model.training_stats["vocab_size"] = 0
    assert model.training_stats["vocab_size"] == 6
    with pytest.raises(AttributeError):
        model.language = English
