"""
Unigram Language Model

This module contains the UnigramModel class: a probability distribution
over the vocabulary of a corpus together with a distribution over the
lengths of its sentences. Both are maximum likelihood estimates with no
smoothing; a token never seen in training has probability 0.
"""

import logging
import math
from typing import Dict, Generic, Iterable, List, Tuple, Type

from .corpus import Corpus
from .frequency import FrequencyTable, frequency
from .language import L
from .token import Token


logger = logging.getLogger(__name__)


class UnigramModel(Generic[L]):
    """
    Unigram Language Model

    Words are modelled as independent draws from a single distribution,
    and sentence length is modelled separately.

    Attributes:
        language: Language tag of the training corpus (read-only)
        training_stats: Copy of the summary statistics of the training data
    """

    def __init__(self, frequencies: FrequencyTable[L], sentence_lengths: Iterable[int]):
        """
        Build the model from token counts and observed sentence lengths.

        Args:
            frequencies: Token counts of the training corpus
            sentence_lengths: Number of tokens in each training sentence
        """
        self._language: Type[L] = frequencies.language

        total = frequencies.total()
        self._word_probs: Dict[Token[L], float] = {
            token: count / total for token, count in frequencies.counts().items()
        }

        length_counts = frequency(sentence_lengths)
        for length in length_counts:
            if length < 1:
                raise ValueError(f"Sentence lengths must be positive, got {length}")
        num_sentences = sum(length_counts.values())
        self._length_probs: Dict[int, float] = {
            length: length_counts[length] / num_sentences
            for length in sorted(length_counts)
        }

        self._training_stats: Dict = {
            'vocab_size': len(self._word_probs),
            'total_tokens': total,
            'num_sentences': num_sentences,
            'mean_sentence_length': (
                sum(length * count for length, count in length_counts.items()) / num_sentences
                if num_sentences else 0.0
            ),
        }

        logger.debug("Built unigram model: %d word types, %d sentence lengths",
                     len(self._word_probs), len(self._length_probs))

    @property
    def language(self) -> Type[L]:
        return self._language

    @property
    def training_stats(self) -> Dict:
        return dict(self._training_stats)

    @classmethod
    def from_corpus(cls, corpus: Corpus[L]) -> "UnigramModel[L]":
        """Train a model on a corpus."""
        return cls(FrequencyTable.from_corpus(corpus), corpus.sentence_lengths())

    def probability(self, token: Token[L]) -> float:
        """
        Return P(token).

        Tokens never observed in training have probability 0. That is an
        approximation: it marks the token as unrepresented, not estimated.
        """
        return self._word_probs.get(token, 0.0)

    def log_probability(self, token: Token[L]) -> float:
        """Calculate log probability (base e) of a token."""
        prob = self.probability(token)
        return math.log(prob) if prob > 0 else float('-inf')

    def length_probability(self, length: int) -> float:
        """Return the probability that a sentence has ``length`` tokens."""
        return self._length_probs.get(length, 0.0)

    def word_distribution(self) -> Dict[Token[L], float]:
        return dict(self._word_probs)

    def length_distribution(self) -> Dict[int, float]:
        return dict(self._length_probs)

    def vocabulary(self) -> Tuple[Token[L], ...]:
        """Return the observed tokens in first-seen order."""
        return tuple(self._word_probs)

    def lengths(self) -> Tuple[int, ...]:
        """Return the observed sentence lengths in ascending order."""
        return tuple(self._length_probs)

    @property
    def has_sentences(self) -> bool:
        return bool(self._length_probs)

    def perplexity(self, tokens: Iterable[Token[L]]) -> float:
        """
        Calculate perplexity on a token sequence.

        Perplexity = 2^(-1/N * sum(log2(P(w_i))))

        Any token with probability 0 makes the perplexity infinite.

        Args:
            tokens: Evaluation tokens

        Returns:
            Perplexity score (lower is better)
        """
        total_log_prob = 0.0
        total_words = 0

        for token in tokens:
            prob = self.probability(token)
            if prob == 0:
                return float('inf')
            total_log_prob += math.log2(prob)
            total_words += 1

        if total_words == 0:
            raise ValueError("Cannot compute perplexity of an empty sequence")

        return 2 ** (-total_log_prob / total_words)

    def get_top_words(self, top_k: int = 100) -> List[Tuple[Token[L], float]]:
        """Get the most probable tokens, ties in first-seen order."""
        return sorted(self._word_probs.items(), key=lambda x: x[1], reverse=True)[:top_k]

    def __contains__(self, token: object) -> bool:
        return token in self._word_probs

    def __repr__(self) -> str:
        return (f"UnigramModel[{self.language.__name__}]"
                f"(vocab={len(self._word_probs)}, lengths={len(self._length_probs)})")
