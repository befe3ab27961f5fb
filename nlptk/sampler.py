"""
Sentence Sampling

Generates sentences from a UnigramModel: draw a sentence length from the
length distribution, then draw that many tokens independently from the word
distribution.

Both draws use the cumulative-sum technique. A uniform value u in [0, 1) is
drawn and the outcomes are walked in a fixed order (ascending length, and
first-seen order for tokens); the first outcome whose cumulative
probability is strictly greater than u is chosen. If rounding leaves the
last cumulative value at or below u, the last outcome is chosen.
"""

import bisect
import logging
import random
from itertools import accumulate
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .corpus import DEFAULT_SEPARATOR
from .errors import EmptyModelError
from .language import L
from .model import UnigramModel
from .token import Token


logger = logging.getLogger(__name__)

T = TypeVar("T")


class CategoricalDistribution(Generic[T]):
    """A discrete distribution sampled by walking its cumulative sum."""

    def __init__(self, outcomes: Sequence[T], probabilities: Sequence[float]):
        if len(outcomes) != len(probabilities):
            raise ValueError("outcomes and probabilities must have the same length")
        if not outcomes:
            raise ValueError("Cannot sample from an empty distribution")

        self.outcomes: Tuple[T, ...] = tuple(outcomes)
        self.cumulative: Tuple[float, ...] = tuple(accumulate(probabilities))

    def select(self, u: float) -> T:
        """Return the outcome selected by a uniform draw ``u`` in [0, 1)."""
        index = bisect.bisect_right(self.cumulative, u)
        return self.outcomes[min(index, len(self.outcomes) - 1)]

    def sample(self, rng: random.Random) -> T:
        return self.select(rng.random())


class Sampler(Generic[L]):
    """
    Draws sentences from a UnigramModel.

    The sampler never modifies the model. Its only mutable state is the
    random source, which belongs to the caller: two samplers given
    identically seeded sources produce identical sentences.

    Example:
        sampler = Sampler(model, random.Random(42))
        sampler.sample()
    """

    def __init__(self, model: UnigramModel[L], rng: Optional[random.Random] = None, *,
                 seed: Optional[int] = None, separator: str = DEFAULT_SEPARATOR):
        """
        Initialize the sampler.

        Args:
            model: Trained unigram model
            rng: Random source to draw from (a new one if None)
            seed: Seed for a new random source; not allowed together with rng
            separator: Text placed between generated tokens

        Raises:
            EmptyModelError: If the model observed no sentences
        """
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")

        if not model.has_sentences:
            raise EmptyModelError("Cannot sample from a model trained on zero sentences")

        lengths = model.length_distribution()
        words = model.word_distribution()
        if not words:
            raise EmptyModelError("Cannot sample from a model with an empty vocabulary")

        self.model = model
        self.rng = rng if rng is not None else random.Random(seed)
        self.separator = separator

        self._lengths = CategoricalDistribution(list(lengths), list(lengths.values()))
        self._words = CategoricalDistribution(list(words), list(words.values()))

        logger.debug("Sampler ready over %d lengths and %d word types",
                     len(lengths), len(words))

    def draw_length(self) -> int:
        return self._lengths.sample(self.rng)

    def draw_token(self) -> Token[L]:
        return self._words.sample(self.rng)

    def sample_tokens(self) -> List[Token[L]]:
        """Draw a sentence length, then that many tokens."""
        length = self.draw_length()
        return [self.draw_token() for _ in range(length)]

    def sample(self) -> str:
        """Generate one sentence as text."""
        return self.separator.join(str(token) for token in self.sample_tokens())

    def generate(self, count: Optional[int] = None) -> Iterator[str]:
        """
        Yield generated sentences.

        Args:
            count: Number of sentences (unlimited if None)
        """
        if count is not None and count < 0:
            raise ValueError("count must be non-negative")

        produced = 0
        while count is None or produced < count:
            yield self.sample()
            produced += 1
