"""
Translation Tables

A translation table scores pairs of tokens from two languages. It is
parameterized by a source and a target language tag, in that order, so a
type checker rejects lookups with the two tokens swapped.
"""

from typing import Dict, Generic, Iterator, List, Mapping, Optional, Tuple, Type

from .language import L, M, check_same_language
from .token import Token


class TranslationTable(Generic[L, M]):
    """
    Scores of (source token, target token) pairs.

    Pairs that were never set score 0.0, meaning "unrepresented" rather
    than an estimate.

    Example:
        table: TranslationTable[French, English] = TranslationTable(French, English)
        table.set(Token("chien"), Token("dog"), 0.9)
        table.get(Token("chien"), Token("dog"))  # 0.9
    """

    def __init__(self, source: Type[L], target: Type[M],
                 scores: Optional[Mapping[Tuple[Token[L], Token[M]], float]] = None):
        self._source = source
        self._target = target
        self._scores: Dict[Tuple[Token[L], Token[M]], float] = {}
        for (source_token, target_token), score in (scores or {}).items():
            self.set(source_token, target_token, score)

    @property
    def source(self) -> Type[L]:
        return self._source

    @property
    def target(self) -> Type[M]:
        return self._target

    def set(self, source: Token[L], target: Token[M], score: float) -> None:
        if score < 0:
            raise ValueError(f"Scores must be non-negative, got {score}")
        self._scores[(source, target)] = score

    def get(self, source: Token[L], target: Token[M]) -> float:
        return self._scores.get((source, target), 0.0)

    def translations(self, source: Token[L]) -> List[Tuple[Token[M], float]]:
        """Return the target tokens scored for ``source``, best first."""
        candidates = [(t, score) for (s, t), score in self._scores.items() if s == source]
        candidates.sort(key=lambda x: x[1], reverse=True)
        return candidates

    def inverted(self) -> "TranslationTable[M, L]":
        """Return the same scores keyed by (target, source)."""
        return TranslationTable(
            self.target, self.source,
            {(t, s): score for (s, t), score in self._scores.items()},
        )

    def update(self, other: "TranslationTable[L, M]") -> None:
        """Copy every score of another table with the same language pair."""
        check_same_language(self.source, other.source)
        check_same_language(self.target, other.target)
        self._scores.update(other._scores)

    def __contains__(self, pair: object) -> bool:
        return pair in self._scores

    def __iter__(self) -> Iterator[Tuple[Token[L], Token[M]]]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        return (f"TranslationTable[{self.source.__name__}, {self.target.__name__}]"
                f"(pairs={len(self)})")
