"""
Frequency Counting

Counts how often each distinct token occurs in a corpus.
"""

import logging
from collections import Counter
from typing import Dict, Generic, Hashable, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from .corpus import Corpus
from .language import L, check_same_language
from .token import Token


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def frequency(items: Iterable[T]) -> "Counter[T]":
    """
    Map each distinct item of a stream to the number of times it occurs.

    Items are kept in the order they were first seen.
    """
    return Counter(items)


class FrequencyTable(Generic[L]):
    """
    Occurrence counts of the distinct tokens of one language.

    The sum of all counts equals the number of tokens counted. Tokens are
    enumerated in the order they were first seen.
    """

    def __init__(self, language: Type[L], counts: Optional[Mapping[Token[L], int]] = None):
        self._language = language
        self._counts: Counter = Counter()

        for token, count in (counts or {}).items():
            if count < 0:
                raise ValueError(f"Negative count for {token!r}: {count}")
            if count:
                self._counts[token] = count

        self._total = sum(self._counts.values())

    @property
    def language(self) -> Type[L]:
        return self._language

    @classmethod
    def from_corpus(cls, corpus: Corpus[L]) -> "FrequencyTable[L]":
        """Count every token of a corpus in a single pass."""
        table = cls(corpus.language, frequency(corpus.tokens()))
        logger.debug("Counted %d tokens, %d distinct", table.total(), len(table))
        return table

    def count(self, token: Token[L]) -> int:
        """Return how often ``token`` occurred (0 if never)."""
        return self._counts.get(token, 0)

    def counts(self) -> Dict[Token[L], int]:
        return dict(self._counts)

    def tokens(self) -> List[Token[L]]:
        return list(self._counts)

    def total(self) -> int:
        return self._total

    def most_common(self, top_k: Optional[int] = None) -> List[Tuple[Token[L], int]]:
        """Get the most frequent tokens, ties in first-seen order."""
        return self._counts.most_common(top_k)

    def merge(self, other: "FrequencyTable[L]") -> "FrequencyTable[L]":
        """
        Combine the counts of two tables of the same language.

        Counting disjoint parts of a corpus separately and merging the
        results gives the same table as counting the whole corpus.

        Raises:
            LanguageMismatchError: If the tables have different languages
        """
        check_same_language(self.language, other.language)
        return FrequencyTable(self.language, self._counts + other._counts)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable[{self.language.__name__}](distinct={len(self)}, total={self._total})"
