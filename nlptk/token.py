"""
Tokens

A token is a single word or punctuation unit taken from a corpus. Tokens are
parameterized by their language tag, which exists only for the type checker:
two tokens with the same text compare equal and hash alike.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Type

from .language import L, M


class TokenKind(str, Enum):
    """Kinds of token."""
    WORD = "word"         # Text actually present in a document
    NULL = "null"         # Sentence-boundary padding
    UNKNOWN = "unknown"   # Replacement for out-of-vocabulary words


@dataclass(frozen=True, order=True)
class Token(Generic[L]):
    """
    An immutable, language-tagged unit of text.

    Attributes:
        text: The characters of the token (empty for NULL and UNKNOWN)
        kind: Whether this is a word, padding, or an unknown-word marker
    """
    text: str
    kind: TokenKind = TokenKind.WORD

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    def loan(self, target: Type[M]) -> "Token[M]":
        """
        Produce the same token as if it belonged to another language.

        Args:
            target: Language tag the returned token is typed with

        Returns:
            A token with identical text and kind
        """
        return Token(self.text, self.kind)

    def __str__(self) -> str:
        if self.kind is TokenKind.NULL:
            return "ε"
        if self.kind is TokenKind.UNKNOWN:
            return "�"
        return self.text

    def __repr__(self) -> str:
        if self.kind is TokenKind.WORD:
            return f"Token({self.text!r})"
        return f"Token.{self.kind.name}"


NULL: Token[Any] = Token("", TokenKind.NULL)
UNKNOWN: Token[Any] = Token("", TokenKind.UNKNOWN)
