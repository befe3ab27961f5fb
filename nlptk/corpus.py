"""
Corpus Loading and Tokenization

This module turns raw text into a language-tagged Corpus: an ordered
sequence of tokens together with the spans of the sentences they form.
It also provides the token-stream helpers used when preparing a corpus
for counting, and access to the NLTK Brown corpus as a training source.
"""

import logging
import re
from itertools import pairwise
from pathlib import Path
from typing import (
    IO, Collection, Generic, Iterable, Iterator, List, Optional, Tuple, Type,
    Union, overload,
)

import nltk
from nltk.corpus import brown

from .language import L
from .token import NULL, UNKNOWN, Token


logger = logging.getLogger(__name__)

# Punctuation that closes a sentence
SENTENCE_TERMINALS = frozenset({".", "!", "?"})

# Separator used when re-joining tokens into text
DEFAULT_SEPARATOR = " "

# A word is a run of word characters, optionally joined by internal
# apostrophes or hyphens; any other visible character stands alone.
_TOKEN_PATTERN = re.compile(r"\w+(?:['’\-]\w+)*|[^\w\s]")

Span = Tuple[int, int]

# A pair of adjacent tokens of the same language
Bigram = Tuple[Token[L], Token[L]]


class Corpus(Generic[L]):
    """
    An ordered, language-homogeneous sequence of tokens.

    A corpus keeps the text it was built from, the tokens extracted from it
    (with the character offset of each), and the sentence spans as half-open
    ranges of token indices. It is immutable once built.

    Example:
        english = Corpus.from_text("The soup pleased the dog.", English)
        english.token_count()     # 6
        english.sentence_lengths()  # [6]
    """

    def __init__(self, language: Type[L], text: str,
                 tokens: Iterable[Token[L]],
                 spans: Iterable[Span],
                 offsets: Optional[Iterable[int]] = None):
        """
        Initialize a corpus from already tokenized data.

        Most callers want :meth:`from_text` instead.

        Args:
            language: Language tag of every token
            text: The backing text
            tokens: Tokens in document order
            spans: Sentence spans as (start, end) token indices
            offsets: Character offset of each token in ``text``
        """
        self._language = language
        self._text = text
        self._tokens: Tuple[Token[L], ...] = tuple(tokens)
        self._spans: Tuple[Span, ...] = tuple(spans)
        self._offsets: Tuple[int, ...] = tuple(offsets) if offsets is not None else ()

        if self._offsets and len(self._offsets) != len(self._tokens):
            raise ValueError("offsets must have one entry per token")

        previous_end = 0
        for start, end in self._spans:
            if not previous_end <= start < end <= len(self._tokens):
                raise ValueError(f"Invalid sentence span: {(start, end)}")
            previous_end = end

    @property
    def language(self) -> Type[L]:
        return self._language

    @classmethod
    def from_text(cls, text: str, language: Type[L], *,
                  lowercase: bool = False,
                  terminals: Collection[str] = SENTENCE_TERMINALS) -> "Corpus[L]":
        """
        Tokenize raw text into a corpus.

        Args:
            text: Raw input text
            language: Language tag of the text
            lowercase: Whether to lowercase every token
            terminals: Punctuation marks that end a sentence

        Returns:
            The tokenized corpus (empty when the text has no tokens)
        """
        tokens, spans, offsets = tokenize(text, lowercase=lowercase, terminals=terminals)
        corpus = cls(language, text, tokens, spans, offsets)
        logger.debug("Tokenized %d characters into %d tokens and %d sentences",
                     len(text), corpus.token_count(), corpus.sentence_count())
        return corpus

    @classmethod
    def from_stream(cls, stream: IO, language: Type[L], **kwargs) -> "Corpus[L]":
        """
        Read a stream to its end and tokenize what was read.

        Binary streams are decoded as UTF-8, replacing undecodable bytes.
        """
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        return cls.from_text(data, language, **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path], language: Type[L], **kwargs) -> "Corpus[L]":
        """Read and tokenize a text file."""
        path = Path(path)
        with open(path, "rb") as f:
            return cls.from_stream(f, language, **kwargs)

    def tokens(self) -> Tuple[Token[L], ...]:
        """Return all tokens in document order."""
        return self._tokens

    # Alias
    words = tokens

    def offsets(self) -> Tuple[int, ...]:
        """Return the character offset of each token in the backing text."""
        return self._offsets

    def sentence_spans(self) -> Tuple[Span, ...]:
        return self._spans

    def sentences(self) -> List[Tuple[Token[L], ...]]:
        """Return each sentence as a tuple of tokens."""
        return [self._tokens[start:end] for start, end in self._spans]

    def sentence_lengths(self) -> List[int]:
        return [end - start for start, end in self._spans]

    def token_count(self) -> int:
        return len(self._tokens)

    def sentence_count(self) -> int:
        return len(self._spans)

    @property
    def raw_text(self) -> str:
        return self._text

    def text(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Return the normalized text: all tokens joined by ``separator``."""
        return separator.join(str(token) for token in self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token[L]]:
        return iter(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token[L]: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Token[L], ...]: ...

    def __getitem__(self, index):
        return self._tokens[index]

    def __repr__(self) -> str:
        return (f"Corpus[{self.language.__name__}]"
                f"(tokens={self.token_count()}, sentences={self.sentence_count()})")


def tokenize(text: str, lowercase: bool = False,
             terminals: Collection[str] = SENTENCE_TERMINALS
             ) -> Tuple[List[Token], List[Span], List[int]]:
    """
    Split text into tokens and sentence spans.

    A sentence closes after a terminal mark. Adjacent terminals ("?!") stay
    in the same sentence, and text after the last terminal forms a final
    sentence closed at end of input.

    Args:
        text: Raw input text
        lowercase: Whether to lowercase every token
        terminals: Punctuation marks that end a sentence

    Returns:
        Tuple of (tokens, sentence spans, token character offsets)
    """
    tokens: List[Token] = []
    spans: List[Span] = []
    offsets: List[int] = []

    start = 0
    pending_close = False

    for match in _TOKEN_PATTERN.finditer(text):
        piece = match.group()

        if pending_close and piece not in terminals:
            spans.append((start, len(tokens)))
            start = len(tokens)
            pending_close = False

        tokens.append(Token(piece.lower() if lowercase else piece))
        offsets.append(match.start())

        if piece in terminals:
            pending_close = True

    if start < len(tokens):
        spans.append((start, len(tokens)))

    return tokens, spans, offsets


def unigrams(words: Iterable[Token[L]]) -> Iterator[Token[L]]:
    """Return the token stream unchanged, one unigram per token."""
    return iter(words)


def bigrams(words: Iterable[Token[L]]) -> Iterator[Bigram[L]]:
    """
    Yield every pair of adjacent tokens in the stream.

    Combine with :func:`padded` to include sentence-boundary pairs.
    """
    return pairwise(words)


def unk(words: Iterable[Token[L]], vocabulary: Collection[Token[L]]) -> Iterator[Token[L]]:
    """
    Replace every token not in ``vocabulary`` with the UNKNOWN token.

    Args:
        words: Token stream
        vocabulary: Known tokens

    Yields:
        Each token, or UNKNOWN for out-of-vocabulary tokens
    """
    for word in words:
        yield word if word in vocabulary else UNKNOWN


def padded(corpus: Corpus[L]) -> Iterator[Token[L]]:
    """
    Yield every token of the corpus with NULL inserted at sentence boundaries.

    The stream starts with NULL and has a NULL after each sentence.
    """
    yield NULL
    for sentence in corpus.sentences():
        yield from sentence
        yield NULL


def ensure_nltk_data():
    """Download the Brown corpus if it is not present."""
    try:
        nltk.data.find('corpora/brown')
    except LookupError:
        logger.info("Downloading Brown corpus...")
        nltk.download('brown', quiet=True)


def load_brown_corpus(language: Type[L], categories: Optional[List[str]] = None,
                      lowercase: bool = False) -> Corpus[L]:
    """
    Load the Brown corpus, keeping its own tokenization and sentence splits.

    Each Brown sentence becomes one sentence span, so decimals and
    abbreviations do not split sentences and headlines without a final
    mark stay separate. The backing text holds one sentence per line.

    Args:
        language: Language tag of the corpus
        categories: Optional list of Brown corpus categories to load
                   (e.g., ['news', 'fiction']). If None, loads all categories.
        lowercase: Whether to lowercase every token

    Returns:
        The Brown corpus as a Corpus
    """
    ensure_nltk_data()

    if categories:
        sents = brown.sents(categories=categories)
    else:
        sents = brown.sents()

    tokens: List[Token[L]] = []
    spans: List[Span] = []
    offsets: List[int] = []
    lines: List[str] = []
    position = 0

    for sent in sents:
        if not sent:
            continue
        start = len(tokens)
        for word in sent:
            tokens.append(Token(word.lower() if lowercase else word))
            offsets.append(position)
            # Words are followed by a separator or, at the end of a line, a newline
            position += len(word) + 1
        spans.append((start, len(tokens)))
        lines.append(" ".join(sent))

    corpus = Corpus(language, "\n".join(lines), tokens, spans, offsets)
    logger.debug("Loaded Brown corpus: %d tokens in %d sentences",
                 corpus.token_count(), corpus.sentence_count())
    return corpus


def get_brown_categories() -> List[str]:
    """Return list of available Brown corpus categories."""
    ensure_nltk_data()
    return brown.categories()
