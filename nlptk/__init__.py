"""
Natural Language Processing Toolkit

Language-tagged corpora and tokens, frequency counting, and a unigram
language model that can generate new sentences.
"""

from .language import Language, DefaultLanguage, English, French, language
from .token import Token, TokenKind, NULL, UNKNOWN
from .corpus import Corpus, tokenize, unigrams, bigrams, unk, padded
from .frequency import FrequencyTable, frequency
from .model import UnigramModel
from .sampler import Sampler
from .translation import TranslationTable
from .errors import NlptkError, EmptyModelError, LanguageMismatchError

__version__ = "0.1.0"
__all__ = [
    "Language", "DefaultLanguage", "English", "French", "language",
    "Token", "TokenKind", "NULL", "UNKNOWN",
    "Corpus", "tokenize", "unigrams", "bigrams", "unk", "padded",
    "FrequencyTable", "frequency",
    "UnigramModel", "Sampler", "TranslationTable",
    "NlptkError", "EmptyModelError", "LanguageMismatchError",
]
