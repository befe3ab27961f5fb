"""Exceptions raised by the toolkit."""


class NlptkError(Exception):
    """Base class for all toolkit errors."""


class EmptyModelError(NlptkError, ValueError):
    """
    Raised when sampling from a model that observed no sentences.

    A model trained on an empty corpus has no sentence-length distribution,
    so there is no length to draw.
    """


class LanguageMismatchError(NlptkError, TypeError):
    """Raised when data tagged with two different languages is combined."""
