"""
Language Tags

Corpora and tokens are parameterized by a language tag class. The tag is a
marker: it is never instantiated and carries no data, it only lets a static
type checker tell a ``Corpus[English]`` apart from a ``Corpus[French]``.

Python erases type arguments at runtime, so containers also keep a reference
to their tag class and compare it when two of them are combined.
"""

from typing import Type, TypeVar

from .errors import LanguageMismatchError


class Language:
    """Base class of every language tag."""

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a language tag and cannot be instantiated")


def language(name: str) -> Type[Language]:
    """
    Create a new language tag class at runtime.

    Args:
        name: Name of the language (e.g. ``"Fthishr"``)

    Returns:
        A fresh subclass of :class:`Language`
    """
    if not name.isidentifier():
        raise ValueError(f"Invalid language name: {name!r}")
    return type(name, (Language,), {"__module__": __name__})


class DefaultLanguage(Language):
    """Tag used when the language of a text is not specified."""


class English(Language):
    pass


class French(Language):
    pass


L = TypeVar("L", bound=Language)
M = TypeVar("M", bound=Language)


def check_same_language(left: Type[Language], right: Type[Language]) -> None:
    """Raise LanguageMismatchError unless both tags are the same class."""
    if left is not right:
        raise LanguageMismatchError(
            f"Cannot combine {left.__name__} data with {right.__name__} data"
        )
