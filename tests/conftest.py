"""Shared fixtures for the nlptk test suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from nlptk import Corpus, English


@pytest.fixture
def cat_corpus() -> Corpus:
    return Corpus.from_text("the cat sat. the dog ran.", English)


@pytest.fixture
def mixed_length_corpus() -> Corpus:
    """One sentence of three tokens and one of five."""
    return Corpus.from_text("a b .\nc d e f !", English)
