"""Tokenization and suffix-stripping stemming for keyword extraction."""
from __future__ import annotations

import re
from collections.abc import Iterable

from seo_inspector.keywords.stopwords import STOPWORDS_EN

# Ordered longest-first; only the first applicable rule is used
STEM_SUFFIXES = ("ment", "tion", "ing", "ed", "er", "ly", "es", "s")

_NON_WORD = re.compile(r"[^\w\s]")


def clean_token(token: str) -> str:
    """Strip non-word characters and lowercase."""
    return _NON_WORD.sub("", token).strip().lower()


def tokenize(text: str | None) -> list[str]:
    """Split on whitespace and clean; empty tokens are dropped."""
    if not text:
        return []
    return [cleaned for cleaned in (clean_token(t) for t in text.split()) if cleaned]


def is_stopword(word: str, stopwords: Iterable[str] = STOPWORDS_EN) -> bool:
    return word in stopwords


def stem(word: str, min_stem_length: int = 1) -> str:
    """Crude stem: drop the first matching suffix from ``STEM_SUFFIXES``.

    Only the first suffix the word ends with is considered. It is stripped if
    at least ``min_stem_length`` characters remain, otherwise the word is
    returned as is. This is not a lemmatizer: "running" becomes "runn".
    """
    for suffix in STEM_SUFFIXES:
        if word.endswith(suffix):
            if len(word) - len(suffix) >= min_stem_length:
                return word[: -len(suffix)]
            return word
    return word


def stem_set(text: str | None, min_stem_length: int = 1) -> set[str]:
    """Stems of every token in ``text``."""
    return {stem(token, min_stem_length) for token in tokenize(text)}
