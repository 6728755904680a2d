"""
address_normalization.py

Canonical spelling for the free-text parts of an address.

Two records that name the same place but differ only in case, stray
punctuation or abbreviation periods must produce identical strings here,
since the normalized (address line, city, state) triple is the household
grouping key.

    unify_address_line("123 main st., apt. 200")  -> "123 Main St Apt 200"
    capitalize("123 main st.")                   -> "123 Main St."
    normalize_state("wa")                        -> "WA"
"""

from __future__ import annotations

import re

# Removed outright, not replaced by a space
_DROPPED_CHARS_RE = re.compile(r"[,;/]")
_HYPHEN_RE = re.compile(r"-")
_TRAILING_PERIOD_RE = re.compile(r"\.$")


def _capitalize_word(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


def capitalize(text: str) -> str:
    """
    Upper-case the first character of every whitespace-separated word and
    lower-case the rest. Runs of whitespace collapse to a single space.

    Punctuation inside a word is left alone.
    """
    return " ".join(_capitalize_word(word) for word in text.split())


def unify_address_line(text: str) -> str:
    """
    Bring an address line to a unified, capitalized form.

    - ``,`` ``;`` ``/`` are removed
    - ``-`` becomes a space
    - one trailing ``.`` is stripped from each word
    - every word is capitalized
    """
    text = _DROPPED_CHARS_RE.sub("", text)
    text = _HYPHEN_RE.sub(" ", text)

    words = [_TRAILING_PERIOD_RE.sub("", word) for word in text.split()]
    return " ".join(_capitalize_word(word) for word in words if word)


def normalize_state(text: str) -> str:
    """Upper-case the state token. No validation against real state codes."""
    return text.upper()
