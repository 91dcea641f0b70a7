# keyword_grouper/modules/grouping/normalizer.py
"""
Keyword normalization applied before similarity scoring.

Normalization is an ordered list of pure string steps; `normalize_keyword`
runs them in sequence. Case is left untouched (scoring lower-cases).
"""

import re
from typing import Callable, List

_WHITESPACE = re.compile(r"\s+")

# "d'une" prima di "d'un": altrimenti resterebbe una "e" isolata
CONTRACTIONS = ("d'une", "d'un")

# articoli/preposizioni isolati sostituiti da uno spazio
ISOLATED_TOKENS = (" à ", " a ")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def remove_contractions(text: str) -> str:
    """Plain substring removal, no word-boundary check."""
    for contraction in CONTRACTIONS:
        text = text.replace(contraction, "")
    return text


def remove_isolated_tokens(text: str) -> str:
    for token in ISOLATED_TOKENS:
        text = text.replace(token, " ")
    return text


NORMALIZATION_STEPS: List[Callable[[str], str]] = [
    collapse_whitespace,
    remove_contractions,
    remove_isolated_tokens,
    collapse_whitespace,
]


def normalize_keyword(text: str, steps: List[Callable[[str], str]] = NORMALIZATION_STEPS) -> str:
    for step in steps:
        text = step(text)
    return text
