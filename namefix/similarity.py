"""Word similarity primitives: Soundex agreement and Jaro-Winkler ratio.

Soundex folds case; Jaro-Winkler compares characters as given.
"""
from __future__ import annotations

import logging

import jellyfish
from rapidfuzz.distance import JaroWinkler

logger = logging.getLogger(__name__)

SOUNDEX_LENGTH = 4


def soundex_code(word: str) -> str:
    """Encode a word with American Soundex.

    Returns:
        Four symbol code such as "J500", or "" for an empty word
    """
    if not word:
        return ""
    return jellyfish.soundex(word.upper())


def phonetic_common_units(a: str, b: str) -> int:
    """Count the Soundex positions on which two words agree.

    The more two words sound alike, the higher the count. A word that
    cannot be encoded counts as sharing nothing.

    Args:
        a: First word
        b: Second word

    Returns:
        Number of agreeing code positions, from 0 to 4
    """
    try:
        code_a = soundex_code(a)
        code_b = soundex_code(b)
    except (ValueError, TypeError) as e:
        logger.warning(f"Soundex encoding failed for {a!r}/{b!r}: {e}")
        return 0

    return sum(
        1
        for left, right in zip(code_a[:SOUNDEX_LENGTH], code_b[:SOUNDEX_LENGTH])
        if left == right
    )


def similarity_ratio(a: str, b: str) -> float:
    """Jaro-Winkler similarity between two words.

    The closer the words, the closer the ratio is to 1.0; the more edits
    needed to make them equal, the closer it is to 0.0.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return JaroWinkler.similarity(a, b)
