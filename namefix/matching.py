"""Matching pipeline: capitalized phrase words -> closest reference name word.

A word is proposed as a misspelling of a reference name only when it
starts with an uppercase letter, is not "I", and clears both gates:
Soundex agreement on more than half of the code and a Jaro-Winkler
similarity above the configured ratio.

Multi-word names are scored against the phrase words around the
candidate, aligned position by position, so that e.g. "Jon" next to
"Hamm" and "John" next to "Nolan" are told apart.

Cost is O(names words * phrase words) similarity calls per phrase.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .config import MatcherSettings, settings as app_settings
from .similarity import phonetic_common_units, similarity_ratio

logger = logging.getLogger(__name__)

ReferenceName = Sequence[str]
Phrase = Sequence[str]


def is_candidate(word: str) -> bool:
    """Check whether a phrase word is eligible for matching."""
    return bool(word) and word[0].isupper() and word != "I"


def first_positions(phrase: Phrase) -> dict[str, int]:
    """Map each word text to the index of its first occurrence in the phrase.

    A repeated word is always aligned at its first occurrence.
    """
    positions: dict[str, int] = {}
    for index, word in enumerate(phrase):
        positions.setdefault(word, index)
    return positions


def alignment_window(phrase: Phrase, position: int, size: int) -> list[str | None]:
    """Select the phrase words a multi-word name is compared against.

    Candidates within the first ``size`` words use the phrase head;
    later ones use the ``size`` words that precede them.

    Args:
        phrase: Words of the phrase
        position: Index of the candidate word
        size: Number of words in the reference name

    Returns:
        ``size`` entries; positions falling outside the phrase are None
    """
    start = 0 if position < size else position - size
    return [
        phrase[index] if 0 <= index < len(phrase) else None
        for index in range(start, start + size)
    ]


def score_name(name: ReferenceName, word: str, window: Sequence[str | None]) -> float:
    """Score one reference name against a candidate word.

    Single-word names compare directly with the candidate. Longer names
    average the per-position similarity over the alignment window, with
    missing positions contributing 0.0.
    """
    if len(name) == 1:
        return similarity_ratio(name[0], word)

    total = 0.0
    for name_part, phrase_part in zip(name, window):
        if phrase_part is not None:
            total += similarity_ratio(name_part, phrase_part)
    return total / len(name)


def score_reference_words(
    names: Sequence[ReferenceName],
    phrase: Phrase,
    word: str,
    position: int,
) -> dict[str, float]:
    """Best score for every distinct reference word text against a candidate.

    Words are pooled by text across all names; each keeps the highest
    score of any name it appears in.
    """
    scores: dict[str, float] = {}
    for name in names:
        if not name:
            continue

        window = alignment_window(phrase, position, len(name))
        name_score = score_name(name, word, window)

        for name_word in name:
            scores[name_word] = max(scores.get(name_word, 0.0), name_score)
    return scores


def passes_gate(word: str, name_word: str, matcher: MatcherSettings) -> bool:
    """Apply the phonetic and lexical acceptance thresholds."""
    return (
        phonetic_common_units(word, name_word) > matcher.phonetic_threshold
        and similarity_ratio(word, name_word) > matcher.similarity_threshold
    )


def resolve_candidate(
    names: Sequence[ReferenceName],
    phrase: Phrase,
    word: str,
    position: int,
    matcher: MatcherSettings,
) -> str | None:
    """Pick the reference word a candidate most likely misspells.

    All reference words sharing the top score are tried in lexicographic
    order; the last one to pass the gate wins.

    Returns:
        Matching reference word, or None if no top scorer passes the gate
    """
    scores = score_reference_words(names, phrase, word, position)
    if not scores:
        return None

    best_score = max(scores.values())
    match = None
    for name_word in sorted(w for w, s in scores.items() if s == best_score):
        if passes_gate(word, name_word, matcher):
            match = name_word
    return match


def find_matches(
    names: Sequence[ReferenceName],
    phrases: Sequence[Phrase],
    *,
    settings: MatcherSettings | None = None,
) -> dict[str, str]:
    """Find likely misspelled names in phrases.

    Args:
        names: Reference names, each a sequence of words
        phrases: Phrases, each a sequence of words, tokenized like names
        settings: Gate thresholds (uses config default if None)

    Returns:
        Mapping of candidate word to matched reference word. A word seen
        again in a later position or phrase takes the later result.
    """
    matcher = settings or app_settings.matcher
    matches: dict[str, str] = {}

    for phrase in phrases:
        positions = first_positions(phrase)

        for word in phrase:
            if not is_candidate(word):
                continue

            match = resolve_candidate(names, phrase, word, positions[word], matcher)
            if match is not None:
                logger.debug(f"Matched {word!r} -> {match!r}")
                matches[word] = match

    logger.info(
        f"Found {len(matches)} matches in {len(phrases)} phrases "
        f"against {len(names)} names"
    )
    return matches
