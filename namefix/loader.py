"""Input loading: reference names and phrases from line-oriented text files.

Each line is stripped of everything but ASCII letters and spaces, trimmed,
and split into words. Names and phrases go through the same rules.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

NON_LETTERS = re.compile(r"[^a-zA-Z ]")


class LoadError(Exception):
    """Raised when an input source cannot be read."""
    pass


@dataclass
class LoadedInputs:
    """Raw lines and their tokenized form."""
    name_lines: list[str]
    phrase_lines: list[str]
    names: list[list[str]]
    phrases: list[list[str]]


def normalize_line(line: str) -> str:
    """Drop every character outside [a-zA-Z ] and trim."""
    return NON_LETTERS.sub("", line).strip()


def split_words(line: str) -> list[str]:
    """Normalize a line and split it on spaces, skipping empty tokens."""
    return [word for word in normalize_line(line).split(" ") if word]


def tokenize_lines(lines: Iterable[str]) -> list[list[str]]:
    """Split every line into its words."""
    return [split_words(line) for line in lines]


def read_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 text file into lines.

    Raises:
        LoadError: If the file is missing or unreadable
    """
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise LoadError(f"Cannot read input file {path}: {e}") from e


def load_inputs(names_path: str | Path, phrases_path: str | Path) -> LoadedInputs:
    """Load and tokenize the reference names and the phrases.

    Args:
        names_path: File with one reference name per line
        phrases_path: File with one phrase per line

    Returns:
        LoadedInputs with raw lines and word lists

    Raises:
        LoadError: If either file cannot be read
    """
    name_lines = read_lines(names_path)
    phrase_lines = read_lines(phrases_path)

    inputs = LoadedInputs(
        name_lines=name_lines,
        phrase_lines=phrase_lines,
        names=tokenize_lines(name_lines),
        phrases=tokenize_lines(phrase_lines),
    )
    logger.info(f"Loaded {len(inputs.names)} names and {len(inputs.phrases)} phrases")
    return inputs
