"""Plain-text run report: the inputs followed by the matches found."""
from __future__ import annotations

from typing import Mapping, Sequence


def format_report(
    phrase_lines: Sequence[str],
    name_lines: Sequence[str],
    matches: Mapping[str, str],
) -> str:
    """Render inputs and matches, one match per line as "word - name"."""
    lines = ["We got text on input:", *phrase_lines]
    lines += ["", "And list of correct names:", *name_lines]
    lines += ["", "We've found possible names with mistakes:"]
    lines += [f"{word} - {matches[word]}" for word in sorted(matches)]
    return "\n".join(lines)
