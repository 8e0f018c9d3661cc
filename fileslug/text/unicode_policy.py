"""Unicode passthrough policy for non-ASCII alphanumerics."""

from __future__ import annotations

import regex

# Alphabetic covers Other_Alphabetic too: Brahmic vowel signs, circled letters.
_ALPHANUMERIC_RE = regex.compile(r"[\p{Alphabetic}\p{N}]")


def passthrough(character: str, lowercase: bool) -> str | None:
    """Return the preserved form of a Unicode letter or digit, or `None`.

    Lowercasing uses the full Unicode mapping, so one character may expand to
    several (for example `İ` becomes `i` plus a combining dot).
    """

    if _ALPHANUMERIC_RE.fullmatch(character) is None:
        return None
    if lowercase:
        return character.lower()
    return character
