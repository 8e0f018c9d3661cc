"""Character classification rules for filename-safe slugs.

Responsibilities:
- Classify single characters as forbidden or ASCII alphanumeric.
- Sanitize the configured separator.
- Detect Windows reserved device names.
"""

from __future__ import annotations

import unicodedata

from ..options import ALLOWED_SEPARATORS, DEFAULT_SEPARATOR


_FORBIDDEN_FILENAME_CHARACTERS = frozenset('<>:"/\\|?*\0')
_WINDOWS_RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{digit}" for digit in range(1, 10)}
    | {f"LPT{digit}" for digit in range(1, 10)}
)


def sanitize_separator(separator: object) -> str:
    """Return `separator` when it is an allowed separator, else the default `-`."""

    if isinstance(separator, str) and separator in ALLOWED_SEPARATORS:
        return separator
    return DEFAULT_SEPARATOR


def is_forbidden_filename_char(character: str) -> bool:
    """Return whether a character is invalid in Windows filenames or a control code."""

    return (
        character in _FORBIDDEN_FILENAME_CHARACTERS
        or unicodedata.category(character) == "Cc"
    )


def is_ascii_alphanumeric(character: str) -> bool:
    """Return whether a character is `[A-Za-z0-9]`."""

    return character.isascii() and character.isalnum()


def is_windows_reserved_name(name: str) -> bool:
    """Return whether `name` is a reserved device name (`CON`, `COM1`, ...).

    Only `COM`/`LPT` followed by a single digit 1-9 are reserved; `COM0` and
    `LPT10` are ordinary names.
    """

    return _ascii_upper(name) in _WINDOWS_RESERVED_NAMES


def _ascii_upper(value: str) -> str:
    """Uppercase ASCII letters only, leaving other characters untouched."""

    return "".join(
        character.upper() if character.isascii() else character for character in value
    )
