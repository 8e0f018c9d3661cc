"""Slug option model.

Responsibilities:
- Define the tunable slug policy as an immutable dataclass.
- Provide copy-with-overrides construction for per-call variations.

Key types:
- `SlugOptions`: policy knobs consumed by `slugify_with`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


DEFAULT_SEPARATOR = "-"
ALLOWED_SEPARATORS = frozenset({"-", "_", "+", "~"})
DEFAULT_MAX_LEN_BYTES = 255
DEFAULT_FALLBACK = "file"


@dataclass(frozen=True, slots=True)
class SlugOptions:
    """Policy knobs for one slug conversion.

    No validation happens here; the slugifier sanitizes `separator` and treats
    `max_len_bytes` as a plain byte cap.

    Attributes:
        separator: Character placed between words, one of `- _ + ~`.
        lowercase: Lowercase ASCII output (and passthrough Unicode output).
        max_len_bytes: Maximum UTF-8 byte length of the result.
        allow_unicode: Keep Unicode letters/digits when the capability is present.
        keep_underscore: Keep `_` as-is instead of treating it as a boundary.
        avoid_leading_dot: Prefix `_` to names that would start with `.`.
        fallback: Name used when the result would be empty, `.` or `..`.
    """

    separator: str = DEFAULT_SEPARATOR
    lowercase: bool = True
    max_len_bytes: int = DEFAULT_MAX_LEN_BYTES
    allow_unicode: bool = False
    keep_underscore: bool = True
    avoid_leading_dot: bool = True
    fallback: str = DEFAULT_FALLBACK

    def with_overrides(self, **changes: object) -> SlugOptions:
        """Return a copy with selected fields replaced."""

        return replace(self, **changes)


DEFAULT_OPTIONS = SlugOptions()
