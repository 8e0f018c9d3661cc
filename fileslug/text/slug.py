"""Filesystem-safe slug conversion.

Responsibilities:
- Classify every input character once and build the slug incrementally.
- Enforce filename validity afterwards: trimming, fallback names, hidden-file
  and reserved-name avoidance, and a UTF-8 byte cap.

Key public functions:
- `slugify`: convert with default options and capabilities.
- `slugify_with`: convert with caller-supplied options and capabilities.

Neither function raises; every string input yields a usable name.
"""

from __future__ import annotations

from ..features import DEFAULT_FEATURES, SlugFeatures
from ..options import DEFAULT_FALLBACK, DEFAULT_OPTIONS, SlugOptions
from ..telemetry.logger import slug_events
from .classify import (
    is_ascii_alphanumeric,
    is_forbidden_filename_char,
    is_windows_reserved_name,
    sanitize_separator,
)
from .translit import transliterate
from .unicode_policy import passthrough

_DOT_NAMES = frozenset({"", ".", ".."})


class _SlugBuffer:
    """Growable slug output that collapses boundary runs into one separator."""

    def __init__(self, separator: str, lowercase: bool, keep_underscore: bool) -> None:
        """Initialize an empty buffer; leading boundaries are suppressed."""

        self._parts: list[str] = []
        self._separator = separator
        self._lowercase = lowercase
        self._keep_underscore = keep_underscore
        self._last_was_separator = True

    def append(self, text: str) -> None:
        """Append word text and leave boundary state."""

        self._parts.append(text)
        self._last_was_separator = False

    def push_boundary(self) -> None:
        """Emit one separator unless the buffer is empty or already ends in one."""

        if not self._last_was_separator and self._parts:
            self._parts.append(self._separator)
            self._last_was_separator = True

    def push_word_character(self, character: str) -> bool:
        """Append an ASCII alphanumeric or kept underscore; return whether it was kept."""

        if is_ascii_alphanumeric(character):
            self.append(character.lower() if self._lowercase else character)
            return True
        if character == "_" and self._keep_underscore:
            self.append(character)
            return True
        return False

    def push_replacement(self, replacement: str) -> bool:
        """Re-scan transliterated text; return whether any character was kept."""

        appended = False
        for character in replacement:
            if self.push_word_character(character):
                appended = True
            else:
                self.push_boundary()
        return appended

    def text(self) -> str:
        """Return the accumulated slug text."""

        return "".join(self._parts)


def slugify(value: str) -> str:
    """Convert text into a filesystem-safe slug using default options.

    Examples:
        >>> slugify("Hello, world!")
        'hello-world'
        >>> slugify("a/b\\\\c")
        'a-b-c'
    """

    return slugify_with(value, DEFAULT_OPTIONS)


def slugify_with(
    value: str,
    options: SlugOptions,
    *,
    features: SlugFeatures = DEFAULT_FEATURES,
) -> str:
    """Convert text into a filesystem-safe slug.

    Args:
        value: Arbitrary input text.
        options: Slug policy for this call.
        features: Optional character policies available to this call.

    Returns:
        A non-empty name without leading or trailing separators, dots or
        spaces, never a Windows reserved device name, and at most
        `options.max_len_bytes` UTF-8 bytes unless the cap is too small to keep
        even one character, in which case the whole fallback is returned.
    """

    separator = sanitize_separator(options.separator)
    fallback = _resolve_fallback(options.fallback)
    allow_unicode = features.unicode and options.allow_unicode
    buffer = _SlugBuffer(separator, options.lowercase, options.keep_underscore)

    for character in value:
        if is_forbidden_filename_char(character):
            buffer.push_boundary()
            continue

        if buffer.push_word_character(character):
            continue

        if allow_unicode:
            kept = passthrough(character, options.lowercase)
            if kept is not None:
                buffer.append(kept)
                continue

        if features.transliterate:
            replacement = transliterate(character, options.lowercase)
            if replacement == "":
                continue
            if replacement is not None and buffer.push_replacement(replacement):
                continue

        # Separator-ish punctuation, whitespace and unknown characters alike.
        buffer.push_boundary()

    slug = _trim_end(buffer.text(), separator)
    slug = slug.lstrip(separator)

    if slug in _DOT_NAMES:
        slug_events.log_fallback(reason="empty")
        slug = fallback

    if options.avoid_leading_dot and slug.startswith("."):
        slug_events.log_leading_dot()
        slug = f"_{slug}"

    if is_windows_reserved_name(slug):
        slug_events.log_reserved_name()
        slug = f"_{slug}"

    slug = _trim_end(_truncate_utf8(slug, options.max_len_bytes), separator)

    # Truncation can itself produce a device name ("console" capped at 3 bytes).
    if is_windows_reserved_name(slug):
        slug_events.log_reserved_name()
        slug = _trim_end(_truncate_utf8(f"_{slug}", options.max_len_bytes), separator)

    if slug in _DOT_NAMES:
        slug_events.log_fallback(reason="truncated")
        slug = fallback

    return slug


def _resolve_fallback(fallback: object) -> str:
    """Return a usable fallback name, substituting the default for unusable ones."""

    if not isinstance(fallback, str) or fallback in _DOT_NAMES:
        return DEFAULT_FALLBACK
    return fallback


def _trim_end(value: str, separator: str) -> str:
    """Strip trailing separators, dots, and spaces (invalid at the end on Windows)."""

    return value.rstrip(f"{separator}. ")


def _truncate_utf8(value: str, max_len_bytes: int) -> str:
    """Cut `value` to at most `max_len_bytes` UTF-8 bytes on a code point boundary."""

    encoded = value.encode("utf-8")
    if len(encoded) <= max_len_bytes:
        return value

    slug_events.log_truncated(original_bytes=len(encoded), max_len_bytes=max_len_bytes)
    # A cut inside a multi-byte sequence leaves an incomplete tail, which is dropped.
    return encoded[: max(max_len_bytes, 0)].decode("utf-8", errors="ignore")
