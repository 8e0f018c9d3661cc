"""Configuration loaders for slug options.

Responsibilities:
- Build validated `SlugOptions` from caller-owned mappings or YAML text.
- Report invalid values as `SlugOptionsError` with actionable hints.

Key types:
- `OptionsLoader`: static construction helpers for `SlugOptions`.

Reading configuration files is left to the caller; loaders accept data only.
Values are taken literally: separators and fallback names are not trimmed.
"""

from __future__ import annotations

from typing import Any, Mapping

import yaml

from .errors import SlugOptionsError
from .options import ALLOWED_SEPARATORS, DEFAULT_OPTIONS, SlugOptions
from .text.classify import is_forbidden_filename_char


_BOOLEAN_KEYS = ("lowercase", "allow_unicode", "keep_underscore", "avoid_leading_dot")
_SUPPORTED_KEYS = frozenset(
    {"separator", "max_len_bytes", "fallback", *_BOOLEAN_KEYS}
)
_BOOLEAN_TOKENS = {
    "true": True,
    "yes": True,
    "on": True,
    "1": True,
    "false": False,
    "no": False,
    "off": False,
    "0": False,
}


class OptionsLoader:
    """Factory methods for creating `SlugOptions` from external data."""

    @staticmethod
    def from_yaml_text(text: str, base: SlugOptions = DEFAULT_OPTIONS) -> SlugOptions:
        """Create validated options from a YAML document.

        An empty document yields `base` unchanged.
        """

        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SlugOptionsError(
                field="<document>",
                detail=f"Invalid YAML options document: {exc}",
                hint="Verify YAML syntax.",
            ) from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise SlugOptionsError(
                field="<document>",
                detail="YAML options document must contain a top-level mapping/object.",
            )
        return OptionsLoader.from_mapping(payload, base=base)

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any], base: SlugOptions = DEFAULT_OPTIONS
    ) -> SlugOptions:
        """Create validated options by overriding `base` with mapping values."""

        OptionsLoader._validate_keys(payload)

        overrides: dict[str, object] = {}
        if "separator" in payload:
            overrides["separator"] = OptionsLoader._separator(payload["separator"])
        if "max_len_bytes" in payload:
            overrides["max_len_bytes"] = OptionsLoader._max_len_bytes(payload["max_len_bytes"])
        if "fallback" in payload:
            overrides["fallback"] = OptionsLoader._fallback(payload["fallback"])
        for key in _BOOLEAN_KEYS:
            if key in payload:
                overrides[key] = OptionsLoader._boolean(payload[key], key)

        return base.with_overrides(**overrides)

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any]) -> None:
        """Reject keys that do not name a slug option."""

        unknown = sorted(str(key) for key in set(payload).difference(_SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            supported = ", ".join(sorted(_SUPPORTED_KEYS))
            raise SlugOptionsError(
                field=unknown[0],
                detail=f"Options include unsupported key(s): {key_list}.",
                hint=f"Supported keys: {supported}.",
            )

    @staticmethod
    def _separator(raw_value: object) -> str:
        """Validate a separator against the allowed separator characters."""

        if not isinstance(raw_value, str) or raw_value not in ALLOWED_SEPARATORS:
            allowed = " ".join(sorted(ALLOWED_SEPARATORS))
            raise SlugOptionsError(
                field="separator",
                detail=f"`separator` must be exactly one of: {allowed}.",
                hint="Quote the separator in YAML and leave out surrounding spaces.",
            )
        return raw_value

    @staticmethod
    def _max_len_bytes(raw_value: object) -> int:
        """Validate the byte cap as a positive integer (ints or decimal digits)."""

        parsed: int | None = None
        if isinstance(raw_value, int) and not isinstance(raw_value, bool):
            parsed = raw_value
        elif isinstance(raw_value, str) and raw_value.isascii() and raw_value.isdigit():
            parsed = int(raw_value)

        if parsed is None or parsed <= 0:
            raise SlugOptionsError(
                field="max_len_bytes",
                detail="`max_len_bytes` must be a positive integer.",
                hint="Most filesystems cap names at 255 bytes.",
            )
        return parsed

    @staticmethod
    def _fallback(raw_value: object) -> str:
        """Validate the fallback name, which is returned verbatim by the slugifier."""

        if not isinstance(raw_value, str) or not raw_value.strip() or raw_value in {".", ".."}:
            raise SlugOptionsError(
                field="fallback",
                detail="`fallback` must be a non-empty name other than `.` or `..`.",
            )
        if raw_value != raw_value.strip():
            raise SlugOptionsError(
                field="fallback",
                detail="`fallback` must not start or end with whitespace.",
            )
        forbidden = sorted({repr(ch) for ch in raw_value if is_forbidden_filename_char(ch)})
        if forbidden:
            raise SlugOptionsError(
                field="fallback",
                detail=(
                    "`fallback` contains character(s) invalid in filenames: "
                    f"{', '.join(forbidden)}."
                ),
                hint='Avoid < > : " / \\ | ? * and control characters.',
            )
        return raw_value

    @staticmethod
    def _boolean(raw_value: object, field_name: str) -> bool:
        """Parse a boolean option from a bool or a case-insensitive token."""

        if isinstance(raw_value, bool):
            return raw_value
        token = str(raw_value).lower()
        if token in _BOOLEAN_TOKENS:
            return _BOOLEAN_TOKENS[token]
        raise SlugOptionsError(
            field=field_name,
            detail=(
                f"`{field_name}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`)."
            ),
        )
