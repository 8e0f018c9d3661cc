"""Domain exceptions for option configuration diagnostics."""

from __future__ import annotations


class SlugOptionsError(ValueError):
    """Raised when configuration data cannot be turned into `SlugOptions`."""

    def __init__(
        self,
        *,
        field: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a field-scoped configuration error."""

        super().__init__(detail)
        self.field = field
        self.detail = detail
        self.hint = hint
