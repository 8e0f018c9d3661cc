"""Optional slug capabilities.

Unicode passthrough and transliteration are independent capabilities. The
slugifier checks a capability before consulting the matching option, so a
minimal profile still produces valid (if less permissive) output.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SlugFeatures:
    """Capability switches for optional character policies.

    Attributes:
        unicode: Unicode alphanumerics may be preserved when `allow_unicode` is set.
        transliterate: Non-ASCII characters may be replaced by ASCII look-alikes.
    """

    unicode: bool = True
    transliterate: bool = True


DEFAULT_FEATURES = SlugFeatures()
MINIMAL_FEATURES = SlugFeatures(unicode=False, transliterate=False)
