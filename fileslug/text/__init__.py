"""Character policies and the slug conversion itself.

This package provides the slugifier together with the classification,
transliteration, and Unicode passthrough rules it consults.
"""

from .slug import slugify, slugify_with
from .translit import transliterate
from .unicode_policy import passthrough

__all__ = ["slugify", "slugify_with", "transliterate", "passthrough"]
