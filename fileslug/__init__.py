"""Top-level package for fileslug.

This package converts arbitrary text into short, portable names that are safe
as filenames and URL path segments on Windows, Unix, and the web. The main
entry points are `slugify` and `slugify_with`.
"""

from loguru import logger

from .config import OptionsLoader
from .errors import SlugOptionsError
from .features import DEFAULT_FEATURES, MINIMAL_FEATURES, SlugFeatures
from .options import DEFAULT_OPTIONS, SlugOptions
from .telemetry.logger import configure_logging
from .text.slug import slugify, slugify_with

logger.disable(__name__)

__all__ = [
    "DEFAULT_FEATURES",
    "DEFAULT_OPTIONS",
    "MINIMAL_FEATURES",
    "OptionsLoader",
    "SlugFeatures",
    "SlugOptions",
    "SlugOptionsError",
    "configure_logging",
    "slugify",
    "slugify_with",
    "__version__",
]

__version__ = "0.1.0"
