"""Observability helpers.

This package emits opt-in debug events describing slug post-processing.
"""

from .logger import SlugEventLogger, configure_logging, slug_events

__all__ = ["SlugEventLogger", "configure_logging", "slug_events"]
