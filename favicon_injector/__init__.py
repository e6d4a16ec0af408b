"""Auto favicon injector.

Inject ``<link rel="icon">`` tags into HTML files that do not have one.
"""

from .api.inject import (
    FaviconOptions,
    InjectionOutcome,
    InjectionResult,
    InjectionStats,
    detect_mime_type,
    has_favicon,
    inject_dir,
    inject_favicon,
    inject_file,
)

__all__ = [
    "FaviconOptions",
    "InjectionOutcome",
    "InjectionResult",
    "InjectionStats",
    "detect_mime_type",
    "has_favicon",
    "inject_dir",
    "inject_favicon",
    "inject_file",
]
