"""Inject API module."""

from .build_link_tag import build_link_tag
from .cmd_inject import cmd_inject
from .detect_mime_type import detect_mime_type
from .FaviconOptions import FaviconOptions
from .has_favicon import has_favicon
from .inject_dir import inject_dir
from .inject_favicon import inject_favicon
from .inject_file import inject_file
from .InjectionOutcome import InjectionOutcome
from .InjectionResult import InjectionResult
from .InjectionStats import InjectionStats

__all__ = [
    "FaviconOptions",
    "InjectionOutcome",
    "InjectionResult",
    "InjectionStats",
    "build_link_tag",
    "cmd_inject",
    "detect_mime_type",
    "has_favicon",
    "inject_dir",
    "inject_favicon",
    "inject_file",
]
