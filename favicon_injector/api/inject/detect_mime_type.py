"""MIME type auto-detection for favicon hrefs."""

from pathlib import PurePosixPath

from ._constants import MIME_TYPES


def detect_mime_type(favicon_path: str) -> str | None:
    """Return the MIME type for a favicon href based on its extension.

    Matching is case-insensitive. Unknown or missing extensions give None.
    """
    return MIME_TYPES.get(PurePosixPath(favicon_path).suffix.lower())
