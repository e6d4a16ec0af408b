"""Boolean single-file entry point."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ._constants import DEFAULT_FAVICON_PATH
from .FaviconOptions import FaviconOptions
from .inject_file import inject_file


def inject_favicon(
    file_path: str | Path,
    options: str | Mapping[str, Any] | FaviconOptions | None = DEFAULT_FAVICON_PATH,
) -> bool:
    """Inject a favicon link into an HTML file.

    Returns True only when a link was written. An existing favicon, a missing
    head element and an error all give False; use ``inject_file`` to tell
    them apart.
    """
    return inject_file(file_path, options).injected
