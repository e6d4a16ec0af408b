"""Recursive directory injection."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ...utils.get_logger import get_logger
from ._constants import DEFAULT_FAVICON_PATH, HTML_SUFFIX, METADATA_PREFIX
from .FaviconOptions import FaviconOptions
from .inject_file import inject_file
from .InjectionOutcome import InjectionOutcome
from .InjectionStats import InjectionStats

logger = get_logger("inject")


def inject_dir(
    dir_path: str | Path,
    options: str | Mapping[str, Any] | FaviconOptions | None = DEFAULT_FAVICON_PATH,
) -> InjectionStats:
    """Recursively inject a favicon link into every HTML file under dir_path.

    Entries whose name starts with ``._`` are ignored. Errors while scanning a
    directory are logged and the stats gathered so far are returned. Only
    invalid options raise, before any file is visited.

    Args:
        dir_path: Directory to scan
        options: Favicon options, a mapping of their fields, or a bare favicon href

    Returns:
        InjectionStats with total, injected, skipped and failed counts
    """
    path = Path(dir_path)
    stats = InjectionStats()
    favicon = FaviconOptions.coerce(options)

    try:
        if not path.exists():
            raise FileNotFoundError(f"Directory {path} does not exist")

        for entry in path.iterdir():
            if entry.name.startswith(METADATA_PREFIX):
                continue

            if entry.is_dir():
                stats += inject_dir(entry, favicon)
            elif entry.is_file() and entry.name.lower().endswith(HTML_SUFFIX):
                stats.total += 1
                result = inject_file(entry, favicon)
                if result.outcome is InjectionOutcome.INJECTED:
                    stats.injected += 1
                elif result.outcome is InjectionOutcome.ALREADY_PRESENT:
                    stats.skipped += 1
                else:
                    stats.failed += 1
    except Exception as exc:
        logger.error("Error scanning directory %s: %s", path, exc)

    return stats
