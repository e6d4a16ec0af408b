"""Single-file favicon injection."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ...utils.get_logger import get_logger
from ._constants import DEFAULT_FAVICON_PATH, METADATA_PREFIX
from ._document import append_markup, find_head, load_document, serialize_document
from .build_link_tag import build_link_tag
from .FaviconOptions import FaviconOptions
from .has_favicon import has_favicon
from .InjectionOutcome import InjectionOutcome
from .InjectionResult import InjectionResult

logger = get_logger("inject")


def inject_file(
    file_path: str | Path,
    options: str | Mapping[str, Any] | FaviconOptions | None = DEFAULT_FAVICON_PATH,
) -> InjectionResult:
    """Inject a favicon link into one HTML file.

    The file is rewritten in full only when a link was added. Every failure
    is logged and reported through the result outcome. Only invalid options
    raise, before the file is touched.

    Args:
        file_path: Path to the HTML file
        options: Favicon options, a mapping of their fields, or a bare favicon href

    Returns:
        InjectionResult describing what happened
    """
    path = Path(file_path)
    favicon = FaviconOptions.coerce(options)
    try:
        if not path.is_file():
            logger.warning("Path is not a file: %s", path)
            return InjectionResult(path, InjectionOutcome.NOT_A_FILE)

        if path.name.startswith(METADATA_PREFIX):
            logger.warning("Skipping macOS metadata file: %s", path)
            return InjectionResult(path, InjectionOutcome.METADATA_SIDECAR)

        soup = load_document(path.read_text(encoding="utf-8"))
        if has_favicon(soup):
            logger.debug("Favicon already present: %s", path)
            return InjectionResult(path, InjectionOutcome.ALREADY_PRESENT)

        head = find_head(soup)
        if head is None:
            logger.warning("No <head> tag found in %s", path)
            return InjectionResult(path, InjectionOutcome.NO_HEAD_ELEMENT)

        append_markup(head, build_link_tag(favicon))
        path.write_text(serialize_document(soup), encoding="utf-8")
    except Exception as exc:
        logger.error("Error injecting favicon into %s: %s", path, exc)
        return InjectionResult(path, InjectionOutcome.IO_ERROR, detail=str(exc))

    logger.debug("Injected favicon into %s", path)
    return InjectionResult(path, InjectionOutcome.INJECTED)
