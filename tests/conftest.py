"""Shared pytest configuration and fixtures for all tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single API modules")
    config.addinivalue_line("markers", "integration: CLI tests that drive the whole stack")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Undo handlers and levels set by configure_logging() during a test."""
    logger = logging.getLogger("favicon_injector")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


# =============================================================================
# HTML Documents
# =============================================================================

PLAIN_HTML = """<!DOCTYPE html>
<html>
<head>
<title>Plain</title>
</head>
<body><p>No favicon here</p></body>
</html>
"""

ICON_HTML = """<!DOCTYPE html>
<html>
<head>
<title>Has icon</title>
<link rel="icon" href="/existing.ico">
</head>
<body><p>Already done</p></body>
</html>
"""

NO_HEAD_HTML = """<html>
<body><p>Missing head</p></body>
</html>
"""

FRAGMENT_HTML = "<p>Just a fragment</p>\n"


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def cmd_runner() -> Callable:
    return run_cmd


@pytest.fixture
def write_html(tmp_path: Path) -> Callable[..., Path]:
    """Write an HTML document below tmp_path, creating parent directories."""

    def _write(relative: str, content: str = PLAIN_HTML) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def html_docs() -> dict[str, str]:
    return {
        "plain": PLAIN_HTML,
        "icon": ICON_HTML,
        "no_head": NO_HEAD_HTML,
        "fragment": FRAGMENT_HTML,
    }
