"""Tests for utility functions."""

import importlib
import importlib.metadata
import logging
import sys

from favicon_injector.utils import configure_logging, get_logger, get_package_version

version_module = importlib.import_module("favicon_injector.utils.get_package_version")


def test_get_logger_namespaced():
    assert get_logger("inject").name == "favicon_injector.inject"


def test_configure_logging_levels():
    root_logger = logging.getLogger("favicon_injector")
    configure_logging(verbose=False)
    assert root_logger.level == logging.WARNING

    configure_logging(verbose=True)
    assert root_logger.level == logging.DEBUG


def test_configure_logging_replaces_its_handler():
    root_logger = logging.getLogger("favicon_injector")
    before = len(root_logger.handlers)
    configure_logging()
    configure_logging()
    added = [h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(root_logger.handlers) <= before + 1
    assert added[-1].stream is sys.stderr


def test_get_package_version_unknown(monkeypatch):
    monkeypatch.setattr(version_module, "_VERSION_CACHE", None)

    def missing(name):
        raise importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version_module.importlib_metadata, "version", missing)

    assert get_package_version() == "unknown"


def test_get_package_version_cached(monkeypatch):
    monkeypatch.setattr(version_module, "_VERSION_CACHE", "9.9.9")
    assert get_package_version() == "9.9.9"
