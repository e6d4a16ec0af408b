"""Unit tests for favicon_injector.api.inject.detect_mime_type module."""

import pytest

from favicon_injector.api.inject.detect_mime_type import detect_mime_type


@pytest.mark.parametrize(
    ("favicon_path", "expected"),
    [
        ("icon.ICO", "image/x-icon"),
        ("/favicon.ico", "image/x-icon"),
        ("pic.png", "image/png"),
        ("a.svg", "image/svg+xml"),
        ("x.jpg", "image/jpeg"),
        ("x.JPEG", "image/jpeg"),
        ("/assets/icons/site.Png", "image/png"),
    ],
)
def test_detect_mime_type_known_extensions(favicon_path, expected):
    assert detect_mime_type(favicon_path) == expected


@pytest.mark.parametrize("favicon_path", ["noext", "/favicon.webp", "/icons/", "icon.ico.bak", ""])
def test_detect_mime_type_unknown_is_none(favicon_path):
    assert detect_mime_type(favicon_path) is None
