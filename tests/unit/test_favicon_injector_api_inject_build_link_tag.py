"""Unit tests for favicon_injector.api.inject.build_link_tag module."""

from favicon_injector.api.inject.build_link_tag import build_link_tag
from favicon_injector.api.inject.FaviconOptions import FaviconOptions


def test_default_tag():
    assert build_link_tag(FaviconOptions()) == '<link rel="icon" href="/favicon.ico" type="image/x-icon">'


def test_all_attributes_in_fixed_order():
    options = FaviconOptions(path="/t.png", rel="apple-touch-icon", sizes="180x180")
    assert build_link_tag(options) == '<link rel="apple-touch-icon" href="/t.png" type="image/png" sizes="180x180">'


def test_type_omitted_for_unknown_extension():
    assert build_link_tag(FaviconOptions(path="/favicon")) == '<link rel="icon" href="/favicon">'


def test_sizes_without_type():
    options = FaviconOptions(path="/icon", sizes="32x32 48x48")
    assert build_link_tag(options) == '<link rel="icon" href="/icon" sizes="32x32 48x48">'
