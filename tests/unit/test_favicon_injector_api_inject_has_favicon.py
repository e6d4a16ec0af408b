"""Unit tests for favicon_injector.api.inject.has_favicon module."""

import pytest
from bs4 import BeautifulSoup

from favicon_injector.api.inject._document import load_document
from favicon_injector.api.inject.has_favicon import has_favicon


@pytest.mark.parametrize("rel", ["icon", "shortcut icon", "apple-touch-icon"])
def test_recognized_rels(rel):
    soup = load_document(f'<html><head><link rel="{rel}" href="/x.ico"></head></html>')
    assert has_favicon(soup) is True


@pytest.mark.parametrize("rel", ["ICON", "Shortcut Icon", "stylesheet", "icon shortcut", "mask-icon"])
def test_other_rels_do_not_count(rel):
    soup = load_document(f'<html><head><link rel="{rel}" href="/x"></head></html>')
    assert has_favicon(soup) is False


def test_no_links():
    assert has_favicon(load_document("<html><head><title>t</title></head></html>")) is False


def test_link_without_rel():
    assert has_favicon(load_document('<html><head><link href="/x.ico"></head></html>')) is False


def test_link_outside_head_counts():
    assert has_favicon(load_document('<body><link rel="icon" href="/x.ico"></body>')) is True


def test_multi_valued_rel_soup():
    """A soup parsed with bs4 defaults splits rel into a list."""
    soup = BeautifulSoup('<link rel="shortcut icon" href="/x.ico">', "html.parser")
    assert has_favicon(soup) is True
