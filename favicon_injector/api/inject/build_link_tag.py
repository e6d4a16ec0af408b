"""Favicon link tag builder."""

from .FaviconOptions import FaviconOptions


def build_link_tag(options: FaviconOptions) -> str:
    """Build the ``<link>`` markup for options.

    rel and href always come first; type and sizes follow, in that order,
    only when set.
    """
    tag = f'<link rel="{options.rel}" href="{options.path}"'
    if options.type:
        tag += f' type="{options.type}"'
    if options.sizes:
        tag += f' sizes="{options.sizes}"'
    return tag + ">"
