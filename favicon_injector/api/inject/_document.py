"""BeautifulSoup document handling (private).

The document is only ever used through these helpers: load from text,
find the head element, append raw markup, serialize. Loading completes the
document structure the way browsers do, so every loaded document has a head.
"""

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Comment, Doctype, NavigableString, PageElement, Tag
from bs4.formatter import HTMLFormatter

from ._constants import HEAD_TAGS, PARSER

# "minimal" entity handling, but void elements written as <link ...> not <link .../>
_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, PARSER, multi_valued_attributes=None)


def _is_blank(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, (Comment, Doctype)) and not node.strip()


def _is_prelude(node: PageElement) -> bool:
    return isinstance(node, (Doctype, Comment)) or _is_blank(node)


def _belongs_in_head(node: PageElement) -> bool:
    if isinstance(node, Tag):
        return node.name in HEAD_TAGS
    return isinstance(node, Comment) or _is_blank(node)


def _wrap_document(soup: BeautifulSoup) -> None:
    """Wrap top-level nodes in <html>, splitting them between <head> and <body>.

    Leading head-level tags go into <head>; everything from the first other
    node on goes into <body> (or into an existing top-level <body>).
    """
    nodes = list(soup.contents)
    start = 0
    while start < len(nodes) and _is_prelude(nodes[start]):
        start += 1

    html = soup.new_tag("html")
    head = soup.new_tag("head")
    html.append(head)
    if start < len(nodes):
        nodes[start].insert_before(html)
    else:
        soup.append(html)

    container: Tag = head
    for node in nodes[start:]:
        node = node.extract()
        if container is head and not _belongs_in_head(node):
            if isinstance(node, Tag) and node.name == "body":
                html.append(node)
                container = node
                continue
            container = soup.new_tag("body")
            html.append(container)
        container.append(node)

    if container is head:
        html.append(soup.new_tag("body"))


def load_document(html: str) -> BeautifulSoup:
    """Parse HTML text and make sure the document has a head element.

    Multi-valued attributes such as rel stay plain strings. html.parser does
    not complete document structure, so a missing <head> is created as the
    first child of <html>, and a document without <html> (its start tag is
    optional) is wrapped in <html>/<head>/<body>.
    """
    soup = _parse(html)
    if soup.find("head") is not None:
        return soup

    root = soup.find("html")
    if isinstance(root, Tag):
        root.insert(0, soup.new_tag("head"))
    else:
        _wrap_document(soup)
    return soup


def find_head(soup: BeautifulSoup) -> Tag | None:
    head = soup.find("head")
    return head if isinstance(head, Tag) else None


def append_markup(element: Tag, markup: str) -> None:
    """Append raw markup as the last child(ren) of element."""
    fragment = _parse(markup)
    for node in list(fragment.contents):
        element.append(node.extract())


def serialize_document(soup: BeautifulSoup) -> str:
    return soup.decode(formatter=_FORMATTER)
