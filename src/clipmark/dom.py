#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clipmark/dom.py
"""Read-only access to BeautifulSoup trees.

The renderer only needs a handful of capabilities from the DOM: the kind of a
node, an element's tag name, its attributes, children and text content. They
are collected here so the rest of the package never touches BeautifulSoup
internals directly.

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from bs4 import NavigableString, Tag


class NodeKind(Enum):
    """Kinds of DOM nodes the renderer distinguishes."""

    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


def node_kind(node: Any) -> NodeKind:
    """Classify a BeautifulSoup node.

    Only plain ``NavigableString`` instances count as text. Its subclasses
    (comments, doctypes, CDATA, processing instructions, script and style
    strings) are reported as ``OTHER`` and render as nothing.
    """
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if type(node) is NavigableString:
        return NodeKind.TEXT
    return NodeKind.OTHER


def tag_name(element: Tag) -> str:
    """Return the element's tag name normalized to uppercase."""
    return (element.name or "").upper()


def get_attr(element: Tag, name: str) -> str | None:
    """Return an attribute value as a string, or None when absent.

    BeautifulSoup stores multi-valued attributes such as ``class`` as lists;
    these are joined with single spaces.
    """
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def iter_child_nodes(element: Tag) -> Iterator[Any]:
    """Iterate over all direct children, text nodes included."""
    return iter(element.children)


def child_elements(element: Tag, *names: str) -> list[Tag]:
    """Return direct child elements, optionally filtered by uppercase tag name."""
    wanted = set(names)
    return [
        child
        for child in element.children
        if isinstance(child, Tag) and (not wanted or tag_name(child) in wanted)
    ]


def find_descendant(element: Tag, name: str) -> Tag | None:
    """Return the first descendant element with the given uppercase tag name."""
    found = element.find(name.lower())
    return found if isinstance(found, Tag) else None


def text_content(node: Any) -> str:
    """Concatenated text of a node and its descendants, like DOM ``textContent``."""
    if isinstance(node, Tag):
        return node.get_text()
    if node_kind(node) is NodeKind.TEXT:
        return str(node)
    return ""
