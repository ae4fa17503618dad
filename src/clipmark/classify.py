#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Element classification for the renderer.

Classification answers two questions about an element without rendering it:
which handler should process it (``element_kind``) and whether inline style or
tag identity asks for bold, italic or strikethrough (``classify_emphasis``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from bs4 import Tag

from .constants import (
    BLOCK_TAGS,
    BOLD_STYLE_PATTERN,
    BOLD_TAGS,
    HEADING_TAGS,
    IGNORED_TAGS,
    ITALIC_STYLE_PATTERN,
    ITALIC_TAGS,
    STRIKE_STYLE_PATTERN,
    STRIKE_TAGS,
)
from .dom import get_attr, tag_name

_BOLD_STYLE_RE = re.compile(BOLD_STYLE_PATTERN)
_ITALIC_STYLE_RE = re.compile(ITALIC_STYLE_PATTERN)
_STRIKE_STYLE_RE = re.compile(STRIKE_STYLE_PATTERN)


class ElementKind(Enum):
    """Closed set of element handlers, listed in dispatch priority order."""

    IGNORED = "ignored"
    LINE_BREAK = "line_break"
    THEMATIC_BREAK = "thematic_break"
    IMAGE = "image"
    LINK = "link"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    TABLE = "table"
    EMPHASIS = "emphasis"
    BLOCK = "block"
    INLINE = "inline"


# Kinds decided by tag name alone; EMPHASIS, BLOCK and INLINE are decided afterwards
_TAG_KINDS: dict[str, ElementKind] = {
    **{tag: ElementKind.IGNORED for tag in IGNORED_TAGS},
    "BR": ElementKind.LINE_BREAK,
    "HR": ElementKind.THEMATIC_BREAK,
    "IMG": ElementKind.IMAGE,
    "A": ElementKind.LINK,
    "CODE": ElementKind.INLINE_CODE,
    "PRE": ElementKind.CODE_BLOCK,
    **{tag: ElementKind.HEADING for tag in HEADING_TAGS},
    "BLOCKQUOTE": ElementKind.BLOCKQUOTE,
    "UL": ElementKind.UNORDERED_LIST,
    "OL": ElementKind.ORDERED_LIST,
    "TABLE": ElementKind.TABLE,
}


@dataclass(frozen=True)
class Emphasis:
    """Emphasis flags for a single element."""

    bold: bool = False
    italic: bool = False
    strike: bool = False

    def __bool__(self) -> bool:
        return self.bold or self.italic or self.strike


def is_block_tag(name: str) -> bool:
    """Return True if the uppercase tag name is always rendered as a block."""
    return name in BLOCK_TAGS


def parse_style(style: str | None) -> dict[str, str]:
    """Parse an inline ``style`` attribute into a property mapping.

    Declarations are split on ``;`` and each one on its first ``:``. Names and
    values are lowercased and stripped; the last duplicate property wins.

    Examples
    --------
        >>> parse_style("Font-Weight: 700; color:red; font-weight: normal")
        {'font-weight': 'normal', 'color': 'red'}

    """
    properties: dict[str, str] = {}
    if not style:
        return properties
    for declaration in style.lower().split(";"):
        name, _, value = declaration.partition(":")
        name = name.strip()
        if name:
            properties[name] = value.strip()
    return properties


def _style_matches(properties: dict[str, str], name: str, pattern: re.Pattern[str]) -> bool:
    value = properties.get(name)
    return bool(value) and pattern.search(value) is not None


def classify_emphasis(element: Tag) -> Emphasis:
    """Determine bold, italic and strikethrough for an element."""
    name = tag_name(element)
    properties = parse_style(get_attr(element, "style"))
    return Emphasis(
        bold=name in BOLD_TAGS or _style_matches(properties, "font-weight", _BOLD_STYLE_RE),
        italic=name in ITALIC_TAGS or _style_matches(properties, "font-style", _ITALIC_STYLE_RE),
        strike=name in STRIKE_TAGS or _style_matches(properties, "text-decoration", _STRIKE_STYLE_RE),
    )


def element_kind(element: Tag) -> ElementKind:
    """Return the handler kind for an element.

    Tag-specific handlers take priority over style-driven emphasis, which in
    turn takes priority over plain block wrapping. Anything left over is an
    inline passthrough.
    """
    name = tag_name(element)
    kind = _TAG_KINDS.get(name)
    if kind is not None:
        return kind
    if classify_emphasis(element):
        return ElementKind.EMPHASIS
    if is_block_tag(name):
        return ElementKind.BLOCK
    return ElementKind.INLINE
