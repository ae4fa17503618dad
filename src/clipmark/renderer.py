#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clipmark/renderer.py
"""Recursive HTML tree to Markdown renderer.

The renderer walks a BeautifulSoup tree depth first. Every visit returns a
Markdown fragment and parents concatenate the fragments of their children;
there is no intermediate document model. Block elements pad their fragment
with blank lines on both sides and the padding is collapsed once, when the
whole document has been assembled.

State that has to flow down the tree (list nesting and item counters, the
base URL) travels in an immutable ``RenderContext`` that is rebuilt, never
modified, when descending into a list.

Supported HTML Elements
-----------------------
- Structure: p/div/section/article/header/footer/main/aside, h1-h6, hr, br
- Lists: ul/ol/li with arbitrary nesting
- Tables: thead/tbody/tfoot/tr/th/td as pipe tables
- Code: pre (fenced, with language detection) and inline code
- Quotes: blockquote
- Inline: a, img, b/strong, i/em, s/del/strike and style-driven emphasis
  (``font-weight``, ``font-style``, ``text-decoration``) on any element
- Ignored: script, style, noscript, meta, link, head, title, template

Examples
--------
    >>> converter = HTMLToMarkdown(base_url="https://example.com/")
    >>> converter.convert('<p>See <a href="/docs">the docs</a></p>')
    'See [the docs](https://example.com/docs)\\n'

"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Any

from bs4 import BeautifulSoup, Tag
from bs4.exceptions import FeatureNotFound

from .classify import ElementKind, classify_emphasis, element_kind
from .constants import (
    BLOCKQUOTE_PREFIX,
    BOLD_MARKER,
    BULLET_MARKER,
    DEFAULT_HTML_PARSER,
    HARD_LINE_BREAK,
    HTML_PARSER_PACKAGES,
    ITALIC_MARKER,
    LIST_CONTINUATION_INDENT,
    LIST_TAGS,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    STRIKE_MARKER,
    TABLE_CELL_TAGS,
    TABLE_SECTION_TAGS,
    TABLE_SEPARATOR_CELL,
    THEMATIC_BREAK,
    HtmlParser,
)
from .context import RenderContext
from .dom import (
    NodeKind,
    child_elements,
    find_descendant,
    get_attr,
    iter_child_nodes,
    node_kind,
    tag_name,
    text_content,
)
from .exceptions import DependencyError
from .options import HtmlOptions
from .utils.text import (
    code_fence,
    collapse_blank_lines,
    collapse_text_whitespace,
    collapse_whitespace,
    escape_markdown,
    extract_code_language,
    inline_code,
    normalize_line_endings,
    normalize_markdown,
    trim_blank_lines,
)
from .utils.urls import resolve_url

logger = logging.getLogger(__name__)

_NEWLINE_RUN_RE = re.compile(r"\n+")

Handler = Callable[[Tag, RenderContext], str]


def _as_block(content: str) -> str:
    return f"\n\n{content}\n\n" if content else ""


class HTMLToMarkdown:
    """HTML to Markdown converter.

    Instances hold only immutable configuration and can be reused for any
    number of conversions.

    Parameters
    ----------
    base_url : str or None, default None
        Base URL for resolving relative ``href`` and ``src`` attributes.
        Ignored when ``options`` is given.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder used by ``convert``. Ignored when
        ``options`` is given.
    options : HtmlOptions or None, default None
        Complete configuration; takes precedence over the keyword arguments.
    """

    def __init__(
        self,
        base_url: str | None = None,
        html_parser: HtmlParser = DEFAULT_HTML_PARSER,
        options: HtmlOptions | None = None,
    ):
        self.options = options or HtmlOptions(base_url=base_url, html_parser=html_parser)
        self._handlers: dict[ElementKind, Handler] = {
            ElementKind.IGNORED: self._render_ignored,
            ElementKind.LINE_BREAK: self._render_line_break,
            ElementKind.THEMATIC_BREAK: self._render_thematic_break,
            ElementKind.IMAGE: self._render_image,
            ElementKind.LINK: self._render_link,
            ElementKind.INLINE_CODE: self._render_inline_code,
            ElementKind.CODE_BLOCK: self._render_code_block,
            ElementKind.HEADING: self._render_heading,
            ElementKind.BLOCKQUOTE: self._render_blockquote,
            ElementKind.UNORDERED_LIST: self._render_unordered_list,
            ElementKind.ORDERED_LIST: self._render_ordered_list,
            ElementKind.TABLE: self._render_table_block,
            ElementKind.EMPHASIS: self._render_emphasis,
            ElementKind.BLOCK: self._render_block,
            ElementKind.INLINE: self._render_children,
        }

    def initial_context(self) -> RenderContext:
        """Context for the root of a document."""
        return RenderContext(base_url=self.options.base_url)

    def convert(self, html: str) -> str:
        """Parse an HTML string and convert it to Markdown.

        Raises
        ------
        DependencyError
            If the configured ``html_parser`` is not installed.
        """
        if not html or not html.strip():
            return ""

        parser = self.options.html_parser
        try:
            soup = BeautifulSoup(html, parser)
        except FeatureNotFound as e:
            package = HTML_PARSER_PACKAGES.get(parser)
            raise DependencyError(
                "HTMLToMarkdown",
                missing_packages=[(package, "")] if package else [],
                message=f"Selected html_parser {parser!r} is not available: {e}",
                original_error=e,
            ) from e

        logger.debug("Parsed %d characters of HTML with %s", len(html), parser)
        return self.convert_tree(soup)

    def convert_tree(self, root: Any) -> str:
        """Convert an already-parsed BeautifulSoup tree or node to Markdown.

        For a whole document, only the ``<body>`` is rendered when one
        exists.
        """
        if isinstance(root, BeautifulSoup):
            body = root.find("body")
            if isinstance(body, Tag):
                logger.debug("Rendering <body> of parsed document")
                root = body

        markdown = normalize_markdown(self.render(root, self.initial_context()))
        logger.debug("Rendered %d characters of Markdown", len(markdown))
        return markdown

    def render(self, node: Any, ctx: RenderContext) -> str:
        """Render a single node and its descendants to a Markdown fragment."""
        kind = node_kind(node)
        if kind is NodeKind.TEXT:
            return escape_markdown(collapse_text_whitespace(str(node)))
        if kind is NodeKind.OTHER:
            return ""
        return self._handlers[element_kind(node)](node, ctx)

    def _render_children(self, element: Tag, ctx: RenderContext) -> str:
        return "".join(self.render(child, ctx) for child in iter_child_nodes(element))

    def _render_ignored(self, element: Tag, ctx: RenderContext) -> str:
        return ""

    def _render_line_break(self, element: Tag, ctx: RenderContext) -> str:
        return HARD_LINE_BREAK

    def _render_thematic_break(self, element: Tag, ctx: RenderContext) -> str:
        return _as_block(THEMATIC_BREAK)

    def _title_suffix(self, element: Tag) -> str:
        title = get_attr(element, "title")
        return f' "{escape_markdown(title)}"' if title else ""

    def _render_image(self, element: Tag, ctx: RenderContext) -> str:
        alt = get_attr(element, "alt") or ""
        src = resolve_url(get_attr(element, "src") or "", ctx.base_url)
        return f"![{escape_markdown(alt)}]({src}{self._title_suffix(element)})"

    def _render_link(self, element: Tag, ctx: RenderContext) -> str:
        """Render a link; empty link text falls back to the href as written."""
        href = get_attr(element, "href") or ""
        text = trim_blank_lines(self._render_children(element, ctx))
        if not text.strip():
            text = href
        return f"[{text}]({resolve_url(href, ctx.base_url)}{self._title_suffix(element)})"

    def _render_inline_code(self, element: Tag, ctx: RenderContext) -> str:
        return inline_code(text_content(element))

    def _render_code_block(self, element: Tag, ctx: RenderContext) -> str:
        """Render ``<pre>`` as a fenced block.

        The text comes from a nested ``<code>`` when there is one, which is
        also where the language class is looked up.
        """
        code = find_descendant(element, "CODE")
        source = code if code is not None else element
        text = normalize_line_endings(text_content(source))
        language = extract_code_language(get_attr(code, "class")) if code is not None else None
        return f"\n\n{code_fence(text, language)}\n\n"

    def _render_heading(self, element: Tag, ctx: RenderContext) -> str:
        level = int(tag_name(element)[1:])
        level = max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))
        content = trim_blank_lines(self._render_children(element, ctx))
        if not content.strip():
            return ""
        return _as_block(f"{'#' * level} {content}")

    def _render_blockquote(self, element: Tag, ctx: RenderContext) -> str:
        """Prefix every line of the quoted content with ``> ``.

        Nested block elements are rendered in place and the result is quoted
        as a whole; the quote is not split into separate blocks.
        """
        content = collapse_blank_lines(trim_blank_lines(self._render_children(element, ctx)))
        if not content.strip():
            return ""
        return _as_block("\n".join(f"{BLOCKQUOTE_PREFIX}{line}" for line in content.split("\n")))

    def _render_unordered_list(self, element: Tag, ctx: RenderContext) -> str:
        return _as_block(self._render_list(element, ctx, ordered=False))

    def _render_ordered_list(self, element: Tag, ctx: RenderContext) -> str:
        return _as_block(self._render_list(element, ctx, ordered=True))

    def _render_list(self, element: Tag, ctx: RenderContext, ordered: bool) -> str:
        """Render the direct ``<li>`` children of a list, one per line.

        Continuation lines of an item, including any nested list, are
        indented two spaces so they line up under the item text. A list at
        depth ``n`` therefore ends up indented ``2 * n`` spaces.
        """
        item_ctx = ctx.enter_list(ordered)
        lines: list[str] = []
        for item in child_elements(element, "LI"):
            item_ctx = item_ctx.next_item()
            bullet = f"{item_ctx.item_number}. " if item_ctx.in_ordered_list else BULLET_MARKER
            first, *rest = self._render_list_item(item, item_ctx).split("\n")
            lines.append(f"{bullet}{first}")
            lines.extend(f"{LIST_CONTINUATION_INDENT}{line}" if line else "" for line in rest)
        return "\n".join(lines)

    def _iter_item_parts(self, node: Tag, ctx: RenderContext) -> Iterator[tuple[bool, str]]:
        """Yield ``(is_list, fragment)`` pairs for the content of a list item.

        Nested lists are yielded unpadded. Block wrappers holding a nested
        list (``<li><div><ul>``) are opened up so the list still lands on its
        own indented line.
        """
        for child in iter_child_nodes(node):
            if node_kind(child) is NodeKind.ELEMENT:
                name = tag_name(child)
                if name in LIST_TAGS:
                    yield True, self._render_list(child, ctx, ordered=name == "OL")
                    continue
                if element_kind(child) is ElementKind.BLOCK and child_elements(child, *LIST_TAGS):
                    yield False, "\n\n"
                    yield from self._iter_item_parts(child, ctx)
                    yield False, "\n\n"
                    continue
            yield False, self.render(child, ctx)

    def _render_list_item(self, item: Tag, ctx: RenderContext) -> str:
        segments: list[str] = []
        pending: list[str] = []
        for is_list, fragment in self._iter_item_parts(item, ctx):
            if is_list:
                segments.append(trim_blank_lines("".join(pending)))
                pending = []
                segments.append(fragment)
            else:
                pending.append(fragment)
        segments.append(trim_blank_lines("".join(pending)))

        content = "\n".join(segment for segment in segments if segment.strip())
        content = trim_blank_lines(collapse_blank_lines(content))
        # Item opening with a nested list: bullet line stays empty
        if len(segments) > 1 and not segments[0].strip() and segments[1].strip():
            return f"\n{content}"
        return content

    def _render_table_block(self, element: Tag, ctx: RenderContext) -> str:
        return _as_block(self._render_table(element, ctx))

    @staticmethod
    def _collect_rows(table: Tag) -> list[Tag]:
        """Collect table rows in header, body, footer order.

        Rows that sit directly in the table next to explicit sections are
        treated as body rows, which is where an HTML5 parser would put them.
        """
        head: list[Tag] = []
        body: list[Tag] = []
        foot: list[Tag] = []
        for child in child_elements(table, "TR", *TABLE_SECTION_TAGS):
            name = tag_name(child)
            if name == "TR":
                body.append(child)
            elif name == "THEAD":
                head.extend(child_elements(child, "TR"))
            elif name == "TBODY":
                body.extend(child_elements(child, "TR"))
            else:
                foot.extend(child_elements(child, "TR"))
        return head + body + foot

    def _render_cell(self, cell: Tag, ctx: RenderContext) -> str:
        text = collapse_whitespace(trim_blank_lines(self._render_children(cell, ctx)))
        return _NEWLINE_RUN_RE.sub(" ", text).strip()

    def _render_table(self, element: Tag, ctx: RenderContext) -> str:
        """Render a pipe table; returns an empty string when there is no header."""
        rows = self._collect_rows(element)
        if not rows:
            return ""

        header_index = 0
        for index, row in enumerate(rows):
            if child_elements(row, "TH"):
                header_index = index
                break

        grid = [[self._render_cell(cell, ctx) for cell in child_elements(row, *TABLE_CELL_TAGS)] for row in rows]
        header = grid[header_index]
        if not header:
            return ""

        columns = len(header)
        body = [row for index, row in enumerate(grid) if index != header_index]

        def row_line(cells: list[str]) -> str:
            return f"| {' | '.join(cells)} |"

        lines = [row_line(header), row_line([TABLE_SEPARATOR_CELL] * columns)]
        for row in body:
            lines.append(row_line((row + [""] * columns)[:columns]))
        return "\n".join(lines)

    def _render_emphasis(self, element: Tag, ctx: RenderContext) -> str:
        """Wrap content in bold, then italic, then strikethrough markers.

        Each marker wraps the result of the previous one, so an element that
        is both bold and italic renders as ``***text***``.
        """
        content = self._render_children(element, ctx)
        if not content.strip():
            return content

        emphasis = classify_emphasis(element)
        if emphasis.bold:
            content = f"{BOLD_MARKER}{content}{BOLD_MARKER}"
        if emphasis.italic:
            content = f"{ITALIC_MARKER}{content}{ITALIC_MARKER}"
        if emphasis.strike:
            content = f"{STRIKE_MARKER}{content}{STRIKE_MARKER}"
        return content

    def _render_block(self, element: Tag, ctx: RenderContext) -> str:
        content = trim_blank_lines(self._render_children(element, ctx))
        return _as_block(content) if content.strip() else ""
