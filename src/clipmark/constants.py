#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for clipmark.

This module centralizes the fixed tag sets, Markdown syntax characters and
default option values used by the renderer. Keeping classification data here
keeps the dispatcher free of literal tag lists.

Constants are organized by category:
1. Type Definitions
2. Default Option Values
3. Tag Classification Sets
4. Markdown Syntax
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Default Option Values
# =============================================================================

DEFAULT_BASE_URL: str | None = None
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

HTML_PARSER_CHOICES: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# Parser name -> distribution that provides the BeautifulSoup tree builder
HTML_PARSER_PACKAGES: dict[str, str] = {
    "html5lib": "html5lib",
    "lxml": "lxml",
}

# =============================================================================
# Tag Classification Sets
# =============================================================================

# Tag names are compared in uppercase (see clipmark.dom.tag_name)

# Elements that never produce output; their children are not visited
IGNORED_TAGS = frozenset({"SCRIPT", "STYLE", "NOSCRIPT", "META", "LINK", "HEAD", "TITLE", "TEMPLATE"})

# Elements always separated from their neighbours by blank lines
BLOCK_TAGS = frozenset(
    {
        "P",
        "DIV",
        "SECTION",
        "ARTICLE",
        "HEADER",
        "FOOTER",
        "MAIN",
        "ASIDE",
        "H1",
        "H2",
        "H3",
        "H4",
        "H5",
        "H6",
        "PRE",
        "BLOCKQUOTE",
        "UL",
        "OL",
        "LI",
        "TABLE",
        "THEAD",
        "TBODY",
        "TFOOT",
        "TR",
        "TD",
        "TH",
        "HR",
    }
)

HEADING_TAGS = frozenset({"H1", "H2", "H3", "H4", "H5", "H6"})
LIST_TAGS = frozenset({"UL", "OL"})
TABLE_SECTION_TAGS: tuple[str, ...] = ("THEAD", "TBODY", "TFOOT")
TABLE_CELL_TAGS = frozenset({"TD", "TH"})

BOLD_TAGS = frozenset({"B", "STRONG"})
ITALIC_TAGS = frozenset({"I", "EM"})
STRIKE_TAGS = frozenset({"S", "DEL", "STRIKE"})

# Inline style values that turn on emphasis (matched against lowercased CSS)
BOLD_STYLE_PATTERN = r"(bold|[6-9]00)"
ITALIC_STYLE_PATTERN = r"(italic|oblique)"
STRIKE_STYLE_PATTERN = r"line-through"

# class="language-js" / class="lang-js" on <code>
CODE_LANGUAGE_PATTERN = r"(?:language|lang)-([\w#+.-]+)"

# =============================================================================
# Markdown Syntax
# =============================================================================

# Escaped in text nodes; the backslash itself is escaped first
MARKDOWN_SPECIAL_CHARS = "*_`#|>-"

HARD_LINE_BREAK = "  \n"
THEMATIC_BREAK = "---"
BULLET_MARKER = "- "
LIST_CONTINUATION_INDENT = "  "
BLOCKQUOTE_PREFIX = "> "

BOLD_MARKER = "**"
ITALIC_MARKER = "*"
STRIKE_MARKER = "~~"

TABLE_SEPARATOR_CELL = "---"

CODE_FENCE = "```"
CODE_FENCE_LONG = "````"

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6
