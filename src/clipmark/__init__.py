#  Copyright (c) 2025 Tom Villani, Ph.D.
"""clipmark - convert HTML to readable, stable Markdown.

Designed for clipboard paste and scraped content: the visual structure of
the HTML (headings, paragraphs, nested lists, tables, code blocks, quotes,
links, images and emphasis) becomes a small set of Markdown constructs.

    >>> from clipmark import html_to_markdown
    >>> html_to_markdown("<p>Hello <b>world</b></p>")
    'Hello **world**\\n'

"""

from __future__ import annotations

from .context import RenderContext
from .exceptions import ClipmarkError, DependencyError, FileError, ParsingError, ValidationError
from .html2markdown import html_to_markdown
from .options import HtmlOptions
from .renderer import HTMLToMarkdown

__version__ = "0.1.0"


__all__ = [
    "html_to_markdown",
    "HTMLToMarkdown",
    "HtmlOptions",
    "RenderContext",
    "ClipmarkError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "DependencyError",
    "__version__",
]
