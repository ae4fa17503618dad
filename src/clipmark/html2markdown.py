#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML to Markdown conversion entry point.

This module turns the caller's input into a BeautifulSoup tree and hands it to
the recursive renderer in :mod:`clipmark.renderer`. The renderer never raises
for any tree; the errors documented here come only from reading and parsing
the input.

Examples
--------
Basic HTML string conversion:

    >>> from clipmark import html_to_markdown
    >>> html_to_markdown('<h1>Title</h1><p>Content with <strong>bold</strong> text.</p>')
    '# Title\\n\\nContent with **bold** text.\\n'

Resolve relative links against a base URL:

    >>> from clipmark.options import HtmlOptions
    >>> html_to_markdown('<a href="/x"></a>', options=HtmlOptions(base_url="https://h/"))
    '[/x](https://h/x)\\n'

Convert a tree parsed elsewhere:

    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup("<ul><li>a</li><li>b</li></ul>", "html.parser")
    >>> html_to_markdown(soup)
    '- a\\n- b\\n'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from bs4 import NavigableString, Tag

from .exceptions import FileError, ParsingError, ValidationError
from .options import HtmlOptions
from .renderer import HTMLToMarkdown

logger = logging.getLogger(__name__)

HtmlInput = Union[str, bytes, Path, IO[str], IO[bytes], Tag, NavigableString]


def _decode(data: bytes | bytearray) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParsingError("HTML input is not valid UTF-8", parsing_stage="decoding", original_error=e) from e


def _read_html_input(input_data: object) -> str:
    """Return HTML text from a string, bytes, path or file-like object.

    Strings are always treated as HTML content, never as file paths.
    """
    if isinstance(input_data, str):
        return input_data
    if isinstance(input_data, (bytes, bytearray)):
        return _decode(input_data)
    if isinstance(input_data, Path):
        try:
            data = input_data.read_bytes()
        except OSError as e:
            raise FileError(
                f"Failed to read HTML file: {e}", file_path=str(input_data), original_error=e
            ) from e
        logger.debug("Read %d bytes from %s", len(data), input_data)
        return _decode(data)
    if hasattr(input_data, "read"):
        content = input_data.read()
        if isinstance(content, (bytes, bytearray)):
            return _decode(content)
        if isinstance(content, str):
            return content
        raise ValidationError(
            f"File-like object returned unsupported type {type(content).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
    raise ValidationError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=input_data,
    )


def html_to_markdown(input_data: HtmlInput, options: HtmlOptions | None = None) -> str:
    """Convert HTML to Markdown.

    Parameters
    ----------
    input_data : str, bytes, pathlib.Path, file-like object or BeautifulSoup node
        HTML to convert. Can be:
        - String containing HTML content
        - Bytes containing UTF-8 encoded HTML
        - pathlib.Path pointing to an HTML file
        - Text or binary file-like object
        - An already-parsed ``BeautifulSoup`` document, ``Tag`` or string node
    options : HtmlOptions or None, default None
        Conversion options. If None, uses default settings.

    Returns
    -------
    str
        Markdown ending in exactly one newline, or an empty string when the
        input has no visible content.

    Raises
    ------
    ValidationError
        If the input type is not supported
    FileError
        If an HTML file cannot be read
    ParsingError
        If byte input is not valid UTF-8
    DependencyError
        If the selected ``html_parser`` is not installed

    """
    if options is None:
        options = HtmlOptions()

    converter = HTMLToMarkdown(options=options)
    if isinstance(input_data, (Tag, NavigableString)):
        return converter.convert_tree(input_data)

    return converter.convert(_read_html_input(input_data))
