#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to Markdown conversion.

Options are frozen dataclasses so a single instance can be shared between
conversions. Use ``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .constants import DEFAULT_BASE_URL, DEFAULT_HTML_PARSER, HTML_PARSER_CHOICES, HtmlParser
from .exceptions import ValidationError


class _CloneMixin:
    def create_updated(self, **kwargs: Any) -> Any:
        return replace(self, **kwargs)  # type: ignore


@dataclass(frozen=True)
class HtmlOptions(_CloneMixin):
    """Configuration options for HTML-to-Markdown conversion.

    Parameters
    ----------
    base_url : str or None, default None
        Base URL used to resolve relative ``href`` and ``src`` attributes.
        When None, URLs are written exactly as they appear in the HTML.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder used to parse HTML text. ``html5lib``
        matches browser behaviour most closely; ``lxml`` is the fastest.
        Both require the corresponding package to be installed.

    Examples
    --------
        >>> options = HtmlOptions(base_url="https://example.com/docs/")
        >>> options.create_updated(html_parser="html5lib").html_parser
        'html5lib'

    """

    base_url: str | None = field(
        default=DEFAULT_BASE_URL,
        metadata={
            "help": "Base URL for resolving relative hrefs and image sources",
        },
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (browser-compatible, slower), 'lxml' (fast, requires C library)"
            ),
            "choices": list(HTML_PARSER_CHOICES),
        },
    )

    def __post_init__(self) -> None:
        if self.base_url is not None and not isinstance(self.base_url, str):
            raise ValidationError(
                f"base_url must be a string or None, got {type(self.base_url).__name__}",
                parameter_name="base_url",
                parameter_value=self.base_url,
            )
        if self.html_parser not in HTML_PARSER_CHOICES:
            raise ValidationError(
                f"Unknown html_parser {self.html_parser!r}; expected one of {', '.join(HTML_PARSER_CHOICES)}",
                parameter_name="html_parser",
                parameter_value=self.html_parser,
            )
