#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for whole-document conversion and input handling."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from clipmark import HTMLToMarkdown, html_to_markdown
from clipmark.exceptions import DependencyError, FileError, ParsingError, ValidationError
from clipmark.options import HtmlOptions
from utils import assert_markdown_valid

EXPECTED_CLIPBOARD_MARKDOWN = """# Release notes

Version **2.0** is *out*.

- Faster
- Smaller
  1. Core
  2. Plugins

```python
print("hi")
```

| Name | Size |
| --- | --- |
| core | 1 MB |

> Thanks to [everyone](https://example.com/contributors)!
"""


@pytest.mark.integration
class TestDocumentConversion:
    """Complete documents."""

    def test_clipboard_document(self, clipboard_html, base_url_options):
        md = html_to_markdown(clipboard_html, options=base_url_options)
        assert md == EXPECTED_CLIPBOARD_MARKDOWN
        assert_markdown_valid(md)

    def test_converter_is_reusable(self, converter):
        assert converter.convert("<ol><li>a</li></ol>") == "1. a\n"
        assert converter.convert("<ol><li>b</li></ol>") == "1. b\n"

    def test_scraped_article(self):
        html = """
        <article>
          <header><h2>News</h2></header>
          <p>Read <a href="https://example.com/a" title="Full story">more</a>.</p>
          <figure><img src="https://example.com/p.png" alt="Photo"></figure>
          <footer>Posted by <em>staff</em></footer>
        </article>
        """
        md = html_to_markdown(html)
        assert md == (
            "## News\n\n"
            'Read [more](https://example.com/a "Full story").\n\n'
            "![Photo](https://example.com/p.png)\n\n"
            "Posted by *staff*\n"
        )
        assert_markdown_valid(md)


@pytest.mark.integration
class TestInputTypes:
    """Strings, bytes, paths, file objects and parsed trees."""

    def test_bytes(self):
        assert html_to_markdown("<p>café</p>".encode("utf-8")) == "café\n"

    def test_invalid_bytes(self):
        with pytest.raises(ParsingError):
            html_to_markdown(b"<p>\xff\xfe</p>")

    def test_path(self, tmp_path: Path):
        path = tmp_path / "page.html"
        path.write_text("<h1>File</h1>", encoding="utf-8")
        assert html_to_markdown(path) == "# File\n"

    def test_missing_path(self, tmp_path: Path):
        with pytest.raises(FileError) as exc_info:
            html_to_markdown(tmp_path / "missing.html")
        assert exc_info.value.file_path.endswith("missing.html")

    def test_string_is_never_a_path(self, tmp_path: Path):
        path = tmp_path / "page.html"
        path.write_text("<h1>File</h1>", encoding="utf-8")
        assert html_to_markdown(str(path)) == html_to_markdown(f"<p>{path}</p>")

    def test_text_file_object(self):
        assert html_to_markdown(StringIO("<b>x</b>")) == "**x**\n"

    def test_binary_file_object(self):
        assert html_to_markdown(BytesIO(b"<i>x</i>")) == "*x*\n"

    def test_unsupported_type(self):
        with pytest.raises(ValidationError) as exc_info:
            html_to_markdown(42)
        assert exc_info.value.parameter_name == "input_data"

    def test_parsed_document(self):
        soup = BeautifulSoup("<html><body><ul><li>a</li><li>b</li></ul></body></html>", "html.parser")
        assert html_to_markdown(soup) == "- a\n- b\n"

    def test_parsed_element(self):
        soup = BeautifulSoup("<p>skip</p><table><tr><th>A</th></tr><tr><td>1</td></tr></table>", "html.parser")
        assert html_to_markdown(soup.table) == "| A |\n| --- |\n| 1 |\n"

    def test_parsed_tree_uses_base_url(self):
        soup = BeautifulSoup('<a href="x">y</a>', "html.parser")
        assert HTMLToMarkdown(base_url="https://h/d/").convert_tree(soup) == "[y](https://h/d/x)\n"


@pytest.mark.integration
class TestParserChoice:
    """BeautifulSoup tree builders."""

    @pytest.mark.parametrize("parser", ["html5lib", "lxml"])
    def test_alternative_parsers(self, parser, clipboard_html, base_url_options):
        options = base_url_options.create_updated(html_parser=parser)
        try:
            md = html_to_markdown(clipboard_html, options=options)
        except DependencyError:
            pytest.skip(f"{parser} not available")
        assert md == EXPECTED_CLIPBOARD_MARKDOWN

    @pytest.mark.parametrize("parser", ["html5lib", "lxml"])
    def test_fragment_gets_wrapped_in_body(self, parser):
        try:
            md = html_to_markdown("<p>a</p><p>b</p>", options=HtmlOptions(html_parser=parser))
        except DependencyError:
            pytest.skip(f"{parser} not available")
        assert md == "a\n\nb\n"

    def test_missing_parser_reports_package(self, monkeypatch):
        from bs4.exceptions import FeatureNotFound

        import clipmark.renderer as renderer_module

        def _raise(*args, **kwargs):
            raise FeatureNotFound("Couldn't find a tree builder with the features you requested: lxml.")

        monkeypatch.setattr(renderer_module, "BeautifulSoup", _raise)
        with pytest.raises(DependencyError) as exc_info:
            html_to_markdown("<p>x</p>", options=HtmlOptions(html_parser="lxml"))
        assert exc_info.value.missing_packages == [("lxml", "")]
        assert exc_info.value.install_command == "pip install lxml"
