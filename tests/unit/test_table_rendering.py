#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for pipe table rendering."""

import pytest

from clipmark import html_to_markdown


@pytest.mark.unit
class TestTableStructure:
    """Header detection and row collection."""

    def test_header_row_with_th(self):
        html = "<table><tr><th>A</th><th>B</th></tr><tr><td>1</td><td>2</td></tr></table>"
        assert html_to_markdown(html) == "| A | B |\n| --- | --- |\n| 1 | 2 |\n"

    def test_sections(self):
        html = (
            "<table><thead><tr><th>H</th></tr></thead>"
            "<tbody><tr><td>1</td></tr><tr><td>2</td></tr></tbody></table>"
        )
        assert html_to_markdown(html) == "| H |\n| --- |\n| 1 |\n| 2 |\n"

    def test_first_row_is_header_without_th(self):
        html = "<table><tr><td>a</td><td>b</td></tr><tr><td>1</td><td>2</td></tr></table>"
        assert html_to_markdown(html) == "| a | b |\n| --- | --- |\n| 1 | 2 |\n"

    def test_sections_collected_in_head_body_foot_order(self):
        html = (
            "<table><tfoot><tr><td>f</td></tr></tfoot>"
            "<thead><tr><th>h</th></tr></thead>"
            "<tbody><tr><td>b</td></tr></tbody></table>"
        )
        assert html_to_markdown(html) == "| h |\n| --- |\n| b |\n| f |\n"

    def test_header_row_need_not_be_first(self):
        html = "<table><tr><td>x</td></tr><tr><th>H</th></tr></table>"
        assert html_to_markdown(html) == "| H |\n| --- |\n| x |\n"

    def test_bare_rows_next_to_thead(self):
        html = "<table><thead><tr><th>H</th></tr></thead><tr><td>1</td></tr></table>"
        assert html_to_markdown(html) == "| H |\n| --- |\n| 1 |\n"

    def test_rows_padded_and_truncated_to_header(self):
        html = (
            "<table><tr><th>A</th><th>B</th></tr>"
            "<tr><td>1</td></tr>"
            "<tr><td>1</td><td>2</td><td>3</td></tr></table>"
        )
        assert html_to_markdown(html) == "| A | B |\n| --- | --- |\n| 1 |  |\n| 1 | 2 |\n"

    def test_nested_table_rows_not_collected(self):
        html = (
            "<table><tr><th>Outer</th></tr>"
            "<tr><td><table><tr><td>inner</td></tr></table></td></tr></table>"
        )
        md = html_to_markdown(html)
        assert md.startswith("| Outer |\n| --- |\n")
        assert md.count("| --- |") == 2


@pytest.mark.unit
class TestTableCells:
    """Cell content flattening."""

    def test_block_content_flattened(self):
        html = "<table><tr><th>H</th></tr><tr><td><p>a</p><p>b</p></td></tr></table>"
        assert html_to_markdown(html) == "| H |\n| --- |\n| a b |\n"

    def test_pipes_escaped(self):
        html = "<table><tr><th>H</th></tr><tr><td>a|b</td></tr></table>"
        assert html_to_markdown(html) == "| H |\n| --- |\n| a\\|b |\n"

    def test_inline_formatting_kept(self):
        html = '<table><tr><th>H</th></tr><tr><td><b>x</b> <a href="/u">u</a></td></tr></table>'
        assert html_to_markdown(html) == "| H |\n| --- |\n| **x** [u](/u) |\n"

    def test_whitespace_trimmed(self):
        html = "<table><tr><th>\n  A  </th></tr><tr><td>  1  </td></tr></table>"
        assert html_to_markdown(html) == "| A |\n| --- |\n| 1 |\n"


@pytest.mark.unit
class TestDegenerateTables:
    """Tables without usable rows."""

    def test_empty_table(self):
        assert html_to_markdown("<p>x</p><table></table>") == "x\n"

    def test_table_without_cells(self):
        assert html_to_markdown("<table><tr></tr></table><p>x</p>") == "x\n"

    def test_table_between_paragraphs(self):
        html = "<p>a</p><table><tr><th>H</th></tr></table><p>b</p>"
        assert html_to_markdown(html) == "a\n\n| H |\n| --- |\n\nb\n"
