"""Test utilities for the clipmark test suite."""

import re

_BLANK_LINE_RUN_RE = re.compile(r"\n{3,}")


def assert_markdown_valid(markdown: str) -> None:
    """Assert the structural guarantees every conversion result must meet.

    - empty output is exactly ``""``
    - non-empty output ends with exactly one newline
    - no leading blank line
    - never three or more consecutive newlines
    """
    assert isinstance(markdown, str)
    if not markdown:
        return

    assert markdown.endswith("\n"), f"missing trailing newline: {markdown!r}"
    assert not markdown.endswith("\n\n"), f"more than one trailing newline: {markdown!r}"
    assert not markdown.startswith("\n"), f"leading blank line: {markdown!r}"
    assert not _BLANK_LINE_RUN_RE.search(markdown), f"blank-line run not collapsed: {markdown!r}"
