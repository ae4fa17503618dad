#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clipmark/utils/text.py
"""Escaping and whitespace normalization for Markdown fragments.

Fragments produced by the renderer are joined by plain concatenation, so
blocks pad themselves with newlines on both sides. The helpers here trim
that padding where a fragment is embedded in something else and collapse it
once the whole document has been assembled.

"""

from __future__ import annotations

import re

from clipmark.constants import CODE_FENCE, CODE_FENCE_LONG, CODE_LANGUAGE_PATTERN, MARKDOWN_SPECIAL_CHARS

_SPECIAL_CHARS_RE = re.compile("([" + re.escape(MARKDOWN_SPECIAL_CHARS) + "])")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_HORIZONTAL_WHITESPACE_RE = re.compile(r"[ \t\f\v]+")
_LEADING_BLANK_RE = re.compile(r"^\s+\n")
_TRAILING_BLANK_RE = re.compile(r"\n\s+\Z")
_BLANK_LINE_RUN_RE = re.compile(r"\n{3,}")
_FENCE_LINE_RE = re.compile(r"^ *(?:(?:-|\d+\.) +)*(`{3,})")
_CODE_LANGUAGE_RE = re.compile(CODE_LANGUAGE_PATTERN)


def escape_markdown(text: str) -> str:
    r"""Backslash-escape characters that Markdown would interpret.

    Examples
    --------
        >>> escape_markdown("a*b_c")
        'a\\*b\\_c'

    """
    return _SPECIAL_CHARS_RE.sub(r"\\\1", text.replace("\\", "\\\\"))


def collapse_text_whitespace(text: str) -> str:
    """Collapse whitespace runs in a text node.

    A run containing a newline becomes a single newline, any other run a
    single space.
    """
    return _WHITESPACE_RUN_RE.sub(lambda m: "\n" if "\n" in m.group(0) else " ", text)


def collapse_whitespace(text: str) -> str:
    """Replace non-breaking spaces and squeeze horizontal whitespace, keeping newlines."""
    return _HORIZONTAL_WHITESPACE_RE.sub(" ", text.replace("\u00a0", " "))


def trim_blank_lines(text: str) -> str:
    """Remove the leading and trailing blank lines of a fragment.

    Indentation on the first and last content lines is preserved; only
    whitespace up to the nearest newline is dropped.
    """
    text = _LEADING_BLANK_RE.sub("\n", text, count=1)
    text = _TRAILING_BLANK_RE.sub("\n", text, count=1)
    return text.strip("\n")


def collapse_blank_lines(text: str) -> str:
    """Limit runs of newlines to at most two (one blank line)."""
    return _BLANK_LINE_RUN_RE.sub("\n\n", text)


def _clear_whitespace_only_lines(text: str) -> str:
    """Empty lines made only of spaces and tabs, leaving fenced code untouched.

    A fence opens on a line starting with three or more backticks, possibly
    after list indentation or a list marker, and closes on a line holding
    exactly the same fence.
    """
    lines = text.split("\n")
    fence: str | None = None
    for index, line in enumerate(lines):
        match = _FENCE_LINE_RE.match(line)
        if fence is not None:
            if match and line.strip() == fence:
                fence = None
        elif match:
            fence = match.group(1)
        elif not line.strip(" \t"):
            lines[index] = ""
    return "\n".join(lines)


def normalize_markdown(text: str) -> str:
    """Final cleanup of an assembled document.

    Whitespace-only lines outside fenced code are emptied, blank-line runs
    collapsed, and the result stripped. Non-empty output always ends with
    exactly one newline.
    """
    text = trim_blank_lines(text)
    text = _clear_whitespace_only_lines(text)
    text = collapse_blank_lines(text).strip()
    return f"{text}\n" if text else ""


def inline_code(text: str) -> str:
    """Wrap verbatim text in a code span, using two backticks when it contains one."""
    ticks = "``" if "`" in text else "`"
    return f"{ticks}{text}{ticks}"


def code_fence(text: str, language: str | None = None) -> str:
    """Build a fenced code block whose fence cannot collide with the content."""
    fence = CODE_FENCE_LONG if CODE_FENCE in text else CODE_FENCE
    body = text[:-1] if text.endswith("\n") else text
    return f"{fence}{language or ''}\n{body}\n{fence}"


def extract_code_language(class_attr: str | None) -> str | None:
    """Return the language named by a ``language-x`` or ``lang-x`` class token.

    Examples
    --------
        >>> extract_code_language("hljs language-Python")
        'python'
        >>> extract_code_language("highlight") is None
        True

    """
    if not class_attr:
        return None
    match = _CODE_LANGUAGE_RE.search(class_attr.lower())
    return match.group(1) if match else None


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")
