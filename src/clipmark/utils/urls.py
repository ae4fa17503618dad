#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clipmark/utils/urls.py
"""Relative URL resolution for links and images."""

from __future__ import annotations

import logging
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)


def resolve_url(url: str, base_url: str | None = None) -> str:
    """Resolve ``url`` against ``base_url``.

    Resolution is pure string manipulation and never touches the network.
    It fails open: without a base URL, with a base URL that is not absolute,
    or when either URL cannot be parsed, the original string is returned
    unchanged.

    Parameters
    ----------
    url : str
        URL as written in the document.
    base_url : str, optional
        Absolute base URL.

    Returns
    -------
    str
        Absolute URL, or ``url`` itself when it cannot be resolved.

    Examples
    --------
        >>> resolve_url("/x", "https://h/")
        'https://h/x'
        >>> resolve_url("/x")
        '/x'

    """
    if not base_url:
        return url
    try:
        if urlparse(url).scheme:
            return url
        if not urlparse(base_url).scheme:
            logger.debug("Base URL %r is not absolute; leaving %r unresolved", base_url, url)
            return url
        return urljoin(base_url, url)
    except ValueError as e:
        logger.debug("Could not resolve %r against %r: %s", url, base_url, e)
        return url
