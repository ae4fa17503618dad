"""Pytest configuration and shared fixtures for the clipmark test suite."""

import os

import pytest

from clipmark import HTMLToMarkdown
from clipmark.options import HtmlOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - whole-document conversions")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def converter() -> HTMLToMarkdown:
    """Converter with default options."""
    return HTMLToMarkdown()


@pytest.fixture
def base_url_options() -> HtmlOptions:
    """Options resolving relative URLs against https://example.com/."""
    return HtmlOptions(base_url="https://example.com/")


@pytest.fixture
def clipboard_html() -> str:
    """A complete pasted document exercising every major construct.

    Returns
    -------
    str
        HTML document with head, styles, lists, code, table and quote.

    """
    return """<html><head><meta charset="utf-8"><title>Doc</title><style>p{color:red}</style></head>
<body>
<h1>Release notes</h1>
<p>Version <strong>2.0</strong> is <span style="font-style: italic">out</span>.</p>
<ul>
  <li>Faster</li>
  <li>Smaller
    <ol>
      <li>Core</li>
      <li>Plugins</li>
    </ol>
  </li>
</ul>
<pre><code class="language-python">print("hi")
</code></pre>
<table>
  <thead><tr><th>Name</th><th>Size</th></tr></thead>
  <tbody><tr><td>core</td><td>1 MB</td></tr></tbody>
</table>
<blockquote>Thanks to <a href="/contributors">everyone</a>!</blockquote>
</body></html>"""
