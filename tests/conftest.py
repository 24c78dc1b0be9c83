"""Shared test fixtures and configuration."""
from __future__ import annotations

import pytest

from seo_inspector.config.settings import Settings

GOOD_HEAD = """
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Sourdough Bread Guide - Example Bakery</title>
    <meta name="description" content="Learn how to bake sourdough bread at home with a simple starter, a long cold proof and a very hot oven.">
    <link rel="canonical" href="https://example.com/sourdough-bread">
    <meta name="robots" content="index, follow">
    <meta property="og:title" content="Sourdough Bread Guide">
    <meta property="og:image" content="https://example.com/images/loaf.jpg">
    <script type="application/ld+json">
    {"@context": "https://schema.org", "@type": "Recipe", "name": "Sourdough Bread"}
    </script>
"""


@pytest.fixture
def config() -> Settings:
    """Return a fresh settings instance."""
    return Settings()


@pytest.fixture
def valid_html() -> str:
    """Return an HTML page with every on-page SEO element in place."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>{GOOD_HEAD}</head>
<body>
    <h1>Sourdough Bread at Home</h1>
    <p>Sourdough bread needs only flour, water and salt. A lively starter does the rest.</p>

    <h2>Feeding the Starter</h2>
    <p>Feed the starter twice a day. A healthy starter doubles within six hours.</p>

    <h2>Shaping Sourdough Bread</h2>
    <p>Shape the dough gently and proof the sourdough bread overnight in the fridge.</p>

    <img src="/images/loaf.jpg" alt="A finished sourdough loaf">
    <img src="/images/divider.png" alt="" role="presentation">
</body>
</html>"""


@pytest.fixture
def minimal_html() -> str:
    """Return minimal HTML for edge case testing."""
    return """<!DOCTYPE html>
<html>
<head><title>Minimal</title></head>
<body><p>Content</p></body>
</html>"""


@pytest.fixture
def html_missing_meta() -> str:
    """Return HTML with a long title and no meta description."""
    head = GOOD_HEAD.replace(
        "<title>Sourdough Bread Guide - Example Bakery</title>",
        f"<title>{'T' * 70}</title>",
    ).replace(
        '<meta name="description" content="Learn how to bake sourdough bread at home with a simple starter, a long cold proof and a very hot oven.">',
        "",
    )
    return f"""<!DOCTYPE html>
<html>
<head>{head}</head>
<body>
    <h1>Sourdough Bread</h1>
    <p>Some content about sourdough bread.</p>
</body>
</html>"""


@pytest.fixture
def html_multiple_h1() -> str:
    """Return HTML with multiple H1 tags."""
    return f"""<!DOCTYPE html>
<html>
<head>{GOOD_HEAD}</head>
<body>
    <h1>First H1</h1>
    <p>Content</p>
    <h1>Second H1</h1>
    <p>More content</p>
</body>
</html>"""


@pytest.fixture
def html_noindex() -> str:
    """Return HTML with noindex and nofollow directives."""
    head = GOOD_HEAD.replace(
        '<meta name="robots" content="index, follow">',
        '<meta name="robots" content="noindex,nofollow">',
    )
    return f"""<!DOCTYPE html>
<html>
<head>{head}</head>
<body>
    <h1>Hidden Page</h1>
    <p>This page should not be indexed.</p>
</body>
</html>"""


@pytest.fixture
def client_rendered_html() -> str:
    """Return a complete head with an empty React mount point."""
    return f"""<!DOCTYPE html>
<html>
<head>{GOOD_HEAD}</head>
<body>
    <h1>Sourdough Bread</h1>
    <div id="root"></div>
    <script src="/static/js/main.3f2a1b.js"></script>
</body>
</html>"""


@pytest.fixture
def html_mixed_schema() -> str:
    """Return HTML with one valid and one malformed JSON-LD block."""
    return """<!DOCTYPE html>
<html>
<head>
    <title>Schema Test</title>
    <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Organization"}</script>
    <script type="application/ld+json">{"@type":</script>
</head>
<body><h1>Schema Test</h1></body>
</html>"""
