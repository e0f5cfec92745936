"""Shared test fixtures for SEOScope tests."""

from html import escape

import pytest

from seoscope.config import Settings


def build_page(title=None, canonical=None, **tags):
    """
    Build an HTML document from keyword tags:
    og_title -> <meta property="og:title">, twitter_card -> <meta name="twitter:card">,
    anything else -> <meta name="...">.
    """
    head = []
    if title is not None:
        head.append(f"<title>{escape(title)}</title>")
    if canonical is not None:
        head.append(f'<link rel="canonical" href="{escape(canonical)}">')
    for key, content in tags.items():
        if key.startswith("og_"):
            attr = f'property="og:{key[3:]}"'
        elif key.startswith("twitter_"):
            attr = f'name="twitter:{key[8:]}"'
        else:
            attr = f'name="{key}"'
        head.append(f'<meta {attr} content="{escape(content)}">')
    return "<!doctype html><html><head>{}</head><body><h1>Hello</h1></body></html>".format(
        "\n".join(head)
    )


@pytest.fixture
def page():
    return build_page


@pytest.fixture
def complete_page():
    """A page where every tracked tag passes."""
    return build_page(
        title="Acme Rockets — Reusable Launch Vehicles for Small Payloads",
        canonical="/rockets",
        description=(
            "Acme builds reusable rockets for small satellite payloads. Compare launch "
            "windows, pricing and mission profiles in one place."
        ),
        keywords="rockets, launch, satellites",
        robots="index, follow",
        og_title="Acme Rockets — Reusable Launch Vehicles",
        og_description=(
            "Reusable rockets for small payloads. Compare launch windows, pricing "
            "and mission profiles."
        ),
        og_image="/static/rocket.png",
        og_url="https://example.com/rockets",
        og_type="website",
        twitter_card="summary_large_image",
        twitter_title="Acme Rockets",
        twitter_description="Reusable rockets for small payloads.",
        twitter_image="https://cdn.example.com/rocket-2x1.png",
    )


@pytest.fixture
def settings():
    return Settings(fetch_timeout=5.0)
