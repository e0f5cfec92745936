"""Tests for tag extraction."""

from seoscope.parser import TAG_SELECTORS, parse_html


def test_extracts_every_tracked_tag(complete_page):
    tags = parse_html(complete_page)

    assert set(tags) == set(TAG_SELECTORS)
    assert all(value is not None for value in tags.values())
    assert tags['link[rel="canonical"]'] == "/rockets"
    assert tags['meta[property="og:type"]'] == "website"
    assert tags['meta[name="twitter:card"]'] == "summary_large_image"


def test_missing_tags_are_none():
    tags = parse_html("<html><head></head><body></body></html>")

    assert all(value is None for value in tags.values())


def test_values_are_trimmed():
    html = """
    <html><head>
      <title>
          Spaced   Title
      </title>
      <meta name="description" content="   padded description  ">
    </head></html>
    """
    tags = parse_html(html)

    assert tags["title"] == "Spaced   Title"
    assert tags['meta[name="description"]'] == "padded description"


def test_blank_values_are_treated_as_absent(page):
    tags = parse_html(page(title="   ", description="", og_title="  \n "))

    assert tags["title"] is None
    assert tags['meta[name="description"]'] is None
    assert tags['meta[property="og:title"]'] is None


def test_meta_without_content_attribute_is_absent():
    tags = parse_html('<html><head><meta name="robots"></head></html>')

    assert tags['meta[name="robots"]'] is None


def test_first_matching_element_wins():
    html = """
    <html><head>
      <meta property="og:title" content="First">
      <meta property="og:title" content="Second">
    </head></html>
    """
    assert parse_html(html)['meta[property="og:title"]'] == "First"


def test_og_tags_need_property_and_twitter_tags_need_name():
    html = """
    <html><head>
      <meta name="og:title" content="Wrong attribute">
      <meta property="twitter:card" content="summary">
    </head></html>
    """
    tags = parse_html(html)

    assert tags['meta[property="og:title"]'] is None
    assert tags['meta[name="twitter:card"]'] is None


def test_empty_document():
    assert parse_html("")["title"] is None
