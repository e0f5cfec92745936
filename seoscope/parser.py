"""
Parse HTML and extract the meta, Open Graph and Twitter Card tags we audit.
"""

from bs4 import BeautifulSoup

# selector -> attribute holding the value (None = element text)
TAG_SELECTORS = {
    "title": None,
    'meta[name="description"]': "content",
    'meta[name="keywords"]': "content",
    'link[rel="canonical"]': "href",
    'meta[name="robots"]': "content",
    'meta[property="og:title"]': "content",
    'meta[property="og:description"]': "content",
    'meta[property="og:image"]': "content",
    'meta[property="og:url"]': "content",
    'meta[property="og:type"]': "content",
    'meta[name="twitter:card"]': "content",
    'meta[name="twitter:title"]': "content",
    'meta[name="twitter:description"]': "content",
    'meta[name="twitter:image"]': "content",
}


def _normalize(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, list):
        value = " ".join(value)
    value = value.strip()
    return value or None


def extract_tag(soup: BeautifulSoup, selector: str, attribute: str | None = None) -> str | None:
    element = soup.select_one(selector)
    if element is None:
        return None
    if attribute is None:
        return _normalize(element.get_text())
    return _normalize(element.get(attribute))


def parse_html(html: str) -> dict:
    """Return {selector: value or None} for every tracked tag."""
    soup = BeautifulSoup(html or "", "lxml")
    return {
        selector: extract_tag(soup, selector, attribute)
        for selector, attribute in TAG_SELECTORS.items()
    }
