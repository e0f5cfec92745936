"""Open Graph tags used by Facebook, LinkedIn and most chat apps."""

from ..urls import resolve_url
from .common import ERROR, OK, WARNING, analyze_section, length_rule, verdict


def check_title(value, base_url):
    return length_rule(
        value, name="og:title", minimum=30, maximum=95, ok_score=95, aim="30–95",
        missing_rec='Add <meta property="og:title"> with the headline to show when shared.',
        ok_rec="Keep og:title consistent with the page title.",
        warn_rec="Rewrite og:title to 30–95 characters.",
    )


def check_description(value, base_url):
    return length_rule(
        value, name="og:description", minimum=80, maximum=200, ok_score=90, aim="80–200",
        missing_rec='Add <meta property="og:description"> summarizing the page.',
        ok_rec="Keep og:description focused on why the link is worth opening.",
        warn_rec="Rewrite og:description to 80–200 characters.",
    )


def check_image(value, base_url):
    if value is None:
        return verdict(ERROR, 0, "og:image not found.",
                       'Add <meta property="og:image"> with a 1200×630 image.')

    resolved = resolve_url(value, base_url)
    if resolved is None:
        return verdict(ERROR, 10, f"og:image could not be resolved — {value}.",
                       "Use an absolute image URL served over HTTPS.",
                       value=value)
    return verdict(OK, 95, "og:image is set.",
                   "Use at least 1200×630 pixels for large previews.",
                   value=resolved)


def check_url(value, base_url):
    if value is None:
        return verdict(WARNING, 55, "og:url not found.",
                       'Add <meta property="og:url"> with the canonical URL of the page.')

    resolved = resolve_url(value, base_url)
    if resolved is None:
        return verdict(ERROR, 10, f"og:url could not be resolved — {value}.",
                       "Use an absolute URL that matches the canonical URL.",
                       value=value)
    return verdict(OK, 85, "og:url is set.",
                   "Keep og:url in sync with the canonical URL.",
                   value=resolved)


def check_type(value, base_url):
    if value is None:
        return verdict(WARNING, 55, "og:type not found.",
                       'Add <meta property="og:type" content="website"> (or "article").')
    return verdict(OK, 85, f"og:type is {value}.",
                   "No change needed.", value=value)


RULES = [
    ('meta[property="og:title"]', "og:title", check_title),
    ('meta[property="og:description"]', "og:description", check_description),
    ('meta[property="og:image"]', "og:image", check_image),
    ('meta[property="og:url"]', "og:url", check_url),
    ('meta[property="og:type"]', "og:type", check_type),
]


def analyze(tags: dict, base_url: str) -> dict:
    return analyze_section("openGraph", "Open Graph", RULES, tags, base_url)
