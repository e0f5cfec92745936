"""Twitter (X) Card tags."""

from ..urls import resolve_url
from .common import ERROR, OK, WARNING, analyze_section, length_rule, verdict

CARD_TYPES = ("summary", "summary_large_image")


def check_card(value, base_url):
    if value is None:
        return verdict(WARNING, 55, "twitter:card not found.",
                       'Add <meta name="twitter:card" content="summary_large_image">.')

    card = value.lower()
    if card in CARD_TYPES:
        return verdict(OK, 85, f"Card type is {card}.",
                       "No change needed.", value=card)
    return verdict(WARNING, 60, f"Non-standard twitter:card value — {value}.",
                   "Use summary or summary_large_image.", value=value)


def check_title(value, base_url):
    return length_rule(
        value, name="twitter:title", minimum=0, maximum=70, ok_score=90, aim="70 or fewer",
        missing_rec='Add <meta name="twitter:title"> (70 characters or fewer).',
        ok_rec="Keep twitter:title consistent with og:title.",
        warn_rec="Shorten twitter:title to 70 characters or fewer.",
    )


def check_description(value, base_url):
    return length_rule(
        value, name="twitter:description", minimum=0, maximum=200, ok_score=90, aim="200 or fewer",
        missing_rec='Add <meta name="twitter:description"> (200 characters or fewer).',
        ok_rec="Keep twitter:description consistent with og:description.",
        warn_rec="Shorten twitter:description to 200 characters or fewer.",
    )


def check_image(value, base_url):
    if value is None:
        return verdict(WARNING, 55, "twitter:image not found.",
                       'Add <meta name="twitter:image">; og:image is used when it is missing.')

    resolved = resolve_url(value, base_url)
    if resolved is None:
        return verdict(ERROR, 10, f"twitter:image could not be resolved — {value}.",
                       "Use an absolute image URL served over HTTPS.",
                       value=value)
    return verdict(OK, 85, "twitter:image is set.",
                   "Use an image with a 2:1 ratio for summary_large_image cards.",
                   value=resolved)


RULES = [
    ('meta[name="twitter:card"]', "twitter:card", check_card),
    ('meta[name="twitter:title"]', "twitter:title", check_title),
    ('meta[name="twitter:description"]', "twitter:description", check_description),
    ('meta[name="twitter:image"]', "twitter:image", check_image),
]


def analyze(tags: dict, base_url: str) -> dict:
    return analyze_section("twitter", "Twitter Card", RULES, tags, base_url)
