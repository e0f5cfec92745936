"""Classic HTML meta tags: title, description, keywords, canonical, robots."""

from ..urls import resolve_url
from .common import ERROR, OK, WARNING, analyze_section, length_rule, verdict

MAX_KEYWORDS = 10
BLOCKING_DIRECTIVES = ("noindex", "nofollow")


def check_title(value, base_url):
    return length_rule(
        value, name="Title", minimum=30, maximum=70, ok_score=95, aim="50–60",
        missing_rec="Add a descriptive <title> of 50–60 characters.",
        ok_rec="Keep the title unique and lead with the main keyword.",
        warn_rec="Rewrite the title to 50–60 characters so search results do not truncate it.",
    )


def check_description(value, base_url):
    return length_rule(
        value, name="Meta description", minimum=70, maximum=160, ok_score=95, aim="120–160",
        missing_rec="Add a meta description of 120–160 characters summarizing the page.",
        ok_rec="Keep the description specific and include a call to action.",
        warn_rec="Rewrite the description to 120–160 characters.",
    )


def check_keywords(value, base_url):
    if value is None:
        return verdict(WARNING, 50, "Meta keywords not found.",
                       "Optional: search engines ignore keywords, but a short list documents the page focus.")

    count = len([k for k in value.split(",") if k.strip()])
    if count <= MAX_KEYWORDS:
        return verdict(OK, 80, f"{count} keywords defined.",
                       "Keep keywords aligned with the page content.",
                       value=value, length=len(value))
    return verdict(WARNING, 55, f"{count} keywords defined — keep it to {MAX_KEYWORDS} or fewer.",
                   f"Trim the list to the {MAX_KEYWORDS} most relevant keywords.",
                   value=value, length=len(value))


def check_canonical(value, base_url):
    if value is None:
        # Non-critical, but scored 0.
        return verdict(WARNING, 0, "Canonical URL not found.",
                       'Add <link rel="canonical"> pointing to the preferred URL of this page.')

    resolved = resolve_url(value, base_url)
    if resolved is None:
        return verdict(ERROR, 10, f"Canonical URL could not be resolved — {value}.",
                       "Use an absolute URL such as https://example.com/page.",
                       value=value)
    return verdict(OK, 90, "Canonical URL is set.",
                   "Make sure the canonical URL returns 200 and is indexable.",
                   value=resolved)


def check_robots(value, base_url):
    if value is None:
        return verdict(WARNING, 60, "Meta robots not found — the page is indexable by default.",
                       'Add <meta name="robots" content="index, follow"> to make indexing explicit.')

    lowered = value.lower()
    if any(directive in lowered for directive in BLOCKING_DIRECTIVES):
        return verdict(WARNING, 40, f"Robots directives restrict crawling — {value}.",
                       "Remove noindex/nofollow if this page should appear in search.",
                       value=value)
    return verdict(OK, 85, f"Robots directives allow indexing — {value}.",
                   "No change needed.", value=value)


RULES = [
    ("title", "Title", check_title),
    ('meta[name="description"]', "Meta description", check_description),
    ('meta[name="keywords"]', "Meta keywords", check_keywords),
    ('link[rel="canonical"]', "Canonical URL", check_canonical),
    ('meta[name="robots"]', "Meta robots", check_robots),
]


def analyze(tags: dict, base_url: str) -> dict:
    return analyze_section("meta", "Meta tags", RULES, tags, base_url)
