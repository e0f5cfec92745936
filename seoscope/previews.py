"""
Preview payloads approximating how the page renders as a Google result,
an Open Graph card and a Twitter card.

Each field is an ordered list of candidates; the first present one wins.
"""

from .urls import hostname


def first_present(*candidates):
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def tag_values(sections: list[dict]) -> dict:
    """
    {tag: value} for every tag with a usable value. Values of error
    verdicts are skipped: those are either absent or malformed.
    """
    values = {}
    for section in sections:
        for tag in section["tags"]:
            if tag["status"] != "error" and tag.get("value"):
                values[tag["tag"]] = tag["value"]
    return values


def build_previews(sections: list[dict], final_url: str, base_url: str) -> dict:
    values = tag_values(sections)
    site = hostname(base_url)
    page_url = final_url or base_url

    google = {
        "title": first_present(
            values.get("title"),
            values.get('meta[property="og:title"]'),
            "Preview",
        ),
        "description": first_present(
            values.get('meta[name="description"]'),
            values.get('meta[property="og:description"]'),
        ) or "",
        "url": page_url,
        "domain": site,
    }

    open_graph = {
        "title": first_present(values.get('meta[property="og:title"]'), google["title"]),
        "description": first_present(
            values.get('meta[property="og:description"]'), google["description"],
        ) or "",
        "url": first_present(values.get('meta[property="og:url"]'), page_url),
        "siteName": site,
    }
    og_image = values.get('meta[property="og:image"]')
    if og_image:
        open_graph["image"] = og_image

    twitter = {
        "title": first_present(values.get('meta[name="twitter:title"]'), open_graph["title"]),
        "description": first_present(
            values.get('meta[name="twitter:description"]'), open_graph["description"],
        ) or "",
        "url": open_graph["url"],
        "siteName": site,
        "card": first_present(values.get('meta[name="twitter:card"]'), "summary_large_image"),
    }
    twitter_image = first_present(values.get('meta[name="twitter:image"]'), og_image)
    if twitter_image:
        twitter["image"] = twitter_image

    return {"google": google, "openGraph": open_graph, "twitter": twitter}
