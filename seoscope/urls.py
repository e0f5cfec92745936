"""
Resolve tag values that may hold relative URLs against the page URL.
"""

import re
from urllib.parse import urljoin, urlparse

PLACEHOLDER_BASE = "http://localhost/"

# "http:host/path" or "https:/host": scheme without the authority slashes
SLASHLESS_SCHEME = re.compile(r"^(https?):(?![/\\]{2})[/\\]?", re.IGNORECASE)


def _is_valid(url: str) -> bool:
    try:
        parsed = urlparse(url)
        parsed.port
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    if parsed.scheme in ("http", "https"):
        host = parsed.hostname or ""
        return bool(host) and not any(c.isspace() for c in host)
    return True


def pick_base_url(final_url: str | None, requested_url: str | None) -> str:
    """First absolute URL of final, requested, placeholder."""
    for candidate in (final_url, requested_url):
        if candidate and _is_valid(candidate.strip()):
            return candidate.strip()
    return PLACEHOLDER_BASE


def resolve_url(raw: str | None, base: str) -> str | None:
    """Absolute form of `raw` relative to `base`, or None if it cannot be parsed."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    raw = _add_authority_slashes(raw, base)
    try:
        resolved = urljoin(base, raw)
    except ValueError:
        return None
    return resolved if _is_valid(resolved) else None


def hostname(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def _add_authority_slashes(raw: str, base: str) -> str:
    """
    Browsers read "http:foo.png" as "http://foo.png" when the base uses
    another scheme; with the same scheme it stays a relative path.
    """
    match = SLASHLESS_SCHEME.match(raw)
    if match is None:
        return raw
    scheme = match.group(1).lower()
    try:
        base_scheme = urlparse(base).scheme.lower()
    except ValueError:
        base_scheme = ""
    if scheme == base_scheme:
        return raw
    return f"{scheme}://{raw[match.end():]}"
