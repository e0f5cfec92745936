"""
Main analysis engine — orchestrates fetch, parse, analyze, score.
"""

import logging
import time

from .config import Settings
from .errors import FetchFailedError, FetchTimeoutError, UpstreamStatusError
from .fetcher import fetch_page
from .parser import parse_html
from .scorer import build_results
from .urls import pick_base_url
from .analyzers import meta, open_graph, twitter

logger = logging.getLogger(__name__)

SECTION_ANALYZERS = [meta, open_graph, twitter]


def analyze_html(html: str, requested_url: str, final_url: str | None = None) -> dict:
    """
    Build the SeoAnalysis report for already-fetched HTML.

    Pure apart from the fetchedAt timestamp. Relative tag values are
    resolved against final_url, then requested_url, then a placeholder.
    """
    final_url = final_url or requested_url
    base_url = pick_base_url(final_url, requested_url)

    tags = parse_html(html)
    sections = [analyzer.analyze(tags, base_url) for analyzer in SECTION_ANALYZERS]

    return build_results(
        sections=sections,
        url=requested_url,
        final_url=final_url,
        base_url=base_url,
    )


async def run_analysis(url: str, settings: Settings | None = None) -> dict:
    """
    Fetch `url` and analyze it.

    Raises:
        FetchTimeoutError: the page did not answer in time
        FetchFailedError: network-level failure
        UpstreamStatusError: the page answered with a non-2xx status
    """
    settings = settings or Settings()
    start = time.time()

    fetch_result = await fetch_page(
        url,
        timeout=settings.fetch_timeout,
        user_agent=settings.user_agent,
    )

    if fetch_result.get("timed_out"):
        raise FetchTimeoutError("Timed out fetching the page.", fetch_result["error"])
    if fetch_result.get("error"):
        raise FetchFailedError("Failed to fetch the page.", fetch_result["error"])

    status_code = fetch_result["status_code"]
    if not 200 <= status_code < 300:
        logger.info("Upstream %s answered %s", url, status_code)
        raise UpstreamStatusError(status_code)

    results = analyze_html(
        fetch_result["html"],
        requested_url=url,
        final_url=fetch_result.get("final_url", url),
    )

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "Analyzed %s in %dms: score %d, %d issues",
        url, duration_ms, results["summary"]["overallScore"], len(results["issues"]),
    )
    return results
