"""
Score aggregator — reduces tag verdicts to section results, and section
results to the final SeoAnalysis report.

All means are rounded half-up: 92.5 -> 93.
"""

import math
from datetime import datetime, timezone

from .previews import build_previews

SEVERITY_ORDER = {"error": 0, "warning": 1, "ok": 2}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def mean_score(scores: list[int]) -> int:
    return round_half_up(sum(scores) / len(scores)) if scores else 0


def worst_status(statuses) -> str:
    return min(statuses, key=lambda s: SEVERITY_ORDER[s], default="ok")


def summarize(tags: list[dict]) -> dict:
    """Score and status of a group of tag verdicts."""
    return {
        "score": mean_score([t["score"] for t in tags]),
        "status": worst_status(t["status"] for t in tags),
    }


def build_issues(sections: list[dict]) -> list[dict]:
    """One issue per non-ok tag, errors first. The sort is stable."""
    issues = []
    for section in sections:
        for tag in section["tags"]:
            if tag["status"] == "ok":
                continue
            issues.append({
                "id": f"{section['id']}-{tag['tag']}",
                "tag": tag["label"],
                "section": section["id"],
                "severity": tag["status"],
                "message": tag["message"],
                "recommendation": tag.get("recommendation") or "",
            })

    issues.sort(key=lambda i: SEVERITY_ORDER[i["severity"]])
    return issues


def build_missing(sections: list[dict]) -> list[str]:
    """Labels of critical tags that are absent, not merely malformed."""
    missing = []
    for section in sections:
        for tag in section["tags"]:
            if tag["status"] == "error" and tag.get("value") is None:
                if tag["label"] not in missing:
                    missing.append(tag["label"])
    return missing


def build_results(sections: list[dict], url: str, final_url: str, base_url: str) -> dict:
    """Aggregate section results into the final report."""
    summary = {
        "overallScore": mean_score([s["score"] for s in sections]),
        "status": worst_status(s["status"] for s in sections),
        "sectionScores": {s["id"]: s["score"] for s in sections},
    }

    return {
        "url": url,
        "finalUrl": final_url,
        "fetchedAt": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "summary": summary,
        "sections": sections,
        "issues": build_issues(sections),
        "missing": build_missing(sections),
        "previews": build_previews(sections, final_url, base_url),
    }
