"""Tests for section aggregation and report composition."""

from seoscope.scorer import (
    build_issues,
    build_missing,
    build_results,
    round_half_up,
    summarize,
    worst_status,
)


def tag(name, label, status, score, value=None):
    return {
        "tag": name, "label": label, "value": value, "length": None,
        "status": status, "score": score,
        "message": f"{label} message", "recommendation": f"{label} fix",
    }


def section(section_id, tags):
    summary = summarize(tags)
    return {"id": section_id, "label": section_id, "tags": tags, **summary}


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(87.5) == 88
    assert round_half_up(87.49) == 87
    assert round_half_up(0) == 0


def test_worst_status():
    assert worst_status(["ok", "warning", "ok"]) == "warning"
    assert worst_status(["warning", "error", "ok"]) == "error"
    assert worst_status(["ok"]) == "ok"
    assert worst_status([]) == "ok"


def test_summarize():
    result = summarize([
        tag("a", "A", "ok", 95),
        tag("b", "B", "warning", 60),
    ])

    assert result == {"score": 78, "status": "warning"}


def test_issues_are_non_ok_tags_sorted_errors_first():
    sections = [
        section("meta", [
            tag("title", "Title", "warning", 60, "Short"),
            tag("desc", "Meta description", "ok", 95, "fine"),
        ]),
        section("openGraph", [
            tag("og:image", "og:image", "error", 0),
            tag("og:type", "og:type", "warning", 55),
        ]),
    ]

    issues = build_issues(sections)

    assert [i["id"] for i in issues] == ["openGraph-og:image", "meta-title", "openGraph-og:type"]
    assert issues[0] == {
        "id": "openGraph-og:image",
        "tag": "og:image",
        "section": "openGraph",
        "severity": "error",
        "message": "og:image message",
        "recommendation": "og:image fix",
    }


def test_missing_only_counts_absent_errors_once():
    sections = [
        section("meta", [
            tag("title", "Title", "error", 0),
            tag("canonical", "Canonical URL", "error", 10, "http://[bad"),
            tag("robots", "Meta robots", "warning", 60),
        ]),
        section("other", [
            tag("title-again", "Title", "error", 0),
        ]),
    ]

    assert build_missing(sections) == ["Title"]


def test_build_results_summary():
    sections = [
        section("meta", [tag("a", "A", "ok", 90)]),
        section("openGraph", [tag("b", "B", "ok", 85)]),
        section("twitter", [tag("c", "C", "warning", 60)]),
    ]

    report = build_results(sections, "https://example.com", "https://example.com/", "https://example.com/")

    assert report["summary"] == {
        "overallScore": 78,
        "status": "warning",
        "sectionScores": {"meta": 90, "openGraph": 85, "twitter": 60},
    }
    assert report["url"] == "https://example.com"
    assert report["finalUrl"] == "https://example.com/"
    assert report["fetchedAt"].endswith("Z")
    assert set(report["previews"]) == {"google", "openGraph", "twitter"}
