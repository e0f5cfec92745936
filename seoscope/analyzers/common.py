"""Shared building blocks for the per-tag rules."""

from ..scorer import summarize

OK = "ok"
WARNING = "warning"
ERROR = "error"


def verdict(status, score, message, recommendation=None, value=None, length=None) -> dict:
    return {
        "value": value,
        "length": length,
        "status": status,
        "score": score,
        "message": message,
        "recommendation": recommendation,
    }


def length_rule(value, *, name, minimum, maximum, ok_score, aim, missing_rec, ok_rec, warn_rec) -> dict:
    """
    The common shape of the text-length rules: absent is a critical
    omission (error, 0), inside [minimum, maximum] passes, anything else
    is a warning scored 60.
    """
    if value is None:
        return verdict(ERROR, 0, f"{name} not found.", missing_rec)

    length = len(value)
    if minimum <= length <= maximum:
        return verdict(OK, ok_score, f"{name} length is {length} characters.",
                       ok_rec, value=value, length=length)
    return verdict(WARNING, 60, f"{name} length is {length} characters — aim for {aim}.",
                   warn_rec, value=value, length=length)


def analyze_section(section_id: str, label: str, rules: list, tags: dict, base_url: str) -> dict:
    """Run each (selector, label, check) rule in order and summarize the section."""
    results = []
    for selector, tag_label, check in rules:
        result = check(tags.get(selector), base_url)
        results.append({"tag": selector, "label": tag_label, **result})

    summary = summarize(results)
    return {
        "id": section_id,
        "label": label,
        "status": summary["status"],
        "score": summary["score"],
        "tags": results,
    }
