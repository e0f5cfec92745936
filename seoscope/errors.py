"""
Failures surfaced by the analysis service, and their HTTP mapping.

Only fetch-level problems become exceptions. Problems inside the page
(missing or malformed tags) are reported as tag verdicts instead.
"""


class AnalysisError(Exception):
    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class UpstreamStatusError(AnalysisError):
    """The page answered with a non-2xx status."""

    status_code = 502

    def __init__(self, upstream_status: int):
        super().__init__(f"Upstream responded with status {upstream_status}.")
        self.upstream_status = upstream_status

    def to_payload(self) -> dict:
        return {"error": self.message, "status": self.upstream_status}


class FetchFailedError(AnalysisError):
    status_code = 502


class FetchTimeoutError(FetchFailedError):
    status_code = 504


def map_analysis_error(exc: Exception) -> tuple[int, dict]:
    """Translate an exception raised by the engine into (status, JSON body)."""
    if isinstance(exc, AnalysisError):
        return exc.status_code, exc.to_payload()
    return 500, {"error": "Analysis failed."}
