"""
SEOScope — FastAPI backend

Endpoints:
  GET /api/analyze?url=   — Audit meta, Open Graph and Twitter Card tags
  GET /api/health         — Health check
"""

import ipaddress
import logging
from urllib.parse import urlparse

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, HttpUrl, ValidationError

from .config import Settings, configure_logging
from .engine import run_analysis
from .errors import map_analysis_error

logger = logging.getLogger(__name__)

BLOCKED_HOSTS = ["localhost"]


class AnalyzeQuery(BaseModel):
    url: HttpUrl


class TagResult(BaseModel):
    tag: str
    label: str
    value: str | None = None
    length: int | None = None
    status: str
    score: int
    message: str
    recommendation: str | None = None


class SectionResult(BaseModel):
    id: str
    label: str
    status: str
    score: int
    tags: list[TagResult]


class SeoIssue(BaseModel):
    id: str
    tag: str
    section: str
    severity: str
    message: str
    recommendation: str


class SearchPreview(BaseModel):
    title: str
    description: str
    url: str
    domain: str


class SocialPreview(BaseModel):
    title: str
    description: str
    image: str | None = None
    url: str
    siteName: str


class TwitterPreview(SocialPreview):
    card: str


class SeoPreviews(BaseModel):
    google: SearchPreview
    openGraph: SocialPreview
    twitter: TwitterPreview


class SeoSummary(BaseModel):
    overallScore: int
    status: str
    sectionScores: dict[str, int]


class SeoAnalysis(BaseModel):
    url: str
    finalUrl: str
    fetchedAt: str
    summary: SeoSummary
    sections: list[SectionResult]
    issues: list[SeoIssue]
    missing: list[str]
    previews: SeoPreviews


def is_private_host(host: str | None) -> bool:
    if not host:
        return False
    host = host.rstrip(".").lower()
    if host in BLOCKED_HOSTS or host.endswith(".localhost"):
        return True
    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False
    return (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_unspecified
        or address.is_reserved
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="SEOScope", version="1.0.0")
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allow_origin],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=86400,
    )

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    @app.get(
        "/api/analyze",
        response_model=SeoAnalysis,
        response_model_exclude_none=True,
    )
    async def analyze(request: Request, url: str = ""):
        try:
            query = AnalyzeQuery(url=url.strip())
        except ValidationError as e:
            return JSONResponse(
                status_code=400,
                content={
                    "error": "Invalid URL",
                    "details": e.errors(include_url=False, include_context=False, include_input=False),
                },
            )

        target = str(query.url)
        if is_private_host(urlparse(target).hostname):
            return JSONResponse(status_code=400, content={"error": "Private/local URLs not allowed"})

        try:
            return await run_analysis(target, request.app.state.settings)
        except Exception as e:
            status_code, payload = map_analysis_error(e)
            if status_code == 500:
                logger.exception("Analysis of %s failed", target)
            return JSONResponse(status_code=status_code, content=payload)

    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run("seoscope.main:create_app", factory=True, host=settings.host, port=settings.port)
