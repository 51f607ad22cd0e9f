"""API routes for the AWS Billing Exporter.

Endpoints
─────────
GET /               – Landing page linking to the metrics path.
GET /health         – Liveness probe, never calls AWS.
GET <METRICS_PATH>  – One scrape: Cost Explorer figures in Prometheus text format.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from helpers.constants import AWS_BILLING_METRICS, METRICS_PATH

router = APIRouter()

LANDING_PAGE = """<html>
             <head><title>AWS Billing Exporter</title></head>
             <body>
             <h1>AWS Billing Exporter</h1>
             <p><a href='{metrics_path}'>Metrics</a></p>
             </body>
             </html>"""

# Lazy singleton: the registry is built on first use (or at startup)
_registry: Any = None


def _get_registry():
    global _registry
    if _registry is None:
        from services.billing_collector import AwsBillingCollector
        from services.registry import build_registry

        _registry = build_registry(
            AwsBillingCollector(metric_filter=AWS_BILLING_METRICS)
        )
    return _registry


# ── Landing page ─────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse)
def landing_page() -> HTMLResponse:
    return HTMLResponse(content=LANDING_PAGE.format(metrics_path=METRICS_PATH))


@router.get("/health")
def health():
    """Lightweight liveness probe."""
    return {"status": "healthy", "service": "aws-billing-exporter"}


# ── Scrape ───────────────────────────────────────────────────────────────

@router.get(METRICS_PATH)
def metrics() -> Response:
    """Run one collect cycle and return the exposition text.

    Declared sync so FastAPI runs it in its threadpool; the Cost Explorer
    call blocks.
    """
    return Response(
        content=generate_latest(_get_registry()), media_type=CONTENT_TYPE_LATEST
    )


@router.get("/favicon.ico")
def favicon() -> Response:
    return Response(status_code=204)
