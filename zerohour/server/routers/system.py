from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

import zerohour
from zerohour.engine.state_engine import format_timestamp, utc_now

router = APIRouter(tags=["system"])

SERVICE_NAME = "zerohour-demo-backend"


@router.get("/health")
def health_check() -> Dict[str, Any]:
    """Simple health check endpoint."""
    return {"status": "healthy", "service": SERVICE_NAME, "timestamp": format_timestamp(utc_now())}


@router.get("/api")
def api_index() -> Dict[str, Any]:
    """Human-readable endpoint index."""
    return {
        "service": "ZeroHour Demo Backend",
        "version": zerohour.__version__,
        "auth": "Authorization: Bearer <admin token>",
        "endpoints": {
            "health": "GET /health",
            "ui": "GET / (placeholder frontend, when present)",
            "scenario": {
                "current": "GET /scenario/current",
                "list": "GET /scenario/list",
            },
            "exposure": {
                "summary": "GET /exposure/summary → { risk_level, confidence, domains, summary }",
                "domains": "GET /exposure/domains → { legal, cyber, reputational, third_party }",
                "timeline": "GET /exposure/timeline → { past, present, next }",
                "signals": "GET /exposure/signals → [ { date, category, title, description, trajectory, highlighted } ]",
            },
            "target": {
                "current": "GET /target/current → { name, id }",
                "countdown": "GET /target/countdown → { detected, window_closes, exposure_lost, minutes_remaining, date }",
            },
            "admin": {
                "setScenario": "POST /admin/setScenario (requires Bearer token)",
                "setState": "POST /admin/setState (requires Bearer token)",
                "reset": "POST /admin/reset (requires Bearer token)",
            },
        },
    }
