from __future__ import annotations

from flask import Blueprint

from ac2closet.app.config import build_number

bp = Blueprint("status", __name__)

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}

BANNER_PREFIX = "Java E-Commerce API is running! Build: "


def banner():
    """Deployment check: which build is serving traffic right now."""
    # "null" is what the service has always printed when BUILD_NUMBER is unset
    return BANNER_PREFIX + (build_number() or "null"), 200, TEXT_PLAIN


# Liveness probe for the orchestrator
@bp.get("/health")
def health():
    return "OK", 200, TEXT_PLAIN
