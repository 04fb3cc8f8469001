from __future__ import annotations

import logging
import os
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .core import (
    COMMON_PASSWORDS,
    LONG_PASSWORD_BONUS_LENGTH,
    MAX_SCORE,
    MEDIUM_THRESHOLD,
    MIN_LENGTH,
    REQUIREMENTS,
    STRONG_THRESHOLD,
    analyze,
)

logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    password: Optional[str] = Field(default=None, description="Password to analyze. Never stored or logged.")
    include_password: bool = Field(default=False, description="Echo the submitted password back in the result.")


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Password Analyzer API",
        version=__version__,
        description="Scores passwords against a fixed checklist of character classes, length and common-password rules.",
    )

    def _analyze(password: Optional[str], include_password: bool = False) -> Dict[str, Any]:
        result = analyze(password)
        logger.info("analyzed password: length=%d score=%d strength=%s", result.length, result.score, result.strength)
        return result.as_dict(include_password=include_password)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        request_id = str(uuid.uuid4())
        logger.exception("unhandled error on %s %s (request_id=%s)", request.method, request.url.path, request_id)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "request_id": request_id},
        )

    @app.get("/")
    def root() -> Dict[str, Any]:
        return {
            "tool": "Password Analyzer",
            "version": __version__,
            "endpoints": ["/health", "/privacy", "/analyze", "/password/analyze", "/requirements"],
            "note": "Passwords are analyzed in memory and never stored.",
        }

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/privacy")
    def privacy() -> Dict[str, Any]:
        return {
            "stores_passwords": False,
            "logs_passwords": False,
            "statement": "Submitted passwords are scored in memory for the duration of the request and then discarded.",
        }

    @app.get("/password/analyze")
    def analyze_form() -> Dict[str, Any]:
        return {
            "method": "POST",
            "content_type": "application/x-www-form-urlencoded",
            "fields": {"password": "Password to analyze (optional; empty input scores 0)."},
            "requirements": list(REQUIREMENTS),
        }

    @app.post("/password/analyze")
    def analyze_form_submit(password: Optional[str] = Form(default=None)) -> Dict[str, Any]:
        return _analyze(password)

    @app.post("/analyze")
    def analyze_json(req: AnalyzeRequest) -> Dict[str, Any]:
        return _analyze(req.password, include_password=req.include_password)

    @app.get("/requirements")
    def requirements() -> Dict[str, Any]:
        return {
            "requirements": list(REQUIREMENTS),
            "min_length": MIN_LENGTH,
            "long_password_bonus_after": LONG_PASSWORD_BONUS_LENGTH,
            "common_passwords": len(COMMON_PASSWORDS),
            "max_score": MAX_SCORE,
            "thresholds": {"Strong": STRONG_THRESHOLD, "Medium": MEDIUM_THRESHOLD, "Weak": 0},
        }

    return app
