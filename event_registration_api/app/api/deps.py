"""
Shared dependencies and helpers for route handlers.

The registration service and the settings are created by
``create_app`` and stored on ``app.state``; handlers receive them
through the dependencies below rather than importing module globals.
"""

import logging
from typing import NoReturn

from fastapi import HTTPException, Request

from ..core.config import Settings
from ..services.registration_service import RegistrationService

logger = logging.getLogger("event_registration_api.requests")


def get_registration_service(request: Request) -> RegistrationService:
    return request.app.state.registration_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def log_request(line: str, status_code: int, reason: str) -> None:
    """Write one request line, e.g. ``GET /eventreg/events/1 => 200 OK``."""
    logger.info("%s => %d %s", line, status_code, reason)


def abort(line: str, status_code: int, reason: str, detail: str) -> NoReturn:
    """Log the failed request and raise the matching ``HTTPException``."""
    log_request(line, status_code, f"{reason}: {detail}")
    raise HTTPException(status_code=status_code, detail=detail)


def request_line(request: Request) -> str:
    return f"{request.method} {request.url.path}"
