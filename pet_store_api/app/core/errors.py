"""
Error handling for the Pet Store API.

Every failure the API reports is a client input error: HTTP 400 with a
JSON body of the shape::

    {"error": "Bad Request", "message": "...", ...context}

Services raise :class:`BadRequestError` with a message and any context
keys (``id``, ``body``) that help the caller.  Request validation
failures detected by FastAPI before a handler runs are reshaped into
the same body by :func:`validation_error_handler`.
"""

import logging
from typing import Any, Dict

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

BAD_REQUEST = "Bad Request"


class BadRequestError(Exception):
    """Raised when a request cannot be served because of its input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to the API error body."""
        return {"error": BAD_REQUEST, "message": self.message, **self.context}


async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report FastAPI/pydantic validation failures as a plain 400.

    The individual pydantic errors are kept under ``errors`` so that
    callers can tell which parameter was wrong.
    """
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.warning("%s %s rejected: invalid request %s", request.method, request.url.path, errors)
    content = {"error": BAD_REQUEST, "message": "Invalid request", "errors": errors}
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(content))
