"""Client-facing error responses for rejected or failed registrations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from . import messages
from .primitives.exceptions import ValidationError

logger = logging.getLogger("registration_validation.responses")

BAD_REQUEST = 400
INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class ErrorResponse:
    """Status code plus a ``{"errors": {field: [messages]}}`` body."""

    status: int
    errors: dict[str, list[str]]

    @property
    def body(self) -> dict[str, Any]:
        return {"errors": {name: list(msgs) for name, msgs in self.errors.items()}}


def build_error_response(status: int, errors: dict[str, list[str]]) -> ErrorResponse:
    return ErrorResponse(status=status, errors=errors)


def error_response_for(exc: Exception) -> ErrorResponse:
    """Map an exception raised by the pipeline to a client response.

    Rejections become a 400 with the full error map. Anything else, aborted
    validation runs included, becomes the generic 500 body so storage
    details never reach the client.
    """
    if isinstance(exc, ValidationError):
        return build_error_response(BAD_REQUEST, exc.errors)
    logger.error("Internal error while handling registration: %r", exc)
    return build_error_response(
        INTERNAL_SERVER_ERROR, {"msg": [messages.INTERNAL_ERROR]}
    )
