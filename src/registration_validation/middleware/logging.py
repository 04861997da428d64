"""LoggingMiddleware — logs each registration attempt and its outcome."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware
from ..primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger("registration_validation.middleware")


class LoggingMiddleware(IMiddleware):
    """Logs payload handling — outcome and duration.

    Field values are never logged; only the names of rejected fields.
    """

    async def __call__(
        self,
        payload: Any,
        next_handler: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        logger.info("Handling registration payload")
        start = time.perf_counter()
        try:
            result = await next_handler(payload)
        except ValidationError as exc:
            elapsed = (time.perf_counter() - start) * 1000
            logger.info(
                "Registration rejected after %.2fms (fields=%s)",
                elapsed,
                ",".join(exc.errors),
            )
            raise
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("Registration failed after %.2fms", elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Registration completed in %.2fms", elapsed)
        return result
