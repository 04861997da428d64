"""ValidatorMiddleware — gates the next stage on an accepted verdict."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware
from ..primitives.exceptions import ValidationError
from ..validation.verdict import Rejected

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..ports.validation import IValidator


class ValidatorMiddleware(IMiddleware):
    """Runs ``IValidator.validate()`` before the handler.

    A rejected payload raises ValidationError carrying the error map and
    the handler is never called. ``ValidationAbortedError`` from the
    validator propagates unchanged.
    """

    def __init__(self, validator: IValidator) -> None:
        self._validator = validator

    async def __call__(
        self,
        payload: Any,
        next_handler: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        verdict = await self._validator.validate(payload)
        if isinstance(verdict, Rejected):
            raise ValidationError(verdict.errors)
        return await next_handler(payload)
