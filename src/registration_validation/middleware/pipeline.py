"""build_pipeline — chain middleware in front of a registration handler."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..ports.middleware import IMiddleware


def build_pipeline(
    middlewares: list[IMiddleware],
    handler_fn: Callable[[Any], Awaitable[Any]],
) -> Callable[[Any], Awaitable[Any]]:
    """Build a LIFO middleware chain ending at *handler_fn*.

    The first middleware in the list is the **outermost** wrapper, so
    ``[LoggingMiddleware(), ValidatorMiddleware(v)]`` logs rejections too.
    The payload reaching *handler_fn* is the one the validator accepted;
    a rejection or an aborted run never reaches the handler.
    """
    pipeline: Callable[[Any], Awaitable[Any]] = handler_fn

    for mw in reversed(middlewares):
        current_next = pipeline  # capture for closure

        async def _wrapper(
            payload: Any,
            _mw: IMiddleware = mw,
            _next: Callable[[Any], Awaitable[Any]] = current_next,
        ) -> Any:
            return await _mw(payload, _next)

        pipeline = _wrapper

    return pipeline
