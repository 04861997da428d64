"""IMiddleware — LIFO middleware protocol around the next processing stage."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@runtime_checkable
class IMiddleware(Protocol):
    """Protocol for middleware sitting in front of a registration handler.

    A middleware receives the incoming payload and either hands it on by
    awaiting ``next_handler`` or stops the chain by raising.
    Chains are built in **LIFO** order (first registered = outermost).
    """

    async def __call__(
        self,
        payload: Any,
        next_handler: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        """Run the middleware and call *next_handler* to proceed.

        Parameters
        ----------
        payload:
            The registration payload (a mapping or a ``RegistrationPayload``).
        next_handler:
            Async callable representing the rest of the pipeline.

        Returns
        -------
        Whatever the rest of the chain returns.
        """
        ...
