"""UniquenessChecker — async "already exists" check for one field."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger("registration_validation.uniqueness")


@dataclass(frozen=True)
class UniquenessChecker:
    """Binds a field to the storage lookup that enforces its uniqueness.

    ``lookup`` is an async callable returning the stored record with the
    given value, or ``None``. Errors raised by it are not caught here;
    the orchestrator decides what a failed lookup means for the run.
    """

    field_name: str
    message: str
    lookup: Callable[[str], Awaitable[Any | None]]

    def applies_to(self, value: str) -> bool:
        """Empty values have nothing to look up."""
        return bool(value)

    async def check(self, value: str) -> list[str]:
        record = await self.lookup(value)
        if record is None:
            return []
        logger.debug("%s already registered", self.field_name)
        return [self.message]
