"""IUserLookup — read-only storage capability used by uniqueness checks."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IUserLookup(Protocol):
    """Lookup-by-field capability of the user store.

    Implementations return the matching record or ``None`` and raise
    :class:`~registration_validation.primitives.exceptions.RecordLookupError`
    when the underlying storage fails. They must be safe to call
    concurrently; the validator never writes through this interface.
    """

    async def find_by_email(self, email: str) -> Any | None: ...

    async def find_by_cpf(self, cpf: str) -> Any | None: ...
