"""InMemoryUserRepository — dict-backed user store for tests and demos."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from registration_validation.domain.payload import CPF, EMAIL
from registration_validation.ports.lookup import IUserLookup
from registration_validation.primitives.exceptions import RecordLookupError

if TYPE_CHECKING:
    import builtins

    from registration_validation.domain.user import User


class InMemoryUserRepository(IUserLookup):
    """In-memory implementation of ``IUserLookup``.

    Stores users in a plain dict keyed by their ``id``. Lookups for the
    fields named in ``failing_fields`` raise ``RecordLookupError`` and
    ``latency`` delays every lookup, which lets tests drive the
    validator's failure and concurrency paths without patching.
    """

    def __init__(
        self,
        users: builtins.list[User] | None = None,
        *,
        failing_fields: set[str] | None = None,
        latency: float = 0.0,
    ) -> None:
        self._store: dict[str, User] = {user.id: user for user in users or []}
        self._failing_fields: set[str] = set(failing_fields or ())
        self._latency = latency

    async def add(self, user: User) -> str:
        self._store[user.id] = user
        return user.id

    async def get(self, user_id: str) -> User | None:
        return self._store.get(user_id)

    async def delete(self, user_id: str) -> str:
        self._store.pop(user_id, None)
        return user_id

    async def list_all(self) -> builtins.list[User]:
        return list(self._store.values())

    async def find_by_email(self, email: str) -> User | None:
        await self._before_lookup(EMAIL, email)
        return next((u for u in self._store.values() if u.email == email), None)

    async def find_by_cpf(self, cpf: str) -> User | None:
        await self._before_lookup(CPF, cpf)
        return next((u for u in self._store.values() if u.cpf == cpf), None)

    async def _before_lookup(self, field: str, value: str) -> None:
        if self._latency:
            await asyncio.sleep(self._latency)
        if field in self._failing_fields:
            raise RecordLookupError(field, value, reason="storage unavailable")

    # ── Test helpers ─────────────────────────────────────────────

    def fail_lookups_on(self, *fields: str) -> None:
        """Make subsequent lookups on *fields* raise ``RecordLookupError``."""
        self._failing_fields.update(fields)

    def clear(self) -> None:
        self._store.clear()
        self._failing_fields.clear()

    def __len__(self) -> int:
        return len(self._store)
