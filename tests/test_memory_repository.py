"""Tests for InMemoryUserRepository."""

from __future__ import annotations

import pytest

from registration_validation.adapters.memory import InMemoryUserRepository
from registration_validation.ports.lookup import IUserLookup
from registration_validation.primitives.exceptions import (
    PersistenceError,
    RecordLookupError,
)

from .factories import make_user


@pytest.mark.asyncio
class TestInMemoryUserRepository:
    """Test InMemoryUserRepository storage and lookups."""

    async def test_implements_lookup_port(self, repo: InMemoryUserRepository) -> None:
        assert isinstance(repo, IUserLookup)

    async def test_add_and_get(self, repo: InMemoryUserRepository) -> None:
        user = make_user()

        user_id = await repo.add(user)

        assert user_id == user.id
        assert await repo.get(user.id) == user
        assert len(repo) == 1

    async def test_get_nonexistent(self, repo: InMemoryUserRepository) -> None:
        assert await repo.get("nonexistent") is None

    async def test_delete(self, repo: InMemoryUserRepository) -> None:
        user = make_user()
        await repo.add(user)

        assert await repo.delete(user.id) == user.id
        assert len(repo) == 0
        assert await repo.delete("nonexistent") == "nonexistent"

    async def test_list_all(self, repo: InMemoryUserRepository) -> None:
        assert await repo.list_all() == []

        await repo.add(make_user(email="a@email.com", cpf="52998224725"))
        await repo.add(make_user(email="b@email.com"))

        assert len(await repo.list_all()) == 2

    async def test_find_by_email(self, repo: InMemoryUserRepository) -> None:
        user = make_user()
        await repo.add(user)

        assert await repo.find_by_email("maria.silva@email.com.br") == user
        assert await repo.find_by_email("outra@email.com.br") is None

    async def test_find_by_cpf(self, repo: InMemoryUserRepository) -> None:
        user = make_user()
        await repo.add(user)

        assert await repo.find_by_cpf("31286578078") == user
        assert await repo.find_by_cpf("52998224725") is None

    async def test_seeded_users(self) -> None:
        user = make_user()
        repo = InMemoryUserRepository([user])

        assert await repo.find_by_cpf(user.cpf) == user

    async def test_failing_lookups(self, repo: InMemoryUserRepository) -> None:
        repo.fail_lookups_on("cpf")

        with pytest.raises(RecordLookupError) as exc_info:
            await repo.find_by_cpf("31286578078")

        assert exc_info.value.field == "cpf"
        assert isinstance(exc_info.value, PersistenceError)
        assert await repo.find_by_email("maria.silva@email.com.br") is None

    async def test_clear_resets_store_and_failures(self) -> None:
        repo = InMemoryUserRepository([make_user()], failing_fields={"email"})

        repo.clear()

        assert len(repo) == 0
        assert await repo.find_by_email("maria.silva@email.com.br") is None
