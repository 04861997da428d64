"""Tests for RegistrationValidator — merging, verdicts and lookup concurrency."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from registration_validation.adapters.memory import InMemoryUserRepository
from registration_validation.ports.lookup import IUserLookup
from registration_validation.ports.validation import IValidator
from registration_validation.primitives.exceptions import (
    RecordLookupError,
    ValidationAbortedError,
)
from registration_validation.validation.field import FieldValidator
from registration_validation.validation.orchestrator import RegistrationValidator
from registration_validation.validation.rules import RequiredRule
from registration_validation.validation.uniqueness import UniquenessChecker
from registration_validation.validation.verdict import Accepted, Rejected

from .factories import make_payload, make_user

REQUIRED = "Campo deve ser preenchido"


def _lookup(**overrides: object) -> AsyncMock:
    lookup = AsyncMock(spec=IUserLookup)
    lookup.find_by_email.return_value = None
    lookup.find_by_cpf.return_value = None
    for name, value in overrides.items():
        setattr(lookup, name, value)
    return lookup


async def _errors(validator: RegistrationValidator, **overrides: object) -> dict:
    verdict = await validator.validate(make_payload(**overrides))
    assert isinstance(verdict, Rejected)
    return verdict.errors


@pytest.mark.asyncio
class TestRegistrationValidator:
    async def test_satisfies_validator_protocol(
        self, validator: RegistrationValidator
    ) -> None:
        assert isinstance(validator, IValidator)

    async def test_all_fields_empty(self, validator: RegistrationValidator) -> None:
        verdict = await validator.validate(
            {"nome": "", "email": "", "senha": "", "cpf": ""}
        )

        assert isinstance(verdict, Rejected)
        assert verdict.errors == {
            "nome": ["Deve ter no minimo 3 caracteres", REQUIRED],
            "email": [REQUIRED],
            "senha": ["Deve ter no minimo 8 caracteres", REQUIRED],
            "cpf": ["CPF inválido", "Está no formato inválido", REQUIRED],
        }
        assert list(verdict.errors) == ["nome", "email", "senha", "cpf"]

    async def test_missing_keys_read_as_empty(
        self, validator: RegistrationValidator
    ) -> None:
        empty = await validator.validate({})
        none = await validator.validate(None)
        explicit = await validator.validate(
            {"nome": None, "email": "", "senha": None, "cpf": ""}
        )

        assert isinstance(empty, Rejected)
        assert empty.errors == none.errors == explicit.errors

    async def test_valid_payload_is_accepted(
        self, validator: RegistrationValidator
    ) -> None:
        verdict = await validator.validate(make_payload())

        assert isinstance(verdict, Accepted)
        assert verdict.is_accepted

    async def test_generated_cpf_is_accepted(
        self, validator: RegistrationValidator, random_cpf: str
    ) -> None:
        verdict = await validator.validate(make_payload(cpf=random_cpf))

        assert isinstance(verdict, Accepted)

    async def test_empty_name(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, nome="") == {
            "nome": ["Deve ter no minimo 3 caracteres", REQUIRED]
        }

    async def test_short_name(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, nome="aa") == {
            "nome": ["Deve ter no minimo 3 caracteres"]
        }

    async def test_long_name(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, nome="lorem ipsum dolor " * 10) == {
            "nome": ["Deve ter no maximo 60 caracteres"]
        }

    async def test_empty_email(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, email="") == {"email": [REQUIRED]}

    async def test_invalid_email(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, email="abc.com") == {
            "email": ["Email inválido"]
        }

    async def test_empty_password(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, senha="") == {
            "senha": ["Deve ter no minimo 8 caracteres", REQUIRED]
        }

    async def test_short_password(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, senha="abcde") == {
            "senha": ["Deve ter no minimo 8 caracteres"]
        }

    async def test_empty_cpf(self, validator: RegistrationValidator) -> None:
        assert await _errors(validator, cpf="") == {
            "cpf": ["CPF inválido", "Está no formato inválido", REQUIRED]
        }

    async def test_cpf_with_wrong_check_digits(
        self, validator: RegistrationValidator
    ) -> None:
        assert await _errors(validator, cpf="31286555078") == {"cpf": ["CPF inválido"]}

    @pytest.mark.parametrize(
        "cpf", ["312.865.780.78", "312-865-780-78", "312/865-780-78"]
    )
    async def test_punctuated_cpf(
        self, validator: RegistrationValidator, cpf: str
    ) -> None:
        assert await _errors(validator, cpf=cpf) == {
            "cpf": ["Está no formato inválido"]
        }

    async def test_existing_email(
        self, repo: InMemoryUserRepository, validator: RegistrationValidator
    ) -> None:
        await repo.add(make_user(cpf="52998224725"))

        assert await _errors(validator) == {"email": ["Email já existe"]}

    async def test_existing_cpf(
        self, repo: InMemoryUserRepository, validator: RegistrationValidator
    ) -> None:
        await repo.add(make_user(email="outra.pessoa@email.com.br"))

        assert await _errors(validator) == {"cpf": ["CPF já existe"]}

    async def test_uniqueness_message_follows_sync_messages(self) -> None:
        lookup = _lookup()
        lookup.find_by_cpf.return_value = object()
        validator = RegistrationValidator(lookup)

        assert await _errors(validator, cpf="312.865.780-78") == {
            "cpf": ["Está no formato inválido", "CPF já existe"]
        }

    async def test_lookup_result_keeps_field_order(self) -> None:
        lookup = _lookup()
        lookup.find_by_email.return_value = object()
        validator = RegistrationValidator(lookup)

        errors = await _errors(validator, nome="", cpf="")

        assert list(errors) == ["nome", "email", "cpf"]
        assert errors["email"] == ["Email já existe"]

    async def test_empty_values_are_not_looked_up(self) -> None:
        lookup = _lookup()
        validator = RegistrationValidator(lookup)

        await validator.validate(make_payload(email="", cpf=""))

        lookup.find_by_email.assert_not_called()
        lookup.find_by_cpf.assert_not_called()

    async def test_lookups_receive_field_values(self) -> None:
        lookup = _lookup()
        validator = RegistrationValidator(lookup)

        await validator.validate(make_payload())

        lookup.find_by_email.assert_awaited_once_with("maria.silva@email.com.br")
        lookup.find_by_cpf.assert_awaited_once_with("31286578078")

    async def test_validation_is_idempotent(
        self, validator: RegistrationValidator
    ) -> None:
        payload = make_payload(nome="a", email="abc.com", cpf="312.865.780-78")

        first = await validator.validate(payload)
        second = await validator.validate(payload)

        assert isinstance(first, Rejected)
        assert isinstance(second, Rejected)
        assert first.errors == second.errors


@pytest.mark.asyncio
class TestLookupConcurrency:
    async def test_lookups_run_concurrently(self) -> None:
        cpf_started = asyncio.Event()

        async def find_by_email(_: str) -> None:
            # Would never return if the cpf lookup only started afterwards.
            await cpf_started.wait()

        async def find_by_cpf(_: str) -> None:
            cpf_started.set()

        validator = RegistrationValidator(
            _lookup(
                find_by_email=AsyncMock(side_effect=find_by_email),
                find_by_cpf=AsyncMock(side_effect=find_by_cpf),
            )
        )

        verdict = await asyncio.wait_for(validator.validate(make_payload()), 1.0)

        assert isinstance(verdict, Accepted)

    async def test_failed_lookup_waits_for_the_other(self) -> None:
        email_done = False

        async def slow_email(_: str) -> None:
            nonlocal email_done
            await asyncio.sleep(0.05)
            email_done = True

        async def failing_cpf(value: str) -> None:
            raise RecordLookupError("cpf", value)

        validator = RegistrationValidator(
            _lookup(
                find_by_email=AsyncMock(side_effect=slow_email),
                find_by_cpf=AsyncMock(side_effect=failing_cpf),
            )
        )

        with pytest.raises(ValidationAbortedError) as exc_info:
            await validator.validate(make_payload())

        assert email_done
        assert set(exc_info.value.failures) == {"cpf"}
        assert isinstance(exc_info.value.__cause__, RecordLookupError)

    async def test_lookup_failure_is_not_a_field_message(self) -> None:
        repo = InMemoryUserRepository(failing_fields={"email"})
        validator = RegistrationValidator(repo)

        with pytest.raises(ValidationAbortedError, match="email"):
            await validator.validate(make_payload(nome=""))

    async def test_all_failures_are_reported(self) -> None:
        repo = InMemoryUserRepository(failing_fields={"email", "cpf"}, latency=0.01)
        validator = RegistrationValidator(repo)

        with pytest.raises(ValidationAbortedError) as exc_info:
            await validator.validate(make_payload())

        assert set(exc_info.value.failures) == {"email", "cpf"}

    async def test_no_pending_tasks_after_abort(self) -> None:
        repo = InMemoryUserRepository(failing_fields={"cpf"}, latency=0.01)
        validator = RegistrationValidator(repo)

        with pytest.raises(ValidationAbortedError):
            await validator.validate(make_payload())

        pending = [
            task
            for task in asyncio.all_tasks()
            if task.get_name().startswith("uniqueness:") and not task.done()
        ]
        assert pending == []

    async def test_lookups_are_cancelled_when_field_rules_raise(self) -> None:
        repo = InMemoryUserRepository(latency=0.05)
        validator = RegistrationValidator(
            repo, field_validators=[FieldValidator("idade", (RequiredRule(),))]
        )

        with pytest.raises(KeyError):
            await validator.validate(make_payload())

        pending = [
            task
            for task in asyncio.all_tasks()
            if task.get_name().startswith("uniqueness:") and not task.done()
        ]
        assert pending == []

    async def test_unknown_uniqueness_field_schedules_nothing(self) -> None:
        lookup = _lookup()
        checkers = [
            UniquenessChecker("email", "Email já existe", lookup.find_by_email),
            UniquenessChecker("idade", "Idade já existe", lookup.find_by_email),
        ]
        validator = RegistrationValidator(lookup, uniqueness_checkers=checkers)

        with pytest.raises(KeyError):
            await validator.validate(make_payload())

        lookup.find_by_email.assert_not_called()

    async def test_independent_runs_share_no_state(
        self, repo: InMemoryUserRepository, validator: RegistrationValidator
    ) -> None:
        await repo.add(make_user(cpf="52998224725"))

        taken, free = await asyncio.gather(
            validator.validate(make_payload()),
            validator.validate(make_payload(email="nova@email.com.br")),
        )

        assert isinstance(taken, Rejected)
        assert taken.errors == {"email": ["Email já existe"]}
        assert isinstance(free, Accepted)


@pytest.mark.asyncio
class TestLogging:
    async def test_verdicts_are_logged(
        self, validator: RegistrationValidator, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="registration_validation")

        await validator.validate(make_payload())
        await validator.validate(make_payload(nome=""))

        assert "Registration payload accepted" in caplog.text
        assert "Registration payload rejected (fields=nome)" in caplog.text

    async def test_aborted_run_is_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.ERROR, logger="registration_validation")
        validator = RegistrationValidator(
            InMemoryUserRepository(failing_fields={"cpf"})
        )

        with pytest.raises(ValidationAbortedError):
            await validator.validate(make_payload())

        assert "Uniqueness lookup for cpf failed: RecordLookupError" in caplog.text
        assert "31286578078" not in caplog.text

    async def test_stage_transitions_are_logged_at_debug(
        self, validator: RegistrationValidator, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="registration_validation")

        await validator.validate(make_payload())

        stages = [
            r.getMessage()
            for r in caplog.records
            if r.getMessage().startswith("Validation stage")
        ]
        assert stages == [
            "Validation stage: running",
            "Validation stage: merging",
            "Validation stage: verdict",
        ]
