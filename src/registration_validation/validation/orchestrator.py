"""RegistrationValidator — one pass/fail decision per registration payload."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..config import ValidationConfig
from ..domain.payload import FIELD_ORDER, RegistrationPayload
from ..primitives.exceptions import ValidationAbortedError
from .result import ValidationResult
from .schema import build_field_validators, build_uniqueness_checkers
from .verdict import Verdict, verdict_for

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ..ports.lookup import IUserLookup
    from .field import FieldValidator
    from .uniqueness import UniquenessChecker

logger = logging.getLogger("registration_validation.orchestrator")


class ValidationStage(str, Enum):
    RUNNING = "running"
    MERGING = "merging"
    VERDICT = "verdict"


class RegistrationValidator:
    """Validates registration payloads against field rules and the user store.

    A run goes through three stages:

    1. **running**: uniqueness lookups are scheduled as concurrent tasks,
       then every field's synchronous rules are evaluated without yielding;
    2. **merging**: once *all* lookups have settled, their messages are
       appended after the synchronous messages of their field;
    3. **verdict**: an empty map is :class:`Accepted`, anything else
       :class:`Rejected`.

    If any lookup raised, the run ends with :class:`ValidationAbortedError`
    instead of a verdict; the other lookups are still awaited first. If the
    synchronous rules raise, unfinished lookups are cancelled and awaited
    before the error propagates, so no task outlives the run.

    Usage::

        validator = RegistrationValidator(InMemoryUserRepository())
        verdict = await validator.validate({"nome": "Ana", ...})
    """

    def __init__(
        self,
        lookup: IUserLookup,
        config: ValidationConfig | None = None,
        *,
        field_validators: Iterable[FieldValidator] | None = None,
        uniqueness_checkers: Iterable[UniquenessChecker] | None = None,
    ) -> None:
        self._config = config or ValidationConfig()
        self._field_validators: tuple[FieldValidator, ...] = (
            tuple(field_validators)
            if field_validators is not None
            else build_field_validators(self._config)
        )
        self._uniqueness_checkers: tuple[UniquenessChecker, ...] = (
            tuple(uniqueness_checkers)
            if uniqueness_checkers is not None
            else build_uniqueness_checkers(lookup)
        )

    @property
    def config(self) -> ValidationConfig:
        return self._config

    async def validate(
        self, payload: RegistrationPayload | Mapping[str, Any] | None
    ) -> Verdict:
        """Validate *payload* and return exactly one verdict.

        Raises:
            ValidationAbortedError: A uniqueness lookup failed.
        """
        if not isinstance(payload, RegistrationPayload):
            payload = RegistrationPayload.from_mapping(payload)

        self._log_stage(ValidationStage.RUNNING)
        pending = self._start_lookups(payload)
        try:
            result = self.evaluate_fields(payload)

            self._log_stage(ValidationStage.MERGING)
            result = await self._merge_lookups(result, pending)
        finally:
            await self._cancel_unfinished(pending)

        self._log_stage(ValidationStage.VERDICT)
        result = result.ordered(FIELD_ORDER)
        verdict = verdict_for(result)
        if verdict.is_accepted:
            logger.info("Registration payload accepted")
        else:
            logger.info(
                "Registration payload rejected (fields=%s)", ",".join(result.errors)
            )
        return verdict

    def evaluate_fields(self, payload: RegistrationPayload) -> ValidationResult:
        """Run the synchronous rules of every field."""
        result = ValidationResult.success()
        for validator in self._field_validators:
            value = payload.value_of(validator.field_name)
            result.add_errors(validator.field_name, validator.evaluate(value))
        return result

    def _start_lookups(
        self, payload: RegistrationPayload
    ) -> list[tuple[UniquenessChecker, asyncio.Task[list[str]]]]:
        # Resolve every value before scheduling so a bad field name leaves no task.
        targets = [
            (checker, payload.value_of(checker.field_name))
            for checker in self._uniqueness_checkers
        ]
        pending: list[tuple[UniquenessChecker, asyncio.Task[list[str]]]] = []
        for checker, value in targets:
            if not checker.applies_to(value):
                continue
            task = asyncio.create_task(
                checker.check(value), name=f"uniqueness:{checker.field_name}"
            )
            pending.append((checker, task))
        return pending

    async def _merge_lookups(
        self,
        result: ValidationResult,
        pending: list[tuple[UniquenessChecker, asyncio.Task[list[str]]]],
    ) -> ValidationResult:
        if not pending:
            return result

        outcomes = await asyncio.gather(
            *(task for _, task in pending), return_exceptions=True
        )

        failures: dict[str, BaseException] = {}
        for (checker, _), outcome in zip(pending, outcomes):
            if isinstance(outcome, BaseException):
                failures[checker.field_name] = outcome
            else:
                result.add_errors(checker.field_name, outcome)

        if failures:
            for field_name, exc in failures.items():
                logger.error(
                    "Uniqueness lookup for %s failed: %s",
                    field_name,
                    type(exc).__name__,
                )
            raise ValidationAbortedError(failures) from next(iter(failures.values()))
        return result

    @staticmethod
    async def _cancel_unfinished(
        pending: list[tuple[UniquenessChecker, asyncio.Task[list[str]]]],
    ) -> None:
        unfinished = [task for _, task in pending if not task.done()]
        for task in unfinished:
            task.cancel()
        if unfinished:
            await asyncio.gather(*unfinished, return_exceptions=True)

    @staticmethod
    def _log_stage(stage: ValidationStage) -> None:
        logger.debug("Validation stage: %s", stage.value)
