"""Validation and infrastructure exceptions for registration-validation."""

from __future__ import annotations


class RegistrationValidationError(Exception):
    """Root exception for the registration-validation package."""


class ConfigurationError(RegistrationValidationError):
    """Raised when a :class:`ValidationConfig` holds inconsistent values."""


class ValidationError(RegistrationValidationError):
    """Raised when a registration payload is rejected.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | None = None) -> None:
        self.errors: dict[str, list[str]] = errors if errors is not None else {}
        super().__init__(str(self.errors))


class InfrastructureError(RegistrationValidationError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class RecordLookupError(PersistenceError):
    """Raised by a storage collaborator when a lookup-by-field fails.

    Not attributable to the correctness of the looked-up value, so it is
    never turned into a field message.
    """

    def __init__(self, field: str, value: str, reason: str | None = None) -> None:
        self.field = field
        self.value = value
        self.reason = reason

        msg = f"Lookup of {field}={value!r} failed"
        if reason:
            msg += f" - {reason}"

        super().__init__(msg)


class ValidationAbortedError(RegistrationValidationError):
    """A validation run could not reach a verdict.

    Raised once every uniqueness lookup of the run has settled and at least
    one of them failed. ``failures`` maps the field name to the exception
    raised by its lookup.
    """

    def __init__(self, failures: dict[str, BaseException]) -> None:
        self.failures = failures
        fields = ", ".join(sorted(failures))
        super().__init__(f"Validation aborted: lookup failed for {fields}")
