"""Field rules — pure, synchronous predicates over one field value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from email_validator import EmailNotValidError, validate_email

from .. import messages
from ..config import DEFAULT_CPF_SEPARATORS
from .cpf import is_valid_checksum, is_well_formatted


@runtime_checkable
class Rule(Protocol):
    """A single check over a field value.

    ``check`` returns the failure message, or ``None`` when the value
    passes. Rules never perform I/O. A rule with ``skip_on_empty`` set is
    not evaluated at all for an empty value.
    """

    @property
    def rule_id(self) -> str: ...

    @property
    def skip_on_empty(self) -> bool: ...

    def check(self, value: str) -> str | None: ...


@dataclass(frozen=True)
class MinLengthRule:
    limit: int
    rule_id: str = "MIN_LENGTH"
    skip_on_empty: bool = False

    def check(self, value: str) -> str | None:
        if len(value) < self.limit:
            return messages.min_length(self.limit)
        return None


@dataclass(frozen=True)
class MaxLengthRule:
    limit: int
    rule_id: str = "MAX_LENGTH"
    skip_on_empty: bool = False

    def check(self, value: str) -> str | None:
        if len(value) > self.limit:
            return messages.max_length(self.limit)
        return None


@dataclass(frozen=True)
class RequiredRule:
    rule_id: str = "REQUIRED"
    skip_on_empty: bool = False

    def check(self, value: str) -> str | None:
        if not value:
            return messages.REQUIRED
        return None


@dataclass(frozen=True)
class EmailShapeRule:
    """Local part, ``@`` and a dotted domain; deliverability is not checked."""

    rule_id: str = "EMAIL_SHAPE"
    skip_on_empty: bool = True

    def check(self, value: str) -> str | None:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return messages.EMAIL_INVALID
        return None


@dataclass(frozen=True)
class CpfChecksumRule:
    """Check digits of the CPF, ignoring the configured separators.

    Fires on empty and short values too: they cannot carry valid check
    digits.
    """

    separators: tuple[str, ...] = DEFAULT_CPF_SEPARATORS
    rule_id: str = "CPF_CHECKSUM"
    skip_on_empty: bool = False

    def check(self, value: str) -> str | None:
        if not is_valid_checksum(value, self.separators):
            return messages.CPF_INVALID
        return None


@dataclass(frozen=True)
class CpfFormatRule:
    rule_id: str = "CPF_FORMAT"
    skip_on_empty: bool = False

    def check(self, value: str) -> str | None:
        if not is_well_formatted(value):
            return messages.CPF_BAD_FORMAT
        return None
