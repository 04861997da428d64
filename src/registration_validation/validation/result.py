"""ValidationResult — field-keyed error map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def default_errors_factory() -> dict[str, list[str]]:
    """Factory for the mutable default dict in ValidationResult."""
    return {}


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    A field key is present only when at least one message was recorded for
    it; messages keep the order in which they were added.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"nome": ["Campo deve ser preenchido"]})
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors={name: list(msgs) for name, msgs in errors.items() if msgs})

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one, combining all errors."""
        merged = {name: list(msgs) for name, msgs in self.errors.items()}
        for field_name, messages in other.errors.items():
            merged[field_name] = merged.get(field_name, []) + list(messages)
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        """Add a single error for *field_name*."""
        self.errors.setdefault(field_name, []).append(message)

    def add_errors(self, field_name: str, messages: Iterable[str]) -> None:
        """Append *messages* for *field_name*; no-op when there are none."""
        for message in messages:
            self.add_error(field_name, message)

    def ordered(self, field_order: Sequence[str]) -> ValidationResult:
        """Return a copy whose keys follow *field_order*.

        Fields not named in *field_order* keep their relative order and go
        last.
        """
        rank = {name: index for index, name in enumerate(field_order)}
        keys = sorted(self.errors, key=lambda name: rank.get(name, len(rank)))
        return ValidationResult(errors={name: list(self.errors[name]) for name in keys})

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(msgs) for name, msgs in self.errors.items()}

    def __bool__(self) -> bool:
        return self.is_valid
