"""Verdict — the accept/reject outcome of one validation run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .result import ValidationResult


@dataclass(frozen=True, slots=True)
class Accepted:
    """The payload may proceed to the next processing stage."""

    @property
    def is_accepted(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """The payload failed at least one rule.

    ``result`` always holds at least one field; an empty error map is an
    :class:`Accepted` verdict, never a rejection.
    """

    result: ValidationResult

    def __post_init__(self) -> None:
        if self.result.is_valid:
            raise ValueError("Rejected verdict requires at least one error")

    @property
    def is_accepted(self) -> bool:
        return False

    @property
    def errors(self) -> dict[str, list[str]]:
        return self.result.to_dict()


Verdict: TypeAlias = Accepted | Rejected


def verdict_for(result: ValidationResult) -> Verdict:
    """Turn a merged error map into exactly one verdict."""
    if result.is_valid:
        return Accepted()
    return Rejected(result)
