"""FieldValidator — runs the ordered rules of one field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rules import Rule


@dataclass(frozen=True)
class FieldValidator:
    """Evaluates every rule of a field, in declaration order.

    Evaluation never stops at the first failure, so one value can produce
    several messages (an empty ``nome`` is both too short and missing).
    Rules flagged ``skip_on_empty`` are left out for an empty value.

    Usage::

        validator = FieldValidator("senha", (MinLengthRule(8), RequiredRule()))
        validator.evaluate("")  # ["Deve ter no minimo 8 caracteres", "Campo deve ser preenchido"]
    """

    field_name: str
    rules: tuple[Rule, ...]

    def evaluate(self, value: str) -> list[str]:
        failures: list[str] = []
        for rule in self.rules:
            if rule.skip_on_empty and not value:
                continue
            message = rule.check(value)
            if message is not None:
                failures.append(message)
        return failures
