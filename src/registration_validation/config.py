"""ValidationConfig — tunable bounds of the registration rules."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives.exceptions import ConfigurationError

DEFAULT_CPF_SEPARATORS: tuple[str, ...] = (".", "-", "/", " ")


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Configuration for the registration validation rules.

    Attributes:
        name_min_length: Minimum number of characters in ``nome``.
        name_max_length: Maximum number of characters in ``nome``.
        password_min_length: Minimum number of characters in ``senha``.
        cpf_separators: Characters stripped from a CPF before its check
            digits are computed. They never make a CPF correctly formatted.
    """

    name_min_length: int = 3
    name_max_length: int = 60
    password_min_length: int = 8
    cpf_separators: tuple[str, ...] = DEFAULT_CPF_SEPARATORS

    def __post_init__(self) -> None:
        if self.name_min_length < 0 or self.password_min_length < 0:
            raise ConfigurationError("Minimum lengths must not be negative")
        if self.name_max_length < self.name_min_length:
            raise ConfigurationError(
                f"name_max_length ({self.name_max_length}) is lower than "
                f"name_min_length ({self.name_min_length})"
            )
        if any(len(sep) != 1 or sep.isdigit() for sep in self.cpf_separators):
            raise ConfigurationError(
                "cpf_separators must be single non-digit characters"
            )
