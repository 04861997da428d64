"""RegistrationPayload — the candidate record submitted for validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from collections.abc import Mapping

NOME = "nome"
EMAIL = "email"
SENHA = "senha"
CPF = "cpf"

# Order in which fields appear in an error map.
FIELD_ORDER: tuple[str, ...] = (NOME, EMAIL, SENHA, CPF)


class RegistrationPayload(BaseModel):
    """Free-text registration fields.

    Every field defaults to the empty string. Missing keys and ``None`` are
    read as empty, other scalars are converted to text and unknown keys are
    ignored, so any request body can be turned into a payload without
    raising. Whether the values are acceptable is decided by the validator,
    not by this model.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    nome: str = ""
    email: str = ""
    senha: str = ""
    cpf: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> RegistrationPayload:
        """Build a payload from a request body mapping."""
        return cls.model_validate(dict(data or {}))

    def value_of(self, field_name: str) -> str:
        if field_name not in FIELD_ORDER:
            raise KeyError(field_name)
        return str(getattr(self, field_name))
