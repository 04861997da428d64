"""Declared rule order of the registration form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import messages
from ..config import ValidationConfig
from ..domain.payload import CPF, EMAIL, NOME, SENHA
from .field import FieldValidator
from .rules import (
    CpfChecksumRule,
    CpfFormatRule,
    EmailShapeRule,
    MaxLengthRule,
    MinLengthRule,
    RequiredRule,
)
from .uniqueness import UniquenessChecker

if TYPE_CHECKING:
    from ..ports.lookup import IUserLookup


def build_field_validators(
    config: ValidationConfig | None = None,
) -> tuple[FieldValidator, ...]:
    """Synchronous rules per field, in error-map order.

    The order of rules inside each field is the order of the messages in a
    rejection and is part of the API.
    """
    config = config or ValidationConfig()
    return (
        FieldValidator(
            NOME,
            (
                MinLengthRule(config.name_min_length),
                MaxLengthRule(config.name_max_length),
                RequiredRule(),
            ),
        ),
        FieldValidator(EMAIL, (RequiredRule(), EmailShapeRule())),
        FieldValidator(
            SENHA,
            (MinLengthRule(config.password_min_length), RequiredRule()),
        ),
        FieldValidator(
            CPF,
            (
                CpfChecksumRule(config.cpf_separators),
                CpfFormatRule(),
                RequiredRule(),
            ),
        ),
    )


def build_uniqueness_checkers(lookup: IUserLookup) -> tuple[UniquenessChecker, ...]:
    return (
        UniquenessChecker(EMAIL, messages.EMAIL_EXISTS, lookup.find_by_email),
        UniquenessChecker(CPF, messages.CPF_EXISTS, lookup.find_by_cpf),
    )
