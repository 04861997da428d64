"""Validation engine: rules, CPF checksum, uniqueness checks and verdicts."""

from __future__ import annotations

from .cpf import (
    compute_check_digits,
    format_cpf,
    generate_cpf,
    is_valid_checksum,
    is_well_formatted,
    strip_separators,
)
from .field import FieldValidator
from .orchestrator import RegistrationValidator, ValidationStage
from .result import ValidationResult
from .rules import (
    CpfChecksumRule,
    CpfFormatRule,
    EmailShapeRule,
    MaxLengthRule,
    MinLengthRule,
    RequiredRule,
    Rule,
)
from .schema import build_field_validators, build_uniqueness_checkers
from .uniqueness import UniquenessChecker
from .verdict import Accepted, Rejected, Verdict, verdict_for

__all__ = [
    "Accepted",
    "CpfChecksumRule",
    "CpfFormatRule",
    "EmailShapeRule",
    "FieldValidator",
    "MaxLengthRule",
    "MinLengthRule",
    "RegistrationValidator",
    "Rejected",
    "RequiredRule",
    "Rule",
    "UniquenessChecker",
    "ValidationResult",
    "ValidationStage",
    "Verdict",
    "build_field_validators",
    "build_uniqueness_checkers",
    "compute_check_digits",
    "format_cpf",
    "generate_cpf",
    "is_valid_checksum",
    "is_well_formatted",
    "strip_separators",
    "verdict_for",
]
