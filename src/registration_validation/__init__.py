"""registration-validation — checks a user-registration payload before storage.

Field rules, CPF check digits and async uniqueness lookups against a user
store, merged into a single accept/reject verdict.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryUserRepository
from .config import ValidationConfig

# ── Domain ───────────────────────────────────────────────────────
from .domain import FIELD_ORDER, RegistrationPayload, User

# ── Middleware ───────────────────────────────────────────────────
from .middleware import LoggingMiddleware, ValidatorMiddleware, build_pipeline

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMiddleware, IUserLookup, IValidator

# ── Primitives ───────────────────────────────────────────────────
from .primitives.exceptions import (
    ConfigurationError,
    InfrastructureError,
    PersistenceError,
    RecordLookupError,
    RegistrationValidationError,
    ValidationAbortedError,
    ValidationError,
)
from .responses import ErrorResponse, build_error_response, error_response_for

# ── Validation ───────────────────────────────────────────────────
from .validation import (
    Accepted,
    FieldValidator,
    RegistrationValidator,
    Rejected,
    UniquenessChecker,
    ValidationResult,
    Verdict,
    generate_cpf,
    is_valid_checksum,
    is_well_formatted,
)

__all__ = [
    "FIELD_ORDER",
    "Accepted",
    "ConfigurationError",
    "ErrorResponse",
    "FieldValidator",
    "IMiddleware",
    "IUserLookup",
    "IValidator",
    "InMemoryUserRepository",
    "InfrastructureError",
    "LoggingMiddleware",
    "PersistenceError",
    "RecordLookupError",
    "RegistrationPayload",
    "RegistrationValidationError",
    "RegistrationValidator",
    "Rejected",
    "UniquenessChecker",
    "User",
    "ValidationAbortedError",
    "ValidationConfig",
    "ValidationError",
    "ValidationResult",
    "ValidatorMiddleware",
    "Verdict",
    "build_error_response",
    "build_pipeline",
    "error_response_for",
    "generate_cpf",
    "is_valid_checksum",
    "is_well_formatted",
]
