from .exceptions import (
    ConfigurationError,
    InfrastructureError,
    PersistenceError,
    RecordLookupError,
    RegistrationValidationError,
    ValidationAbortedError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "InfrastructureError",
    "PersistenceError",
    "RecordLookupError",
    "RegistrationValidationError",
    "ValidationAbortedError",
    "ValidationError",
]
