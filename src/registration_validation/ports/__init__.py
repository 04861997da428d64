from registration_validation.ports.lookup import IUserLookup
from registration_validation.ports.middleware import IMiddleware
from registration_validation.ports.validation import IValidator

__all__ = [
    "IMiddleware",
    "IUserLookup",
    "IValidator",
]
