from .memory import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
]
