from .repository import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
]
