from .payload import CPF, EMAIL, FIELD_ORDER, NOME, SENHA, RegistrationPayload
from .user import User

__all__ = [
    "CPF",
    "EMAIL",
    "FIELD_ORDER",
    "NOME",
    "SENHA",
    "RegistrationPayload",
    "User",
]
