"""Client-facing failure messages, kept verbatim for API compatibility."""

from __future__ import annotations

REQUIRED = "Campo deve ser preenchido"
EMAIL_INVALID = "Email inválido"
EMAIL_EXISTS = "Email já existe"
CPF_INVALID = "CPF inválido"
CPF_BAD_FORMAT = "Está no formato inválido"
CPF_EXISTS = "CPF já existe"
INTERNAL_ERROR = "Algo deu errado!"


def min_length(limit: int) -> str:
    return f"Deve ter no minimo {limit} caracteres"


def max_length(limit: int) -> str:
    return f"Deve ter no maximo {limit} caracteres"
