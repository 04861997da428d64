"""User — a stored registration record."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A registered user as returned by the storage collaborator.

    The validator only cares whether a record exists, never about its
    contents; the model exists so the in-memory repository stores something
    shaped like the real thing.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    nome: str
    email: str
    senha: str
    cpf: str
