"""Shared fixtures for registration-validation tests."""

from __future__ import annotations

import random

import pytest

from registration_validation.adapters.memory import InMemoryUserRepository
from registration_validation.validation.cpf import generate_cpf
from registration_validation.validation.orchestrator import RegistrationValidator


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


@pytest.fixture
def repo() -> InMemoryUserRepository:
    """Fresh, empty user store for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def validator(repo: InMemoryUserRepository) -> RegistrationValidator:
    return RegistrationValidator(repo)


@pytest.fixture
def random_cpf(rng: random.Random) -> str:
    return generate_cpf(rng)
