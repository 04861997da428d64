"""CPF check-digit algorithm and formatting checks.

A CPF is an 11-digit numeral whose last two digits are check digits
computed from the preceding ones with a weighted modulo-11 sum:

- the 10th digit weights digits 1..9 by 10, 9, ..., 2;
- the 11th digit weights digits 1..10 by 11, 10, ..., 2;
- in both cases the digit is ``sum * 10 % 11``, with 10 read as 0.

Formatting and checksum are checked independently: ``312.865.780-78`` has
valid check digits but is not correctly formatted, because only the bare
numeral is accepted for storage.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from ..config import DEFAULT_CPF_SEPARATORS

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

CPF_LENGTH = 11
_ASCII_DIGITS = frozenset("0123456789")


def strip_separators(
    value: str, separators: Iterable[str] = DEFAULT_CPF_SEPARATORS
) -> str:
    """Remove every separator character from *value*."""
    drop = set(separators)
    return "".join(ch for ch in value if ch not in drop)


def is_well_formatted(value: str) -> bool:
    """True iff *value* is exactly 11 ASCII digits with nothing else."""
    return len(value) == CPF_LENGTH and all(ch in _ASCII_DIGITS for ch in value)


def compute_check_digit(digits: Sequence[int]) -> int:
    """Weighted modulo-11 check digit of *digits*.

    Weights run from ``len(digits) + 1`` down to 2.
    """
    weights = range(len(digits) + 1, 1, -1)
    remainder = sum(d * w for d, w in zip(digits, weights)) * 10 % 11
    return 0 if remainder == 10 else remainder


def compute_check_digits(base: str) -> str:
    """Return the two check digits for a 9-digit *base*."""
    if len(base) != CPF_LENGTH - 2 or not all(ch in _ASCII_DIGITS for ch in base):
        raise ValueError(f"CPF base must be 9 digits, got {base!r}")
    digits = [int(ch) for ch in base]
    first = compute_check_digit(digits)
    second = compute_check_digit([*digits, first])
    return f"{first}{second}"


def is_valid_checksum(
    value: str, separators: Iterable[str] = DEFAULT_CPF_SEPARATORS
) -> bool:
    """True iff *value*, once separators are stripped, is a valid CPF.

    Empty and short values fail, as do numerals made of one repeated digit
    (``000.000.000-00``, ``11111111111``, ...), which satisfy the
    arithmetic but are never issued.
    """
    digits = strip_separators(value, separators)
    if not is_well_formatted(digits):
        return False
    if len(set(digits)) == 1:
        return False
    return compute_check_digits(digits[:9]) == digits[9:]


def generate_cpf(rng: random.Random | None = None) -> str:
    """Generate a random bare CPF with valid check digits."""
    rng = rng or random.Random()
    while True:
        base = "".join(str(rng.randrange(10)) for _ in range(CPF_LENGTH - 2))
        if len(set(base)) > 1:
            return base + compute_check_digits(base)


def format_cpf(value: str) -> str:
    """Render a bare CPF as ``000.000.000-00``."""
    if not is_well_formatted(value):
        raise ValueError(f"Not a bare 11-digit CPF: {value!r}")
    return f"{value[:3]}.{value[3:6]}.{value[6:9]}-{value[9:]}"
