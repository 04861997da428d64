"""IValidator — payload-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.verdict import Verdict


@runtime_checkable
class IValidator(Protocol):
    """Protocol for registration validators.

    Consumed by
    :class:`~registration_validation.middleware.validation.ValidatorMiddleware`.
    """

    async def validate(self, payload: Any) -> Verdict:
        """Validate *payload* and return exactly one
        :class:`~registration_validation.validation.verdict.Accepted` or
        :class:`~registration_validation.validation.verdict.Rejected`.
        """
        ...
