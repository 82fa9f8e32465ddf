"""Exceptions raised for programmer faults inside the validation engine.

Validation failures are never raised; they are returned as
:class:`~validatree.models.errors.ValidationError` values. The exceptions
here signal misuse of the engine itself.
"""

from __future__ import annotations

from typing import Any


class ValidatreeError(Exception):
    """Base class for every fault raised by validatree."""


class BuilderConsumedError(ValidatreeError, RuntimeError):
    """Raised when an ErrorBuilder is used after ``finish()``."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"ErrorBuilder.{operation}() called after finish()")


class RoutineContractError(ValidatreeError):
    """Raised when a registered routine returns without finishing its builder
    or returns something other than an outcome."""


class UnregisteredTypeError(ValidatreeError, TypeError):
    """Raised when no validation routine can be resolved for a value's type."""

    def __init__(self, value_type: type, available: list[str]) -> None:
        self.value_type = value_type
        self.available = available
        registered = ", ".join(available) if available else "none"
        super().__init__(
            f"No validation routine for type '{value_type.__qualname__}'. "
            f"Registered: {registered}"
        )


class ValidationFailed(ValidatreeError):
    """Raised by :func:`~validatree.engine.dispatch.ensure_valid` at API boundaries."""

    def __init__(self, value: Any, error: Any) -> None:
        self.value = value
        self.error = error
        super().__init__(f"{type(value).__qualname__} failed validation: {error}")
