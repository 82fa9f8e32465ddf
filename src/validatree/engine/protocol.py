"""The Validate capability shared by every validated type."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from validatree.models.errors import ValidationError

if TYPE_CHECKING:
    from validatree.engine.builder import ErrorBuilder

# ``None`` is success; a ValidationError is failure. There is no empty error.
Outcome = ValidationError | None

# A schema routine: receives the value plus a fresh builder, returns builder.finish().
ValidationRoutine = Callable[[Any, "ErrorBuilder"], Outcome]


@runtime_checkable
class Validate(Protocol):
    """A type that can check itself exhaustively.

    Implementations must be total (never raise on well-formed input) and
    exhaustive (report every failing constraint in one pass).
    """

    def validate(self) -> Outcome: ...
