"""ErrorBuilder: accumulates located sub-results during one validation routine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from validatree.engine.protocol import Outcome
from validatree.exceptions import BuilderConsumedError
from validatree.models.errors import Structured, Unstructured, ValidationError, merge
from validatree.models.location import Index, Key, Location, Named


def _check_outcome(outcome: Any) -> Outcome:
    if outcome is not None and not isinstance(outcome, ValidationError):
        raise TypeError(
            f"Validation outcome must be None or a ValidationError, got {type(outcome).__name__}"
        )
    return outcome


class ErrorBuilder:
    """Collects zero or more located outcomes and resolves to a single one.

    Successful outcomes (``None``) are dropped, so a location that is missing
    from the final report was checked and passed. Every method except
    :meth:`finish` returns the builder for chaining::

        return (
            ErrorBuilder()
            .at_named("a", validators.min(value.a, 5))
            .at_named("b", validate(value.b))
            .finish()
        )
    """

    __slots__ = ("_pending", "_finished")

    def __init__(self) -> None:
        self._pending: ValidationError | None = None
        self._finished = False

    def _ensure_open(self, operation: str) -> None:
        if self._finished:
            raise BuilderConsumedError(operation)

    def _absorb(self, error: ValidationError) -> None:
        self._pending = error if self._pending is None else merge(self._pending, error)

    # -- accumulation --------------------------------------------------------

    def at(self, location: Location, outcome: Outcome) -> Self:
        """Attach ``outcome`` at ``location``; a success is a no-op."""
        self._ensure_open("at")
        if _check_outcome(outcome) is not None:
            self._absorb(Structured({location: outcome}))
        return self

    def at_named(self, name: str, outcome: Outcome) -> Self:
        return self.at(Named(name), outcome)

    def at_index(self, index: int, outcome: Outcome) -> Self:
        return self.at(Index(index), outcome)

    def at_key(self, key: Any, outcome: Outcome) -> Self:
        return self.at(Key(key if isinstance(key, str) else str(key)), outcome)

    def because(self, message: str) -> Self:
        """Attach a bare reason to the current node (a whole-value constraint)."""
        self._ensure_open("because")
        self._absorb(Unstructured((message,)))
        return self

    def extend(self, outcome: Outcome) -> Self:
        """Merge a whole outcome into the current node without a sub-location."""
        self._ensure_open("extend")
        if _check_outcome(outcome) is not None:
            self._absorb(outcome)
        return self

    def check(self, function: Callable[..., Outcome], *args: Any) -> Self:
        """Run a custom validation function and file its outcome under its name."""
        self._ensure_open("check")
        return self.at_named(function.__name__, function(*args))

    # -- resolution ----------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self._finished

    def has_failures(self) -> bool:
        self._ensure_open("has_failures")
        return self._pending is not None

    def finish(self) -> Outcome:
        """Consume the builder: ``None`` on success, else the collected error."""
        self._ensure_open("finish")
        self._finished = True
        pending, self._pending = self._pending, None
        return pending
