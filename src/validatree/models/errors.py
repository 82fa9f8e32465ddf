"""Structured, location-aware validation errors with merge semantics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from validatree.models.location import Key, Location

# Key under which bare reasons are filed when they meet a structured error.
ERRORS_KEY = "errors"


class ValidationError(ABC):
    """A failure report: either :class:`Unstructured` or :class:`Structured`.

    Instances are immutable. Combining two reports always goes through
    :meth:`merge`, which returns a new value and leaves both inputs intact.
    """

    __slots__ = ()

    @staticmethod
    def new(message: str) -> Unstructured:
        """Create a single-reason error for the current node."""
        return Unstructured((message,))

    def merge(self, other: ValidationError) -> ValidationError:
        return merge(self, other)

    @abstractmethod
    def walk(self, path: tuple[Location, ...] = ()) -> Iterator[tuple[tuple[Location, ...], str]]:
        """Yield ``(path, reason)`` pairs depth-first in iteration order."""


@dataclass(frozen=True)
class Unstructured(ValidationError):
    """A flat, order-preserving list of reasons attributed to the current node."""

    reasons: tuple[str, ...]

    def __init__(self, reasons: Iterable[str]) -> None:
        reasons = tuple(reasons)
        if not reasons:
            raise ValueError("Unstructured error requires at least one reason")
        object.__setattr__(self, "reasons", reasons)

    def walk(self, path: tuple[Location, ...] = ()) -> Iterator[tuple[tuple[Location, ...], str]]:
        for reason in self.reasons:
            yield path, reason

    def __str__(self) -> str:
        return "; ".join(self.reasons)


@dataclass(frozen=True)
class Structured(ValidationError):
    """A nested report keyed by the sub-location each error belongs to."""

    errors: Mapping[Location, ValidationError]

    def __init__(self, errors: Mapping[Location, ValidationError]) -> None:
        if not errors:
            raise ValueError("Structured error requires at least one location")
        for location, error in errors.items():
            if not isinstance(location, Location):
                raise TypeError(f"Expected a Location key, got {type(location).__name__}")
            if not isinstance(error, ValidationError):
                raise TypeError(f"Expected a ValidationError at {location}, got {type(error).__name__}")
        object.__setattr__(self, "errors", MappingProxyType(dict(errors)))

    def walk(self, path: tuple[Location, ...] = ()) -> Iterator[tuple[tuple[Location, ...], str]]:
        for location, error in self.errors.items():
            yield from error.walk(path + (location,))

    def __str__(self) -> str:
        inner = ", ".join(f"{location}: {error}" for location, error in self.errors.items())
        return "{" + inner + "}"


def merge(left: ValidationError, right: ValidationError) -> ValidationError:
    """Combine two errors without losing any reason.

    * Unstructured + Unstructured concatenates reasons, ``left`` first.
    * Structured + Structured takes the union of locations and merges the
      errors of locations present on both sides.
    * Mixed shapes file the unstructured side under ``Key("errors")`` and
      then merge as two structured errors.
    """
    for side in (left, right):
        if not isinstance(side, ValidationError):
            raise TypeError(f"Can only merge ValidationError values, got {type(side).__name__}")

    if isinstance(left, Unstructured) and isinstance(right, Unstructured):
        return Unstructured(left.reasons + right.reasons)

    return _merge_structured(_as_structured(left), _as_structured(right))


def _as_structured(error: ValidationError) -> Structured:
    if isinstance(error, Structured):
        return error
    return Structured({Key(ERRORS_KEY): error})


def _merge_structured(left: Structured, right: Structured) -> Structured:
    combined: dict[Location, ValidationError] = dict(left.errors)
    for location, error in right.errors.items():
        existing = combined.get(location)
        combined[location] = error if existing is None else merge(existing, error)
    return Structured(combined)
