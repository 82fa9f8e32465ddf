"""Resolve and run the validation routine for any value.

Resolution order for :func:`validate`:

1. ``None`` is an absent optional and validates to success.
2. An exception instance is a value that already failed upstream.
3. A routine registered for the value's type (or a base class).
4. A type implementing ``validate(self)`` itself.
5. Scalars and enum members carry no constraints of their own.
6. Mappings validate each value under ``Key(str(key))``.
7. Dataclasses and pydantic models validate each field under ``Named``.
8. Other iterables validate each element under ``Index`` in iteration order.

Anything else raises :class:`~validatree.exceptions.UnregisteredTypeError`.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from inspect import getattr_static
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel

from validatree.engine.builder import ErrorBuilder
from validatree.engine.protocol import Outcome, Validate, ValidationRoutine
from validatree.engine.registry import SchemaRegistry, default_registry
from validatree.exceptions import RoutineContractError, UnregisteredTypeError, ValidationFailed
from validatree.models.errors import Unstructured, ValidationError

logger = logging.getLogger("validatree.dispatch")

ALREADY_AN_ERROR = "value is already an error"

_SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    date,  # includes datetime
    time,
    timedelta,
    UUID,
    Enum,
)

T = TypeVar("T")


def validate(value: Any, registry: SchemaRegistry | None = None) -> Outcome:
    """Validate ``value`` exhaustively: ``None`` on success, else the full report."""
    if registry is None:
        registry = default_registry

    if value is None:
        return None
    if isinstance(value, BaseException):
        return Unstructured((ALREADY_AN_ERROR,))

    routine = registry.lookup(type(value))
    if routine is not None:
        return _run_routine(routine, value)

    if _implements_validate(value):
        return _check_result(value.validate(), type(value))

    if isinstance(value, _SCALAR_TYPES):
        return None
    if isinstance(value, Mapping):
        return validate_mapping(value, registry)
    if isinstance(value, BaseModel):
        return validate_fields(value, list(type(value).model_fields), registry)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return validate_fields(
            value, [field.name for field in dataclasses.fields(value)], registry
        )
    if isinstance(value, Iterable):
        return validate_sequence(value, registry)

    raise UnregisteredTypeError(type(value), registry.available())


def _implements_validate(value: Any) -> bool:
    # pydantic's BaseModel.validate is a deprecated classmethod, not the capability.
    if isinstance(value, BaseModel):
        return getattr_static(type(value), "validate") is not getattr_static(BaseModel, "validate")
    # The protocol check only proves the attribute exists, e.g. a `validate: bool` field.
    return (
        isinstance(value, Validate)
        and not isinstance(value, type)
        and callable(getattr(value, "validate", None))
    )


def _run_routine(routine: ValidationRoutine, value: Any) -> Outcome:
    builder = ErrorBuilder()
    outcome = _check_result(routine(value, builder), type(value))
    if not builder.finished:
        raise RoutineContractError(
            f"Routine {getattr(routine, '__name__', routine)!r} for "
            f"{type(value).__qualname__} returned without calling finish()"
        )
    return outcome


def _check_result(outcome: Any, value_type: type) -> Outcome:
    if outcome is not None and not isinstance(outcome, ValidationError):
        raise RoutineContractError(
            f"Validation of {value_type.__qualname__} returned "
            f"{type(outcome).__name__}, expected None or a ValidationError"
        )
    return outcome


# -- container composition ---------------------------------------------------


def validate_sequence(items: Iterable[Any], registry: SchemaRegistry | None = None) -> Outcome:
    """Validate each element, locating failures by position in iteration order."""
    builder = ErrorBuilder()
    for position, item in enumerate(items):
        builder.at_index(position, validate(item, registry))
    return builder.finish()


def validate_mapping(mapping: Mapping[Any, Any], registry: SchemaRegistry | None = None) -> Outcome:
    """Validate each value, locating failures by the key's text form."""
    builder = ErrorBuilder()
    for key, item in mapping.items():
        builder.at_key(key, validate(item, registry))
    return builder.finish()


def validate_optional(value: Any, registry: SchemaRegistry | None = None) -> Outcome:
    """An absent value is success; a present one delegates to its own check."""
    if value is None:
        return None
    return validate(value, registry)


def validate_fallible(value: Any, registry: SchemaRegistry | None = None) -> Outcome:
    """Re-validate the result of a prior operation that may have failed."""
    if isinstance(value, BaseException):
        return Unstructured((ALREADY_AN_ERROR,))
    return validate(value, registry)


def validate_fields(
    value: Any, names: Iterable[str], registry: SchemaRegistry | None = None
) -> Outcome:
    """Recurse into each named field of a product type, each under ``Named``.

    Fields are independent: a failure in one never suppresses its siblings.
    """
    builder = ErrorBuilder()
    for name in names:
        builder.at_named(name, validate(getattr(value, name), registry))
    return builder.finish()


# -- boundaries --------------------------------------------------------------


def ensure_valid(value: T, registry: SchemaRegistry | None = None) -> T:
    """Return ``value`` unchanged, or raise :class:`ValidationFailed` with its report."""
    outcome = validate(value, registry)
    if outcome is not None:
        logger.debug("%s failed validation: %s", type(value).__qualname__, outcome)
        raise ValidationFailed(value, outcome)
    return value
