"""Built-in validators: the leaves of a validation routine.

Every function here is pure and total. It returns ``None`` when the check
passes and a single-reason :class:`~validatree.models.errors.Unstructured`
error when it fails. Custom predicate functions with the same shape can be
used anywhere one of these is.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

from validatree.engine.protocol import Outcome
from validatree.models.errors import Unstructured

REQUIRED_MESSAGE = "a value is required."


def _fail(message: str) -> Unstructured:
    return Unstructured((message,))


def _violates(op: Callable[[Any, Any], Any], value: Any, bound: Any) -> bool | str:
    """Evaluate ``op(value, bound)``; incomparable operands yield a reason instead."""
    try:
        return bool(op(value, bound))
    except (TypeError, ValueError) as exc:
        return f"cannot compare {value!r} with {bound!r}: {exc}"


def required(value: Any) -> Outcome:
    """Fail iff the optional value is absent."""
    if value is None:
        return _fail(REQUIRED_MESSAGE)
    return None


def equals(value: Any, expected: Any) -> Outcome:
    result = _violates(operator.ne, value, expected)
    if isinstance(result, str):
        return _fail(result)
    if result:
        return _fail(f"{value!r} != {expected!r}")
    return None


def min(value: Any, bound: Any) -> Outcome:  # noqa: A001
    """Inclusive lower bound: fails iff ``value < bound``."""
    result = _violates(operator.lt, value, bound)
    if isinstance(result, str):
        return _fail(result)
    if result:
        return _fail(f"{value!r} is less than {bound!r}")
    return None


def max(value: Any, bound: Any) -> Outcome:  # noqa: A001
    """Inclusive upper bound: fails iff ``value > bound``."""
    result = _violates(operator.gt, value, bound)
    if isinstance(result, str):
        return _fail(result)
    if result:
        return _fail(f"{value!r} is greater than {bound!r}")
    return None


def option_min(value: Any, bound: Any) -> Outcome:
    if value is None:
        return None
    return min(value, bound)


def option_max(value: Any, bound: Any) -> Outcome:
    if value is None:
        return None
    return max(value, bound)


def _count(iterable: Iterable[Any]) -> int | str:
    # Full traversal; no cheap len() is assumed.
    try:
        iterator = iter(iterable)
    except TypeError as exc:
        return f"cannot count elements of {type(iterable).__name__}: {exc}"
    return sum(1 for _ in iterator)


def min_length(iterable: Iterable[Any], length: int) -> Outcome:
    count = _count(iterable)
    if isinstance(count, str):
        return _fail(count)
    if count < length:
        return _fail(
            f"sequence does not have enough elements, it has {count} "
            f"but the minimum is {length}"
        )
    return None


def max_length(iterable: Iterable[Any], length: int) -> Outcome:
    count = _count(iterable)
    if isinstance(count, str):
        return _fail(count)
    if count > length:
        return _fail(
            f"sequence has too many elements, it has {count} but the maximum is {length}"
        )
    return None


def predicate(value: Any, func: Callable[[Any], bool], name: str | None = None) -> Outcome:
    """Wrap a boolean predicate as a validator."""
    if func(value):
        return None
    label = name if name is not None else getattr(func, "__name__", repr(func))
    return _fail(f'Predicate "{label}" failed')
