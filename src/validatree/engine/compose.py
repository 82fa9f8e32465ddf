"""Composition helpers for product and sum types.

A tagged union is usually modelled as one class per variant. A routine for
such a union reports the variant's payload and, optionally, the outcome of
a per-variant custom function::

    def check_shape(shape: Shape, builder: ErrorBuilder) -> Outcome:
        match shape:
            case Circle(radius=r):
                return builder.extend(
                    validate_variant("Circle", validate_struct_payload({"radius": validators.min(r, 0)}))
                ).finish()
            case Empty():
                return builder.finish()
"""

from __future__ import annotations

from collections.abc import Mapping

from validatree.engine.builder import ErrorBuilder
from validatree.engine.protocol import Outcome


def validate_tuple_payload(*outcomes: Outcome) -> Outcome:
    """Locate the outcomes of a tuple-like payload by component position."""
    builder = ErrorBuilder()
    for position, outcome in enumerate(outcomes):
        builder.at_index(position, outcome)
    return builder.finish()


def validate_struct_payload(outcomes: Mapping[str, Outcome]) -> Outcome:
    """Locate the outcomes of a struct-like payload by component name."""
    builder = ErrorBuilder()
    for name, outcome in outcomes.items():
        builder.at_named(name, outcome)
    return builder.finish()


def validate_variant(
    name: str, payload: Outcome = None, function_outcome: Outcome = None
) -> Outcome:
    """Combine a variant's payload report with its custom function's outcome.

    A unit variant passes neither and is trivially valid. The payload report
    is spliced into the variant's node; the custom function's outcome is
    attached under ``Named(name)``.
    """
    return ErrorBuilder().extend(payload).at_named(name, function_outcome).finish()
