"""Validation engine: builder, registration, dispatch and composition."""

from validatree.engine.builder import ErrorBuilder
from validatree.engine.compose import (
    validate_struct_payload,
    validate_tuple_payload,
    validate_variant,
)
from validatree.engine.dispatch import (
    ALREADY_AN_ERROR,
    ensure_valid,
    validate,
    validate_fallible,
    validate_fields,
    validate_mapping,
    validate_optional,
    validate_sequence,
)
from validatree.engine.protocol import Outcome, Validate, ValidationRoutine
from validatree.engine.registry import (
    SchemaRegistry,
    default_registry,
    register_validator,
    validator_for,
)

__all__ = [
    "ALREADY_AN_ERROR",
    "ErrorBuilder",
    "Outcome",
    "SchemaRegistry",
    "Validate",
    "ValidationRoutine",
    "default_registry",
    "ensure_valid",
    "register_validator",
    "validate",
    "validate_fallible",
    "validate_fields",
    "validate_mapping",
    "validate_optional",
    "validate_sequence",
    "validate_struct_payload",
    "validate_tuple_payload",
    "validate_variant",
    "validator_for",
]
