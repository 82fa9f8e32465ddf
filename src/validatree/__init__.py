"""validatree: exhaustive, location-addressed validation of nested values."""

from validatree import validators
from validatree.engine import (
    ErrorBuilder,
    Outcome,
    SchemaRegistry,
    Validate,
    ensure_valid,
    register_validator,
    validate,
    validate_fallible,
    validate_fields,
    validate_mapping,
    validate_optional,
    validate_sequence,
    validate_struct_payload,
    validate_tuple_payload,
    validate_variant,
    validator_for,
)
from validatree.exceptions import (
    BuilderConsumedError,
    RoutineContractError,
    UnregisteredTypeError,
    ValidatreeError,
    ValidationFailed,
)
from validatree.models import (
    Index,
    Key,
    Location,
    Named,
    Structured,
    Unstructured,
    ValidationError,
    merge,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderConsumedError",
    "ErrorBuilder",
    "Index",
    "Key",
    "Location",
    "Named",
    "Outcome",
    "RoutineContractError",
    "SchemaRegistry",
    "Structured",
    "UnregisteredTypeError",
    "Unstructured",
    "Validate",
    "ValidationError",
    "ValidationFailed",
    "ValidatreeError",
    "ensure_valid",
    "merge",
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
    "validators",
]
