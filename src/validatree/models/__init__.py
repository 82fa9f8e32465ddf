"""Data model for validatree: locations, errors and reports."""

from validatree.models.errors import ERRORS_KEY, Structured, Unstructured, ValidationError, merge
from validatree.models.location import Index, Key, Location, Named
from validatree.models.report import ErrorEntry, ValidationReport

__all__ = [
    "ERRORS_KEY",
    "ErrorEntry",
    "Index",
    "Key",
    "Location",
    "Named",
    "Structured",
    "Unstructured",
    "ValidationError",
    "ValidationReport",
    "merge",
]
