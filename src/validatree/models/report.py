"""Serializable report models for validation outcomes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorEntry(BaseModel):
    """One failure reason together with the path that leads to it."""

    path: str
    location: list[str | int] = []
    message: str


class ValidationReport(BaseModel):
    """Result of validating one value."""

    valid: bool
    errors: list[ErrorEntry] = []
    tree: dict[str, Any] | list[str] | None = None
