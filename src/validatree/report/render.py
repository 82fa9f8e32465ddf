"""Serialize validation errors to nested primitives, JSON, YAML and flat paths."""

from __future__ import annotations

import io
import json
import logging
from typing import Any

from ruamel.yaml import YAML

from validatree.engine.protocol import Outcome
from validatree.models.errors import Structured, ValidationError
from validatree.models.location import Index, Location
from validatree.models.report import ErrorEntry, ValidationReport
from validatree.settings import Settings, get_settings

logger = logging.getLogger("validatree.report")

_FORMATS = ("json", "yaml")


def to_primitive(error: ValidationError) -> dict[str, Any] | list[str]:
    """Convert an error tree to plain lists and string-keyed dicts.

    Unstructured errors become a list of reasons; structured errors become
    a dict keyed by each location's text form (indices are stringified).
    """
    if isinstance(error, Structured):
        return {str(location): to_primitive(child) for location, child in error.errors.items()}
    return list(error.reasons)


def to_json(error: ValidationError, indent: int | None = None) -> str:
    return json.dumps(to_primitive(error), indent=indent, ensure_ascii=False)


def _dump_yaml(data: Any) -> str:
    yaml = YAML()
    yaml.default_flow_style = False
    stream = io.StringIO()
    yaml.dump(data, stream)
    return stream.getvalue()


def to_yaml(error: ValidationError) -> str:
    return _dump_yaml(to_primitive(error))


def format_path(path: tuple[Location, ...]) -> str:
    """Render a location path as ``a.b[0].c``."""
    parts: list[str] = []
    for location in path:
        if isinstance(location, Index):
            parts.append(f"[{location.index}]")
        elif parts:
            parts.append(f".{location}")
        else:
            parts.append(str(location))
    return "".join(parts)


def flatten(error: ValidationError) -> list[ErrorEntry]:
    """List every reason in the tree with the path that leads to it."""
    return [
        ErrorEntry(
            path=format_path(path),
            location=[loc.index if isinstance(loc, Index) else str(loc) for loc in path],
            message=reason,
        )
        for path, reason in error.walk()
    ]


def build_report(outcome: Outcome) -> ValidationReport:
    if outcome is None:
        return ValidationReport(valid=True)
    return ValidationReport(valid=False, errors=flatten(outcome), tree=to_primitive(outcome))


def render(outcome: Outcome, fmt: str | None = None, settings: Settings | None = None) -> str:
    """Render the report for ``outcome`` as JSON or YAML text."""
    settings = settings or get_settings()
    fmt = fmt or settings.report_format
    if fmt not in _FORMATS:
        raise ValueError(f"Unknown report format '{fmt}'. Available: {', '.join(_FORMATS)}")

    report = build_report(outcome)
    logger.debug("Rendering %s report (%d errors)", fmt, len(report.errors))
    data = report.model_dump(mode="json")
    if fmt == "yaml":
        return _dump_yaml(data)
    return json.dumps(data, indent=settings.report_indent, ensure_ascii=False)
