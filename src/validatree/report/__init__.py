"""Rendering of validation outcomes for callers and tooling."""

from validatree.report.render import (
    build_report,
    flatten,
    format_path,
    render,
    to_json,
    to_primitive,
    to_yaml,
)

__all__ = [
    "build_report",
    "flatten",
    "format_path",
    "render",
    "to_json",
    "to_primitive",
    "to_yaml",
]
