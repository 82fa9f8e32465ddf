"""Shared test fixtures for validatree."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field

import pytest

from validatree import validators
from validatree.engine.builder import ErrorBuilder
from validatree.engine.dispatch import validate
from validatree.engine.protocol import Outcome
from validatree.engine.registry import SchemaRegistry, default_registry
from validatree.models.errors import ValidationError
from validatree.settings import get_settings


class Dummy:
    """Validates to a single reason when constructed with ``False``."""

    def __init__(self, ok: bool) -> None:
        self.ok = ok

    def validate(self) -> Outcome:
        if self.ok:
            return None
        return ValidationError.new("false")


@dataclass
class Inner:
    in_a: int
    in_b: list[bool] = field(default_factory=list)
    in_c: bool | None = None


@dataclass
class Outer:
    out_a: float
    out_b: Inner
    out_c: bool | None
    out_d: dict[str, Inner] = field(default_factory=dict)
    out_e: str = ""
    out_f: list[Inner] = field(default_factory=list)


def custom_str_compare(value: str) -> Outcome:
    expected = "hello world"
    if value != expected:
        return ValidationError.new(f"'{value}' does not equal '{expected}'")
    return None


def check_inner(value: Inner, builder: ErrorBuilder) -> Outcome:
    return (
        builder.at_named("in_a", validators.min(value.in_a, 14))
        .at_named("in_b", validators.min_length(value.in_b, 3))
        .at_named("in_c", validators.required(value.in_c))
        .finish()
    )


def make_check_outer(registry: SchemaRegistry):
    def check_outer(value: Outer, builder: ErrorBuilder) -> Outcome:
        builder.at_named("out_a", validators.min(value.out_a, 2.0))
        builder.at_named("out_a", validators.max(value.out_a, 0.0))
        builder.at_named("out_a", validators.equals(value.out_a, 3.0))
        builder.at_named("out_c", validators.required(value.out_c))
        builder.at_named("out_e", custom_str_compare(value.out_e))
        builder.at_named("out_b", validate(value.out_b, registry))
        builder.at_named("out_d", validate(value.out_d, registry))
        builder.at_named("out_f", validate(value.out_f, registry))
        return builder.finish()

    return check_outer


@pytest.fixture
def registry() -> SchemaRegistry:
    """A registry with routines for Inner and Outer."""
    reg = SchemaRegistry()
    reg.register(Inner, check_inner)
    reg.register(Outer, make_check_outer(reg))
    return reg


@pytest.fixture
def good_inner() -> Inner:
    return Inner(in_a=20, in_b=[True, True, True], in_c=True)


@pytest.fixture
def bad_outer() -> Outer:
    return Outer(
        out_a=1.0,
        out_b=Inner(in_a=12, in_b=[True, True], in_c=None),
        out_c=None,
        out_d={
            "a good example": Inner(in_a=20, in_b=[True, True, True], in_c=True),
            "a bad example": Inner(in_a=0, in_b=[], in_c=True),
        },
        out_e="goodbye cruel world",
        out_f=[Inner(in_a=0, in_b=[], in_c=True)],
    )


@pytest.fixture(autouse=True)
def _clean_global_state() -> Generator[None, None, None]:
    yield
    default_registry.reset()
    get_settings.cache_clear()
