"""Location segments addressing where inside a value a failure occurred."""

from __future__ import annotations

from dataclasses import dataclass


def _require_text(kind: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{kind} location must be a str, got {type(value).__name__}")


@dataclass(frozen=True)
class Named:
    """A struct field name or a logical constraint name."""

    name: str

    def __post_init__(self) -> None:
        _require_text("Named", self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index:
    """A position within an ordered sequence."""

    index: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a position
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f"Index location must be an int, got {type(self.index).__name__}")
        if self.index < 0:
            raise ValueError(f"Index location must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class Key:
    """A map key rendered to text."""

    key: str

    def __post_init__(self) -> None:
        _require_text("Key", self.key)

    def __str__(self) -> str:
        return self.key


Location = Named | Index | Key
