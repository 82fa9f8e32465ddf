"""Schema registry: maps types to their validation routines."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from validatree.engine.protocol import ValidationRoutine

logger = logging.getLogger("validatree.registry")


class SchemaRegistry:
    """Registry of per-type validation routines.

    Lookup walks the value type's MRO, so a routine registered for a base
    class also covers its subclasses unless they register their own.
    Thread-safe.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._routines: dict[type, ValidationRoutine] = {}

    def register(self, cls: type, routine: ValidationRoutine) -> ValidationRoutine:
        """Register ``routine`` as the validation routine for ``cls``."""
        if not isinstance(cls, type):
            raise TypeError(f"Can only register routines for classes, got {cls!r}")
        with self._lock:
            if cls in self._routines:
                logger.warning("Replacing validation routine for %s", cls.__qualname__)
            self._routines[cls] = routine
        logger.debug("Registered %s for %s", getattr(routine, "__name__", routine), cls.__qualname__)
        return routine

    def validator_for(self, cls: type) -> Callable[[ValidationRoutine], ValidationRoutine]:
        """Decorator form of :meth:`register`."""

        def decorator(routine: ValidationRoutine) -> ValidationRoutine:
            return self.register(cls, routine)

        return decorator

    def lookup(self, cls: type) -> ValidationRoutine | None:
        """Return the routine for ``cls`` or its nearest registered base."""
        with self._lock:
            for base in cls.__mro__:
                routine = self._routines.get(base)
                if routine is not None:
                    return routine
        return None

    def unregister(self, cls: type) -> None:
        with self._lock:
            self._routines.pop(cls, None)

    def available(self) -> list[str]:
        """List registered type names."""
        with self._lock:
            return sorted(cls.__qualname__ for cls in self._routines)

    def __contains__(self, cls: object) -> bool:
        with self._lock:
            return cls in self._routines

    def reset(self) -> None:
        """Clear all registered routines (for testing)."""
        with self._lock:
            self._routines.clear()


default_registry = SchemaRegistry()


def register_validator(cls: type, routine: ValidationRoutine) -> ValidationRoutine:
    """Register ``routine`` for ``cls`` in the default registry."""
    return default_registry.register(cls, routine)


def validator_for(cls: type) -> Callable[[ValidationRoutine], ValidationRoutine]:
    """Decorator registering a routine for ``cls`` in the default registry."""
    return default_registry.validator_for(cls)
