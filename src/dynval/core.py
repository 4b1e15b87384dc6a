"""Core abstractions: the ``Dynamic`` wrapper and ``ConversionRegistry``.

A *conversion request* pairs a raw value with an opaque context object
(``Dynamic``) and names the type it should become.  ``ConversionRegistry``
maps type names to converter functions and dispatches the request::

    registry.convert(Dynamic("1", ctx), "boolean")
      │
      ▼
    converter = registry.lookup("boolean")     ← O(1) dict lookup
      │                                         (MissingConverterError if absent)
      ▼
    converter("1", ctx)                         → True

Exports
-------
Converter
    Type alias for the converter signature: ``(value, context) → Any``.

Dynamic
    Immutable ``(value, context)`` pair handed to a converter.

ConversionRegistry
    Name → converter table with register / supports / lookup / convert.

MissingConverterError
    Raised by ``convert`` when no converter is registered for the name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeAlias

#: Converter signature.  *context* is whatever the caller put into
#: ``Dynamic.context``; converters may read it but must not mutate it.
Converter: TypeAlias = Callable[[Any, Any], Any]


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


class MissingConverterError(ValueError):
    """No converter is registered under the requested type name.

    This is a configuration error on the caller's side, so it is raised
    immediately and never retried or replaced by a default value.
    """

    def __init__(self, name: str, available: Optional[List[str]] = None) -> None:
        self.name = name
        self.available = list(available or [])
        super().__init__(
            f"No type converter defined for {name!r}. "
            f"Available types: {self.available}"
        )


# ─────────────────────────────────────────────────────────────────────────────
# Dynamic: the conversion request
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Dynamic:
    """A raw value bound to the context it was received in.

    Attributes:
        value:   The raw input (e.g. a query-string parameter).
        context: Opaque collaborator data (e.g. the current request).  Passed
                 to the converter untouched.
    """

    value: Any
    context: Any = None

    def to(self, name: str, registry: Optional['ConversionRegistry'] = None) -> Any:
        """Convert this value to the type registered as *name*.

        Uses the process-wide registry unless *registry* is given.
        """
        if registry is None:
            from .registry import default_registry
            registry = default_registry()
        return registry.convert(self, name)


# ─────────────────────────────────────────────────────────────────────────────
# ConversionRegistry
# ─────────────────────────────────────────────────────────────────────────────


class ConversionRegistry:
    """Flat registry of named converters.

    Registration is additive and last-write-wins: registering a converter
    under an existing name silently replaces the previous one.  There is no
    removal operation.

    No locking is done.  ``register`` is meant to run during setup; calls to
    it must be serialized by the caller.  ``supports`` / ``lookup`` /
    ``convert`` only read the table.
    """

    def __init__(self, converters: Optional[Mapping[str, Converter]] = None) -> None:
        self._converters: Dict[str, Converter] = dict(converters or {})

    # -- registration -------------------------------------------------------

    def register(self, name: str, converter: Converter) -> None:
        """Register *converter* under *name*, replacing any previous one."""
        self._converters[name] = converter

    # -- queries ------------------------------------------------------------

    def lookup(self, name: str) -> Optional[Converter]:
        """Return the converter registered under *name*, or ``None``."""
        return self._converters.get(name)

    def supports(self, name: str) -> bool:
        """Return True if a converter is registered under *name*."""
        return self.lookup(name) is not None

    def names(self) -> List[str]:
        """Return all registered type names, sorted."""
        return sorted(self._converters)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.supports(name)

    # -- dispatch -----------------------------------------------------------

    def convert(self, wrapper: Dynamic, name: str) -> Any:
        """Convert ``wrapper.value`` to the type registered as *name*.

        The converter's result is returned unchanged, ``None`` included.
        Exceptions raised by the converter propagate to the caller as-is.

        Raises:
            MissingConverterError: no converter is registered under *name*.
        """
        converter = self.lookup(name)
        if converter is None:
            raise MissingConverterError(name, self.names())
        return converter(wrapper.value, wrapper.context)
