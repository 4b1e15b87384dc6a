"""Process-wide converter registry.

A single ``ConversionRegistry`` lives at module scope and is populated with
the built-in converters on import (``init()``).  Binding layers add their own
types during setup::

    from dynval import register_converter

    @register_converter("date")
    def convert_date(val, ctx):
        return datetime.date.fromisoformat(val)
"""

from __future__ import annotations

from typing import Any, Callable

from .converters import BUILTIN_CONVERTERS
from .core import ConversionRegistry, Converter, Dynamic

_REGISTRY = ConversionRegistry()


def default_registry() -> ConversionRegistry:
    """Return the process-wide registry."""
    return _REGISTRY


def init() -> ConversionRegistry:
    """Register the built-in converters, restoring any that were overwritten."""
    for name, converter in BUILTIN_CONVERTERS.items():
        _REGISTRY.register(name, converter)
    return _REGISTRY


def register(name: str, converter: Converter) -> None:
    """Register *converter* under *name* on the process-wide registry."""
    _REGISTRY.register(name, converter)


def register_converter(name: str) -> Callable[[Converter], Converter]:
    """Decorator that registers a converter under a given name."""

    def decorator(func: Converter) -> Converter:
        _REGISTRY.register(name, func)
        return func

    return decorator


def supports(name: str) -> bool:
    return _REGISTRY.supports(name)


def lookup(name: str) -> Converter | None:
    return _REGISTRY.lookup(name)


def convert(wrapper: Dynamic, name: str) -> Any:
    """Convert *wrapper* with the process-wide registry.

    Raises ``MissingConverterError`` if *name* is not registered.
    """
    return _REGISTRY.convert(wrapper, name)


def convert_value(value: Any, name: str, context: Any = None) -> Any:
    """Shorthand for ``convert(Dynamic(value, context), name)``."""
    return _REGISTRY.convert(Dynamic(value, context), name)


init()
