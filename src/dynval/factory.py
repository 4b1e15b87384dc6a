"""Registry factory: the single place where an isolated registry is assembled.

``build_default_registry`` is the entry point for callers that want their own
``ConversionRegistry`` instead of mutating the process-wide one (tests,
embedded binding layers with different type sets, …).

Customisation points:

* **converters**       – extra ``{name: converter}`` entries; override
                         built-ins of the same name.
* **include_builtins** – ``False`` → start from an empty table.
* **context_types**    – ``{name: jmespath_expression}``; each becomes a
                         context converter (see ``dynval.context``).
"""

from __future__ import annotations

from typing import Mapping

import jmespath

from .context import make_context_converter
from .converters import BUILTIN_CONVERTERS
from .core import ConversionRegistry, Converter


def build_default_registry(
        *,
        converters: Mapping[str, Converter] | None = None,
        include_builtins: bool = True,
        context_types: Mapping[str, str] | None = None,
        jmes_options: jmespath.Options | None = None,
) -> ConversionRegistry:
    """Assemble a fresh ``ConversionRegistry``.

    Registration order (later wins on name clashes):

    1. built-ins (``boolean``, ``number``) unless *include_builtins* is False;
    2. *converters*;
    3. one context converter per *context_types* entry.

    Args:
        converters:       Custom converters.
        include_builtins: Pre-register ``boolean`` and ``number``.
        context_types:    Type names backed by a JMESPath expression over
                          ``{"value": …, "context": …}``.
        jmes_options:     Custom JMESPath options for *context_types*.
                          ``None`` → built-in (``as_boolean``, ``as_number``).

    Returns:
        A registry that shares no state with the process-wide one.

    Example::

        registry = build_default_registry(
            converters={"upper": lambda val, ctx: str(val).upper()},
            context_types={"client_ip": "context.ip"},
        )
        registry.convert(Dynamic("yes"), "boolean")                 # True
        registry.convert(Dynamic(None, {"ip": "10.0.0.1"}), "client_ip")
        # → "10.0.0.1"
    """
    registry = ConversionRegistry()

    if include_builtins:
        for name, converter in BUILTIN_CONVERTERS.items():
            registry.register(name, converter)

    for name, converter in (converters or {}).items():
        registry.register(name, converter)

    for name, expression in (context_types or {}).items():
        registry.register(name, make_context_converter(expression, jmes_options=jmes_options))

    return registry
