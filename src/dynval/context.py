"""Converters that read from the conversion context via JMESPath.

A binding layer usually passes something request-shaped as the context.  A
*context converter* evaluates a JMESPath expression against a small document
with two namespaces,

* ``value``   – the raw value being converted,
* ``context`` – the context object handed to ``Dynamic``,

and returns the result.  The context must be JSON-like (dicts / lists /
scalars) for JMESPath to see into it.

Built-in JMESPath functions
---------------------------
* ``as_boolean(x)`` – the ``boolean`` converter
* ``as_number(x)``  – the ``number`` converter

Example::

    ip = make_context_converter("context.request.ip")
    limit = make_context_converter("as_number(value || context.defaults.limit)")
"""

from __future__ import annotations

from typing import Any

import jmespath
from jmespath import functions as _jp_funcs

from .converters import convert_boolean, convert_number
from .core import Converter


class _ConverterJMESFunctions(_jp_funcs.Functions):
    """Expose the built-in converters to JMESPath expressions."""

    @_jp_funcs.signature({"types": []})
    def _func_as_boolean(self, value: Any) -> bool:
        return convert_boolean(value)

    @_jp_funcs.signature({"types": []})
    def _func_as_number(self, value: Any) -> Any:
        return convert_number(value)


JMES_OPTIONS = jmespath.Options(custom_functions=_ConverterJMESFunctions())


def make_context_converter(
        expression: str,
        *,
        jmes_options: jmespath.Options | None = None,
) -> Converter:
    """Build a converter that evaluates *expression* against value and context.

    The expression is compiled here, so a malformed one raises
    ``jmespath.exceptions.ParseError`` at registration time rather than on
    the first request.

    Args:
        expression:   JMESPath expression over ``{"value": …, "context": …}``.
        jmes_options: Custom ``jmespath.Options``.  ``None`` → options with
                      ``as_boolean`` / ``as_number``.
    """
    compiled = jmespath.compile(expression)
    options = jmes_options if jmes_options is not None else JMES_OPTIONS

    def context_converter(val: Any, ctx: Any) -> Any:
        return compiled.search({"value": val, "context": ctx}, options=options)

    context_converter.__name__ = f"context_converter[{expression}]"
    return context_converter
