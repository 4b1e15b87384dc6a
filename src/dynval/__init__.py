from .context import JMES_OPTIONS, make_context_converter
from .converters import (
    BUILTIN_CONVERTERS,
    convert_boolean,
    convert_number,
    parse_number,
    to_number,
)
from .core import ConversionRegistry, Converter, Dynamic, MissingConverterError
from .factory import build_default_registry
from .registry import (
    convert,
    convert_value,
    default_registry,
    init,
    lookup,
    register,
    register_converter,
    supports,
)

__all__ = [
    # core
    "Converter",
    "Dynamic",
    "ConversionRegistry",
    "MissingConverterError",
    # built-in converters
    "BUILTIN_CONVERTERS",
    "convert_boolean",
    "convert_number",
    "parse_number",
    "to_number",
    # process-wide registry
    "default_registry",
    "init",
    "register",
    "register_converter",
    "supports",
    "lookup",
    "convert",
    "convert_value",
    # factory / context
    "build_default_registry",
    "make_context_converter",
    "JMES_OPTIONS",
]
