"""Generate C++ interface headers for native-module schemas."""

from __future__ import annotations

from cxx_module_header_generator.run import generate
from cxx_module_header_generator.schema import Method, ModuleSpec, Parameter, Schema, TypeAnnotation
from cxx_module_header_generator.writer import OUTPUT_FILE_NAME, UnsupportedTypeError, Writer

__all__ = [
    "OUTPUT_FILE_NAME",
    "Method",
    "ModuleSpec",
    "Parameter",
    "Schema",
    "TypeAnnotation",
    "UnsupportedTypeError",
    "Writer",
    "generate",
]
