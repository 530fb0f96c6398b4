"""
reflectdump: dump object fields and methods, assign by type compatibility,
look members up by signature and render readable stack traces.
"""

from .errors import MemberAccessError, ReflectionError
from .introspection import (
    DEFAULT_FORMAT,
    DumpFormat,
    assign_to_compatible_fields,
    capture_stack,
    dump_fields,
    dump_methods,
    find_field,
    find_field_exact_type,
    find_method,
    format_stack_trace,
    get_introspector,
    write_assignments,
    write_fields,
    write_methods,
    write_stack_trace,
)
from .introspection.introspector import Introspector
from .utils import sequence_contains

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FORMAT",
    "DumpFormat",
    "Introspector",
    "MemberAccessError",
    "ReflectionError",
    "assign_to_compatible_fields",
    "capture_stack",
    "dump_fields",
    "dump_methods",
    "find_field",
    "find_field_exact_type",
    "find_method",
    "format_stack_trace",
    "get_introspector",
    "sequence_contains",
    "write_assignments",
    "write_fields",
    "write_methods",
    "write_stack_trace",
]
