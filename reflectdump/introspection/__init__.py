"""
Object introspection: field/method dumps, type-compatible assignment,
member lookup and stack trace rendering.
"""

from .assign import assign_to_compatible_fields, write_assignments
from .descriptors import AccessResult, FieldDescriptor, MethodDescriptor, is_assignable, type_name
from .dump import dump_fields, dump_methods, write_fields, write_methods
from .formatting import DEFAULT_FORMAT, DumpFormat, Sink
from .lookup import (
    find_field,
    find_field_by_name,
    find_field_by_type,
    find_field_exact_type,
    find_method,
    find_method_by_name,
    find_method_by_params,
    find_method_by_return_type,
)
from .reflector import PythonReflector, Reflector, get_reflector
from .stack_trace import (
    capture_stack,
    describe_frame,
    format_stack_trace,
    frames_from_traceback,
    grouping_key,
    write_stack_trace,
)


# Lazy import to avoid circular dependencies (settings imports this package)
def get_introspector():
    from .introspector import get_introspector as _get
    return _get()


__all__ = [
    "AccessResult",
    "DEFAULT_FORMAT",
    "DumpFormat",
    "FieldDescriptor",
    "MethodDescriptor",
    "PythonReflector",
    "Reflector",
    "Sink",
    "assign_to_compatible_fields",
    "capture_stack",
    "describe_frame",
    "dump_fields",
    "dump_methods",
    "find_field",
    "find_field_by_name",
    "find_field_by_type",
    "find_field_exact_type",
    "find_method",
    "find_method_by_name",
    "find_method_by_params",
    "find_method_by_return_type",
    "format_stack_trace",
    "frames_from_traceback",
    "get_introspector",
    "get_reflector",
    "grouping_key",
    "is_assignable",
    "type_name",
    "write_assignments",
    "write_fields",
    "write_methods",
    "write_stack_trace",
]
