"""
Introspector facade.

Binds the dump, assignment, lookup and stack functions to one reflector and
one `DumpFormat`. It holds no other state.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from . import assign, dump, lookup, stack_trace
from .descriptors import FieldDescriptor, MethodDescriptor
from .formatting import DEFAULT_FORMAT, DumpFormat, Sink
from .reflector import Reflector, get_reflector


class Introspector:
    def __init__(self, reflector: Reflector | None = None, fmt: DumpFormat | None = None):
        self.reflector: Reflector = reflector or get_reflector()
        self.fmt: DumpFormat = fmt or DEFAULT_FORMAT

    # Dumps

    def dump_fields(self, obj: Any, type_filter: Any = None) -> list[str]:
        return dump.dump_fields(obj, type_filter, reflector=self.reflector, fmt=self.fmt)

    def write_fields(self, obj: Any, sink: Sink | None, type_filter: Any = None) -> None:
        dump.write_fields(obj, sink, type_filter, reflector=self.reflector, fmt=self.fmt)

    def dump_methods(self, cls: type, return_type_filter: Any = None) -> list[str]:
        return dump.dump_methods(cls, return_type_filter, reflector=self.reflector, fmt=self.fmt)

    def write_methods(self, cls: type, sink: Sink | None, return_type_filter: Any = None) -> None:
        dump.write_methods(cls, sink, return_type_filter, reflector=self.reflector, fmt=self.fmt)

    # Assignment

    def assign_to_compatible_fields(self, value: Any, target: Any) -> list[str]:
        return assign.assign_to_compatible_fields(value, target, reflector=self.reflector, fmt=self.fmt)

    def write_assignments(self, value: Any, target: Any, sink: Sink | None) -> None:
        assign.write_assignments(value, target, sink, reflector=self.reflector, fmt=self.fmt)

    # Lookup

    def find_field(self, cls: type, name: str | None = None, type_name: str | None = None) -> FieldDescriptor | None:
        return lookup.find_field(cls, name, type_name, reflector=self.reflector)

    def find_field_by_name(self, cls: type, name: str) -> FieldDescriptor | None:
        return lookup.find_field_by_name(cls, name, reflector=self.reflector)

    def find_field_by_type(self, cls: type, tp: Any) -> FieldDescriptor | None:
        return lookup.find_field_by_type(cls, tp, reflector=self.reflector)

    def find_field_exact_type(
        self, fields: Iterable[FieldDescriptor], tp: Any, name: str | None = None
    ) -> FieldDescriptor | None:
        return lookup.find_field_exact_type(fields, tp, name)

    def find_method(
        self,
        cls: type,
        name: str | None = None,
        return_type_name: str | None = None,
        param_type_names: Sequence[str] | None = None,
    ) -> MethodDescriptor | None:
        return lookup.find_method(cls, name, return_type_name, param_type_names, reflector=self.reflector)

    def find_method_by_name(self, cls: type, name: str) -> MethodDescriptor | None:
        return lookup.find_method_by_name(cls, name, reflector=self.reflector)

    def find_method_by_return_type(self, cls: type, tp: Any) -> MethodDescriptor | None:
        return lookup.find_method_by_return_type(cls, tp, reflector=self.reflector)

    def find_method_by_params(self, cls: type, param_types: Sequence[Any]) -> MethodDescriptor | None:
        return lookup.find_method_by_params(cls, param_types, reflector=self.reflector)

    # Stack traces

    def format_stack_trace(self, frames: Iterable[Any]) -> list[str]:
        return stack_trace.format_stack_trace(frames, fmt=self.fmt)

    def write_stack_trace(self, frames: Iterable[Any], sink: Sink | None) -> None:
        stack_trace.write_stack_trace(frames, sink, fmt=self.fmt)


# Global introspector instance
_introspector: Introspector | None = None


def get_introspector() -> Introspector:
    """Get the process-wide introspector, formatted per `Settings`."""
    global _introspector
    if _introspector is None:
        from ..settings import get_settings
        _introspector = Introspector(fmt=get_settings().dump_format())
    return _introspector
