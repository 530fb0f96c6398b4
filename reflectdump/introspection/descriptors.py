"""
Member descriptors produced by a reflector.

Descriptors are rebuilt on every enumeration and never cached.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Annotated, Any, Final, Union, get_args, get_origin

from ..errors import MemberAccessError

NoneType = type(None)


def type_name(tp: Any) -> str:
    """
    Render a declared type the way dump lines and lookups compare it.

    Builtins render bare (`int`), other classes as `module.Qualname`,
    typing constructs with their own `str()`.
    """
    if tp is None or tp is NoneType:
        return "None"
    if get_origin(tp) is not None:
        return str(tp)
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return str(tp)


def is_assignable(declared: Any, value_type: type) -> bool:
    """True when a value of `value_type` may be stored in a field declared as `declared`."""
    if declared is Any or declared is object or declared is Final:
        return True
    if declared is None:
        declared = NoneType

    origin = get_origin(declared)
    if origin is Union or origin is types.UnionType:
        return any(is_assignable(arg, value_type) for arg in get_args(declared))
    if origin is Annotated or origin is Final:
        return is_assignable(get_args(declared)[0], value_type)
    if origin is not None:
        declared = origin

    if isinstance(declared, type):
        try:
            return issubclass(value_type, declared)
        except TypeError:
            # Non-runtime protocols (and protocols with data members) refuse class checks.
            return False
    return False


@dataclass(frozen=True)
class FieldDescriptor:
    """A field declared directly on `owner`."""
    name: str
    declared_type: Any
    owner: type
    # Storage attribute on instances; differs from `name` for private (mangled) fields.
    attribute: str

    @property
    def type_name(self) -> str:
        return type_name(self.declared_type)


@dataclass(frozen=True)
class MethodDescriptor:
    """A method declared directly on `owner`, receiver excluded from `parameter_types`."""
    name: str
    return_type: Any
    parameter_types: tuple[Any, ...]
    owner: type
    raw: Any = field(repr=False, compare=False)

    @property
    def return_type_name(self) -> str:
        return type_name(self.return_type)

    @property
    def parameter_type_names(self) -> tuple[str, ...]:
        return tuple(type_name(p) for p in self.parameter_types)

    def invoke(self, target: Any, *args: Any, **kwargs: Any) -> Any:
        """Call the method on `target` (an instance, or the owner class for static/class methods)."""
        if isinstance(target, type):
            bound = self.raw.__get__(None, target)
        else:
            bound = self.raw.__get__(target, type(target))
        return bound(*args, **kwargs)


@dataclass(frozen=True)
class AccessResult:
    """Outcome of one read or write through the visibility override."""
    field: FieldDescriptor
    value: Any = None
    error: MemberAccessError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value
