"""
Reflection capability.

`Reflector` is the narrow interface the dump, assignment and lookup functions
depend on. `PythonReflector` implements it over the interpreter's own class
metadata; a host can pass any other implementation (for instance pre-built
descriptor tables keyed by class).
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
from typing import Any, ClassVar, Protocol, get_origin

from ..errors import MemberAccessError
from .descriptors import AccessResult, FieldDescriptor, MethodDescriptor


_CONSTRUCTORS = ("__init__", "__new__")
# Emitted by the compiler for lazily evaluated annotations, never written by hand.
_GENERATED = ("__annotate__",)
_NoneType = type(None)


class Reflector(Protocol):
    def declared_fields(self, cls: type) -> list[FieldDescriptor]: ...

    def declared_methods(self, cls: type) -> list[MethodDescriptor]: ...

    def read(self, obj: Any, field: FieldDescriptor) -> AccessResult: ...

    def write(self, obj: Any, field: FieldDescriptor, value: Any) -> AccessResult: ...


def storage_attribute(cls: type, name: str) -> str:
    """Instance attribute that backs `name` on `cls` (private names are mangled)."""
    if name.startswith("__") and not name.endswith("__"):
        owner = cls.__name__.lstrip("_")
        if owner:
            return f"_{owner}{name}"
    return name


def _is_class_level(tp: Any) -> bool:
    if isinstance(tp, str):
        return tp.startswith(("ClassVar", "typing.ClassVar", "InitVar", "dataclasses.InitVar"))
    return tp is ClassVar or get_origin(tp) is ClassVar or isinstance(tp, dataclasses.InitVar)


def _resolve_annotations(
    annotations: dict[str, Any],
    globalns: dict[str, Any],
    localns: dict[str, Any],
) -> dict[str, Any]:
    """
    Evaluate string annotations one by one.

    An annotation that cannot be evaluated (a `TYPE_CHECKING`-only import, a
    name local to some function) stays as its source string.
    """
    resolved: dict[str, Any] = {}
    for name, tp in annotations.items():
        if isinstance(tp, str):
            try:
                tp = eval(tp, globalns, localns)
            except Exception:
                pass
        resolved[name] = _NoneType if tp is None else tp
    return resolved


def _class_namespace(cls: type) -> dict[str, Any]:
    # The class itself is visible by name so local classes can refer to themselves.
    return {cls.__name__: cls, **vars(cls)}


def _own_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [s for s in slots if s not in ("__dict__", "__weakref__")]


class PythonReflector:
    """Reflector over a class's own annotations, slots and namespace."""

    def declared_fields(self, cls: type) -> list[FieldDescriptor]:
        """
        Fields declared directly on `cls`, in declaration order.

        Own annotations first (ClassVar/InitVar excluded), then unannotated
        own slots typed as `Any`. Base classes are never consulted.
        """
        fields: list[FieldDescriptor] = []
        module = sys.modules.get(cls.__module__)
        annotations = _resolve_annotations(
            inspect.get_annotations(cls),
            getattr(module, "__dict__", {}),
            _class_namespace(cls),
        )
        for name, tp in annotations.items():
            if _is_class_level(tp):
                continue
            fields.append(FieldDescriptor(
                name=name,
                declared_type=tp,
                owner=cls,
                attribute=storage_attribute(cls, name),
            ))

        for name in _own_slots(cls):
            if name in annotations:
                continue
            fields.append(FieldDescriptor(
                name=name,
                declared_type=Any,
                owner=cls,
                attribute=storage_attribute(cls, name),
            ))
        return fields

    def declared_methods(self, cls: type) -> list[MethodDescriptor]:
        """
        Methods defined in the body of `cls`, in definition order.

        Plain functions, staticmethods and classmethods; constructors and
        other descriptors (properties, slots) are left out.
        """
        methods: list[MethodDescriptor] = []
        for name, raw in vars(cls).items():
            if name in _CONSTRUCTORS or name in _GENERATED:
                continue
            if isinstance(raw, (staticmethod, classmethod)):
                func = raw.__func__
            elif inspect.isfunction(raw):
                func = raw
            else:
                continue

            hints = _resolve_annotations(
                inspect.get_annotations(func),
                getattr(inspect.unwrap(func), "__globals__", {}),
                _class_namespace(cls),
            )
            params = list(inspect.signature(func).parameters.values())
            if not isinstance(raw, staticmethod) and params:
                # Drop the bound receiver (self / cls).
                params = params[1:]

            methods.append(MethodDescriptor(
                name=name,
                return_type=hints.get("return", Any),
                parameter_types=tuple(hints.get(p.name, Any) for p in params),
                owner=cls,
                raw=raw,
            ))
        return methods

    def read(self, obj: Any, field: FieldDescriptor) -> AccessResult:
        # object.__getattribute__ skips any __getattr__/__getattribute__ override on the class.
        try:
            value = object.__getattribute__(obj, field.attribute)
        except AttributeError as e:
            return AccessResult(field=field, error=MemberAccessError(
                message=f"cannot read {field.owner.__qualname__}.{field.name}",
                member=field.name,
                owner=field.owner.__qualname__,
                operation="read",
                cause=e,
            ))
        return AccessResult(field=field, value=value)

    def write(self, obj: Any, field: FieldDescriptor, value: Any) -> AccessResult:
        # object.__setattr__ bypasses __setattr__ overrides, frozen dataclasses included.
        try:
            object.__setattr__(obj, field.attribute, value)
        except AttributeError as e:
            return AccessResult(field=field, value=value, error=MemberAccessError(
                message=f"cannot write {field.owner.__qualname__}.{field.name}",
                member=field.name,
                owner=field.owner.__qualname__,
                operation="write",
                cause=e,
            ))
        return AccessResult(field=field, value=value)


_default_reflector: PythonReflector | None = None


def get_reflector() -> PythonReflector:
    """Get the shared default reflector (stateless, safe to share)."""
    global _default_reflector
    if _default_reflector is None:
        _default_reflector = PythonReflector()
    return _default_reflector
