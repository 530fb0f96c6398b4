"""
Single-member lookup by name, type and signature.

All lookups return `None` when nothing matches.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..observability.logging import get_logger
from .descriptors import FieldDescriptor, MethodDescriptor, type_name as _type_name
from .reflector import Reflector, get_reflector

log = get_logger("lookup")


def find_field(
    cls: type,
    name: str | None = None,
    type_name: str | None = None,
    *,
    reflector: Reflector | None = None,
) -> FieldDescriptor | None:
    """
    First declared field matching the given criteria.

    NOTE: the type criterion is inverted. A field is accepted when its type
    name is *not* `type_name`. Existing callers depend on this; use
    `find_field_exact_type` for an equality match.
    """
    reflector = reflector or get_reflector()
    for field in reflector.declared_fields(cls):
        if name is not None and name != field.name:
            continue
        if type_name is not None and field.type_name == type_name:
            continue
        return field

    log.debug("field_not_found", owner=cls.__qualname__, name=name, type_name=type_name)
    return None


def find_field_by_name(cls: type, name: str, *, reflector: Reflector | None = None) -> FieldDescriptor | None:
    return find_field(cls, name, None, reflector=reflector)


def find_field_by_type(cls: type, tp: Any, *, reflector: Reflector | None = None) -> FieldDescriptor | None:
    return find_field(cls, None, _type_name(tp), reflector=reflector)


def find_field_exact_type(
    fields: Iterable[FieldDescriptor],
    tp: Any,
    name: str | None = None,
) -> FieldDescriptor | None:
    """Last field in `fields` whose declared type is exactly `tp` (and named `name`, if given)."""
    found: FieldDescriptor | None = None
    for field in fields:
        if name is not None and name != field.name:
            continue
        if field.declared_type == tp:
            found = field
    return found


def find_method(
    cls: type,
    name: str | None = None,
    return_type_name: str | None = None,
    param_type_names: Sequence[str] | None = None,
    *,
    reflector: Reflector | None = None,
) -> MethodDescriptor | None:
    """
    First declared method matching every supplied criterion.

    `param_type_names` must match the parameter type names position by
    position, with the same length.
    """
    reflector = reflector or get_reflector()
    wanted = tuple(param_type_names) if param_type_names is not None else None

    for method in reflector.declared_methods(cls):
        if name is not None and name != method.name:
            continue
        if return_type_name is not None and return_type_name != method.return_type_name:
            continue
        if wanted is not None and wanted != method.parameter_type_names:
            continue
        return method

    log.debug(
        "method_not_found",
        owner=cls.__qualname__,
        name=name,
        return_type_name=return_type_name,
        param_type_names=list(wanted) if wanted is not None else None,
    )
    return None


def find_method_by_name(cls: type, name: str, *, reflector: Reflector | None = None) -> MethodDescriptor | None:
    return find_method(cls, name, None, None, reflector=reflector)


def find_method_by_return_type(cls: type, tp: Any, *, reflector: Reflector | None = None) -> MethodDescriptor | None:
    return find_method(cls, None, _type_name(tp), None, reflector=reflector)


def find_method_by_params(
    cls: type,
    param_types: Sequence[Any],
    *,
    reflector: Reflector | None = None,
) -> MethodDescriptor | None:
    return find_method(cls, None, None, [_type_name(p) for p in param_types], reflector=reflector)
