"""
Field and method dumps.

Each dump enumerates the members declared directly on a class and renders one
line per member; the `write_*` variants wrap those lines in the block markers.
"""

from __future__ import annotations

from typing import Any

from ..observability.logging import get_logger
from .formatting import DEFAULT_FORMAT, DumpFormat, Sink, write_block
from .reflector import Reflector, get_reflector

log = get_logger("dump")


def dump_fields(
    obj: Any,
    type_filter: Any = None,
    *,
    reflector: Reflector | None = None,
    fmt: DumpFormat = DEFAULT_FORMAT,
) -> list[str]:
    """
    Render `"<type> <name>=<value>"` for every field declared on `type(obj)`.

    Args:
        obj: Object whose fields are read
        type_filter: Only fields whose declared type equals this one

    Returns:
        One line per readable field, in declaration order. Fields that cannot
        be read are skipped; `None` renders as the null label.
    """
    reflector = reflector or get_reflector()
    lines: list[str] = []

    for field in reflector.declared_fields(type(obj)):
        if type_filter is not None and type_filter != field.declared_type:
            continue

        result = reflector.read(obj, field)
        if not result.ok:
            log.debug("field_read_skipped", field=field.name, error=str(result.error))
            continue

        lines.append(
            field.type_name + fmt.space + field.name + fmt.equals + fmt.render_value(result.value)
        )

    return lines


def dump_methods(
    cls: type,
    return_type_filter: Any = None,
    *,
    reflector: Reflector | None = None,
    fmt: DumpFormat = DEFAULT_FORMAT,
) -> list[str]:
    """Render `"<return> <name>([<params>])"` for every method declared on `cls`."""
    reflector = reflector or get_reflector()
    lines: list[str] = []

    for method in reflector.declared_methods(cls):
        if return_type_filter is not None and return_type_filter != method.return_type:
            continue
        lines.append(
            method.return_type_name
            + fmt.space
            + method.name
            + fmt.open_call
            + fmt.render_list(method.parameter_type_names)
            + fmt.close_call
        )

    return lines


def write_fields(
    obj: Any,
    sink: Sink | None,
    type_filter: Any = None,
    *,
    reflector: Reflector | None = None,
    fmt: DumpFormat = DEFAULT_FORMAT,
) -> None:
    if sink is None:
        return
    write_block(sink, dump_fields(obj, type_filter, reflector=reflector, fmt=fmt), fmt=fmt)


def write_methods(
    cls: type,
    sink: Sink | None,
    return_type_filter: Any = None,
    *,
    reflector: Reflector | None = None,
    fmt: DumpFormat = DEFAULT_FORMAT,
) -> None:
    if sink is None:
        return
    write_block(sink, dump_methods(cls, return_type_filter, reflector=reflector, fmt=fmt), fmt=fmt)
