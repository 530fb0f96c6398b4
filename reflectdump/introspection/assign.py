from __future__ import annotations

from typing import Any

from ..observability.logging import get_logger
from .descriptors import is_assignable
from .formatting import DEFAULT_FORMAT, DumpFormat, Sink, write_inline
from .reflector import Reflector, get_reflector

log = get_logger("assign")


def assign_to_compatible_fields(
    value: Any,
    target: Any,
    *,
    reflector: Reflector | None = None,
    fmt: DumpFormat = DEFAULT_FORMAT,
) -> list[str]:
    """
    Store `value` into every field of `target` whose declared type can hold it.

    Compatibility is assignability, not exact match: an `object` or `Any`
    field takes any value. Fields that refuse the write are skipped and the
    rest are still processed.

    Returns:
        `"<name>=<value>"` for each field actually written, in declaration order.
    """
    reflector = reflector or get_reflector()
    value_type = type(value)
    records: list[str] = []

    for field in reflector.declared_fields(type(target)):
        if not is_assignable(field.declared_type, value_type):
            continue

        result = reflector.write(target, field, value)
        if not result.ok:
            log.debug("field_write_skipped", field=field.name, error=str(result.error))
            continue

        records.append(field.name + fmt.equals + fmt.render_value(value))

    log.debug("fields_assigned", target=type(target).__qualname__, count=len(records))
    return records


def write_assignments(
    value: Any,
    target: Any,
    sink: Sink | None,
    *,
    reflector: Reflector | None = None,
    fmt: DumpFormat = DEFAULT_FORMAT,
) -> None:
    # No sink means no assignment either.
    if sink is None:
        return
    write_inline(sink, assign_to_compatible_fields(value, target, reflector=reflector, fmt=fmt))
