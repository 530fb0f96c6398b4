from __future__ import annotations

from typing import Any, Iterable


def sequence_contains(items: Iterable[Any], value: Any) -> bool:
    """
    Membership by identity or equality.

    `None` only matches a `None` item; it is never compared with `==`.
    """
    if value is None:
        return any(item is None for item in items)
    return any(item is value or value == item for item in items)
