from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ReflectionError(Exception):
    """Base error for reflective member access.

    Enumeration loops never raise these; they travel inside an `AccessResult`
    and are discarded member by member. `AccessResult.unwrap()` raises them for
    callers that want the strict behaviour.
    """

    message: str
    member: str | None = None
    owner: str | None = None
    operation: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class MemberAccessError(ReflectionError):
    pass
