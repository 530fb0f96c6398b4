"""
Text layout for dumps.

All labels and separators live in one immutable `DumpFormat` record so a host
can swap the markers without touching the formatting code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol

from ..observability.logging import get_logger

log = get_logger("formatting")


class Sink(Protocol):
    def write(self, s: str, /) -> Any: ...


@dataclass(frozen=True)
class DumpFormat:
    """Labels and separators used by every dump and trace."""
    space: str = " "
    equals: str = "="
    open_call: str = "("
    close_call: str = ")"
    open_list: str = "["
    close_list: str = "]"
    list_separator: str = ", "
    indent: str = "\t"
    newline: str = "\n"
    start_label: str = "--- start"
    end_label: str = "--- end"
    null_label: str = "null"

    def render_value(self, value: Any) -> str:
        if value is None:
            return self.null_label
        return str(value)

    def render_list(self, items: Iterable[str]) -> str:
        return self.open_list + self.list_separator.join(items) + self.close_list


DEFAULT_FORMAT = DumpFormat()


def write_block(sink: Sink | None, lines: Iterable[str], *, fmt: DumpFormat = DEFAULT_FORMAT) -> None:
    """
    Write `lines` between the start/end markers, then a newline.

    Nothing is inserted between lines; line termination is up to the sink.
    """
    if sink is None:
        log.debug("sink_unavailable", op="write_block")
        return

    sink.write(fmt.start_label)
    for line in lines:
        sink.write(line)
    sink.write(fmt.end_label)
    sink.write(fmt.newline)


def write_inline(sink: Sink | None, lines: Iterable[str]) -> None:
    """Write `lines` back to back with no markers and no trailing newline."""
    if sink is None:
        log.debug("sink_unavailable", op="write_inline")
        return

    for line in lines:
        sink.write(line)
