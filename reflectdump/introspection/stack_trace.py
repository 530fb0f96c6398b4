"""
Stack trace rendering.

Frames are opaque text; consecutive frames that share their first two dotted
qualifiers stay at one indentation level, and the level flips whenever that
prefix changes. The result is an alternating banding of caller groups rather
than a nesting depth.
"""

from __future__ import annotations

import inspect
import os
import traceback
from types import FrameType, TracebackType
from typing import Any, Iterable

from .formatting import DEFAULT_FORMAT, DumpFormat, Sink, write_block

_DOT = "."


def grouping_key(text: str) -> str:
    """Prefix up to the second dot (`a.b` of `a.b.C.m`), else up to the first, else the whole text."""
    first = text.find(_DOT)
    if first == -1:
        return text
    second = text.find(_DOT, first + 1)
    if second == -1:
        return text[:first]
    return text[:second]


def format_stack_trace(frames: Iterable[Any], *, fmt: DumpFormat = DEFAULT_FORMAT) -> list[str]:
    """Render `frames` (any objects, via `str()`) as banded, indented lines."""
    lines: list[str] = []
    last: str | None = None
    last_was_tabbed = False

    for frame in frames:
        current = str(frame)
        if last is None:
            lines.append(current)
            last = current
            continue

        if grouping_key(current) == grouping_key(last):
            lines.append(fmt.indent + current if last_was_tabbed else current)
        elif last_was_tabbed:
            lines.append(current)
            last_was_tabbed = False
        else:
            lines.append(fmt.indent + current)
            last_was_tabbed = True

        last = current

    return lines


def write_stack_trace(frames: Iterable[Any], sink: Sink | None, *, fmt: DumpFormat = DEFAULT_FORMAT) -> None:
    if sink is None:
        return
    write_block(sink, format_stack_trace(frames, fmt=fmt), fmt=fmt)


def describe_frame(frame: FrameType, lineno: int | None = None) -> str:
    """`module.Qualname.function(file.py:line)` for a live frame."""
    code = frame.f_code
    module = frame.f_globals.get("__name__", "?")
    line = frame.f_lineno if lineno is None else lineno
    return f"{module}.{code.co_qualname}({os.path.basename(code.co_filename)}:{line})"


def capture_stack(skip: int = 0, limit: int | None = None) -> list[str]:
    """
    Describe the caller's stack, innermost frame first.

    Args:
        skip: Extra frames to drop above the caller
        limit: Maximum number of frames returned
    """
    frame = inspect.currentframe()
    try:
        # Drop capture_stack itself plus whatever the caller asked for.
        for _ in range(skip + 1):
            if frame is None:
                break
            frame = frame.f_back

        out: list[str] = []
        while frame is not None and (limit is None or len(out) < limit):
            out.append(describe_frame(frame))
            frame = frame.f_back
        return out
    finally:
        del frame


def frames_from_traceback(tb: TracebackType | None) -> list[str]:
    """Describe an exception traceback, innermost frame first like `capture_stack`."""
    out = [describe_frame(frame, lineno) for frame, lineno in traceback.walk_tb(tb)]
    out.reverse()
    return out
