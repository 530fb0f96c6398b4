from __future__ import annotations

import io

from reflectdump.introspection.formatting import DumpFormat
from reflectdump.introspection.stack_trace import (
    capture_stack,
    format_stack_trace,
    frames_from_traceback,
    grouping_key,
    write_stack_trace,
)


def test_grouping_key():
    assert grouping_key("a.b.Foo.m1") == "a.b"
    assert grouping_key("a.b") == "a"
    assert grouping_key("main") == "main"


def test_indentation_flips_when_group_changes():
    frames = ["a.b.Foo.m1", "a.b.Foo.m2", "c.d.Bar.m3", "a.b.Foo.m4"]
    assert format_stack_trace(frames) == [
        "a.b.Foo.m1",
        "a.b.Foo.m2",
        "\tc.d.Bar.m3",
        "a.b.Foo.m4",
    ]


def test_same_group_keeps_current_indentation():
    frames = ["a.b.X.m", "c.d.Y.m", "c.d.Y.n", "e.f.Z.m", "e.f.Z.n"]
    assert format_stack_trace(frames) == [
        "a.b.X.m",
        "\tc.d.Y.m",
        "\tc.d.Y.n",
        "e.f.Z.m",
        "e.f.Z.n",
    ]


def test_frames_without_dots_are_grouped_by_full_text():
    assert format_stack_trace(["main", "main", "other"]) == ["main", "main", "\tother"]


def test_any_object_is_rendered_with_str():
    class Frame:
        def __init__(self, text):
            self.text = text

        def __str__(self):
            return self.text

    assert format_stack_trace([Frame("a.b.c"), Frame("x.y.z")]) == ["a.b.c", "\tx.y.z"]


def test_empty_stack():
    assert format_stack_trace([]) == []


def test_state_does_not_leak_between_calls():
    frames = ["a.b.Foo.m1", "c.d.Bar.m2"]
    assert format_stack_trace(frames) == format_stack_trace(frames) == ["a.b.Foo.m1", "\tc.d.Bar.m2"]


def test_write_stack_trace_wraps_block():
    sink = io.StringIO()
    write_stack_trace(["a.b.Foo.m1", "c.d.Bar.m2"], sink)
    assert sink.getvalue() == "--- starta.b.Foo.m1\tc.d.Bar.m2--- end\n"


def test_write_stack_trace_uses_custom_format():
    sink = io.StringIO()
    fmt = DumpFormat(start_label="<", end_label=">", indent="  ")
    write_stack_trace(["a.b.c", "x.y.z"], sink, fmt=fmt)
    assert sink.getvalue() == "<a.b.c  x.y.z>\n"


def test_write_stack_trace_without_sink_is_noop():
    write_stack_trace(["a.b.c"], None)


def test_capture_stack_starts_with_caller():
    frames = capture_stack()
    assert frames[0].startswith(f"{__name__}.test_capture_stack_starts_with_caller(test_stack_trace.py:")
    assert len(capture_stack(limit=1)) == 1
    assert capture_stack(skip=1)[0] == frames[1]


def _explode():
    raise ValueError("boom")


def test_frames_from_traceback_innermost_first():
    try:
        _explode()
    except ValueError as e:
        frames = frames_from_traceback(e.__traceback__)

    assert len(frames) == 2
    assert frames[0].startswith(f"{__name__}._explode(test_stack_trace.py:")
    assert frames[1].startswith(f"{__name__}.test_frames_from_traceback_innermost_first(")
