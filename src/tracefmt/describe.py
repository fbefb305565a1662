"""
One ``at ...`` line per frame, following V8's CallSite grammar:

    async Promise.all (index 2)
    Foo.bar [as baz] (file:///a.ts:1:2)
    new Widget (file:///a.ts:3:4)
    run (file:///a.ts:5:6)
    file:///a.ts:7:8
"""
from __future__ import annotations

from .filenames import Abbreviator, abbreviate_file_name
from .frames import FrameRecord
from .location import ANONYMOUS, format_location


def _method_call(frame: FrameRecord) -> str:
    result = ""
    if frame.function_name:
        if frame.type_name and not frame.function_name.startswith(frame.type_name):
            result += f"{frame.type_name}."
        result += frame.function_name
        if frame.method_name and not frame.function_name.endswith(frame.method_name):
            result += f" [as {frame.method_name}]"
        return result
    if frame.type_name:
        result += f"{frame.type_name}."
    return result + (frame.method_name or ANONYMOUS)


def format_call_site(frame: FrameRecord, abbreviate: Abbreviator = abbreviate_file_name) -> str:
    result = "async " if frame.is_async else ""
    if frame.is_promise_all:
        return result + f"Promise.all (index {frame.promise_index})"

    is_method_call = not (frame.is_toplevel or frame.is_constructor)
    if is_method_call:
        result += _method_call(frame)
    elif frame.is_constructor:
        result += f"new {frame.function_name or ANONYMOUS}"
    elif frame.function_name:
        result += frame.function_name
    else:
        return result + format_location(frame, abbreviate)

    return result + f" ({format_location(frame, abbreviate)})"
