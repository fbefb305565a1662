from __future__ import annotations

from .errors import EvalOriginMissingError
from .filenames import Abbreviator, abbreviate_file_name, format_file_name
from .frames import FrameRecord

ANONYMOUS = "<anonymous>"


def format_location(frame: FrameRecord, abbreviate: Abbreviator = abbreviate_file_name) -> str:
    """Render ``file:line:col`` for a frame, or ``native``."""
    if frame.is_native:
        return "native"
    if frame.file_name:
        result = format_file_name(frame.file_name, abbreviate)
    else:
        result = ""
        if frame.is_eval:
            if frame.eval_origin is None:
                raise EvalOriginMissingError("eval frame has no eval origin")
            result += f"{frame.eval_origin}, "
        result += ANONYMOUS
    if frame.line_number is not None:
        result += f":{frame.line_number}"
        if frame.column_number is not None:
            result += f":{frame.column_number}"
    return result
