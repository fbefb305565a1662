"""
Compiled-position -> original-position remapping.

The mapping service speaks a two-step protocol. ``apply_source_map`` writes the
remapped line/column into a caller-owned two-slot buffer and returns:

    0  no mapping, frame untouched
    1  buffer holds the new line/column, filename unchanged
    2  as 1, and ``apply_source_map_filename()`` holds the new filename

The filename is only fetched on 2, so the common case never moves a string.
"""
from __future__ import annotations

import threading
from array import array
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .errors import RemapProtocolError
from .frames import FrameRecord
from .log import log_event

NO_MAPPING = 0
POSITION_MAPPED = 1
FILE_NAME_MAPPED = 2

FILE_URL_PREFIX = "file://"
_ROOT_RELATIVE_MARKERS = ("/", "\\", ".")


class SourceMapper(Protocol):
    def apply_source_map(self, file_name: str, line: int, column: int, out: array) -> int: ...

    def apply_source_map_filename(self) -> str: ...


@dataclass(frozen=True)
class MappedPosition:
    line: int
    column: int
    file_name: Optional[str] = None


class NullSourceMapper:
    def apply_source_map(self, file_name: str, line: int, column: int, out: array) -> int:
        return NO_MAPPING

    def apply_source_map_filename(self) -> str:
        raise RemapProtocolError("no filename pending: no mapping was ever returned")


class CallableSourceMapper:
    """Adapt a single-call lookup returning ``MappedPosition | None``."""

    def __init__(self, lookup: Callable[[str, int, int], Optional[MappedPosition]]):
        self._lookup = lookup
        self._pending = threading.local()

    def apply_source_map(self, file_name: str, line: int, column: int, out: array) -> int:
        mapped = self._lookup(file_name, line, column)
        if mapped is None:
            return NO_MAPPING
        out[0] = mapped.line
        out[1] = mapped.column
        if mapped.file_name is None or mapped.file_name == file_name:
            return POSITION_MAPPED
        self._pending.file_name = mapped.file_name
        return FILE_NAME_MAPPED

    def apply_source_map_filename(self) -> str:
        file_name = getattr(self._pending, "file_name", None)
        if file_name is None:
            raise RemapProtocolError("no filename pending: last query did not return 2")
        self._pending.file_name = None
        return file_name


class StaticSourceMapper(CallableSourceMapper):
    """Mapping table keyed by ``(file_name, line, column)``."""

    def __init__(self, table: Optional[dict[tuple[str, int, int], MappedPosition]] = None):
        self.table: dict[tuple[str, int, int], MappedPosition] = dict(table or {})
        super().__init__(lambda file_name, line, column: self.table.get((file_name, line, column)))

    def add(self, file_name: str, line: int, column: int, mapped: MappedPosition) -> None:
        self.table[(file_name, line, column)] = mapped


def with_file_url(file_name: Optional[str]) -> Optional[str]:
    """Give bare paths a file:// prefix so every filename is URL-shaped."""
    if file_name and file_name.startswith(_ROOT_RELATIVE_MARKERS):
        return FILE_URL_PREFIX + file_name
    return file_name


class PositionRemapper:
    def __init__(self, mapper: SourceMapper, log_events: Optional[bool] = None):
        self.mapper = mapper
        self.log_events = log_events
        self._local = threading.local()

    @property
    def _buffer(self) -> array:
        # one scratch buffer per thread, allocated on first use
        buf = getattr(self._local, "buf", None)
        if buf is None:
            buf = self._local.buf = array("I", [0, 0])
        return buf

    def remap(self, frame: FrameRecord) -> int:
        """Update ``frame`` in place; return the mapper's result code."""
        code = NO_MAPPING
        if frame.has_position:
            buf = self._buffer
            code = self.mapper.apply_source_map(
                frame.file_name, frame.line_number, frame.column_number, buf
            )
            if code not in (NO_MAPPING, POSITION_MAPPED, FILE_NAME_MAPPED):
                raise RemapProtocolError(f"unexpected source map result code: {code!r}")
            if code >= POSITION_MAPPED:
                frame.line_number = buf[0]
                frame.column_number = buf[1]
            if code >= FILE_NAME_MAPPED:
                frame.file_name = self.mapper.apply_source_map_filename()
            if code:
                log_event(
                    "frame remapped",
                    enabled=self.log_events,
                    code=code,
                    file_name=frame.file_name,
                    line=frame.line_number,
                    column=frame.column_number,
                )
        frame.file_name = with_file_url(frame.file_name)
        return code
