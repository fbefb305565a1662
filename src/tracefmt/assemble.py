"""
Stack trace assembly.

``StackTraceAssembler.prepare_stack_trace`` has the shape of V8's
``Error.prepareStackTrace(error, callSites)`` hook: it returns the stack text
and hands the resolved frames to the sink as a side effect. The host calls it
lazily, at most once per error.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from .call_site_evals_v1 import CallSiteEvalsV1
from .describe import format_call_site
from .filenames import Abbreviator, abbreviate_file_name
from .frames import ErrorIdentity, FrameRecord
from .log import log_event
from .remap import NullSourceMapper, PositionRemapper, SourceMapper
from .settings import Settings, load_settings
from .sinks import CallSiteEvalSink, CallSiteEvalStore

FRAME_PREFIX = "\n    at "


@dataclass
class FormattedStack:
    identity: ErrorIdentity
    text: str
    frames: list[FrameRecord] = field(default_factory=list)

    def to_contract(self) -> CallSiteEvalsV1:
        return CallSiteEvalsV1(
            error_name=self.identity.name,
            error_message=self.identity.message,
            stack=self.text,
            frames=self.frames,
        )


class StackTraceAssembler:
    def __init__(
        self,
        mapper: Optional[SourceMapper] = None,
        sink: Optional[CallSiteEvalSink] = None,
        abbreviate: Optional[Abbreviator] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings if settings is not None else load_settings()
        self.mapper = mapper if mapper is not None else NullSourceMapper()
        self.sink = sink if sink is not None else CallSiteEvalStore()
        self.abbreviate = abbreviate or abbreviate_file_name
        self.remapper = PositionRemapper(self.mapper, log_events=self.settings.log_events)

    def _resolve(self, raw: Any) -> FrameRecord:
        frame = FrameRecord.snapshot(raw)
        if self.settings.apply_source_maps:
            self.remapper.remap(frame)
        return frame

    def format(self, error: Any, raw_frames: Iterable[Any]) -> FormattedStack:
        identity = ErrorIdentity.from_error(error)
        raw_frames = list(raw_frames)
        if self.settings.max_frames:
            raw_frames = raw_frames[: self.settings.max_frames]

        stack = identity.header
        frames: list[FrameRecord] = []
        for raw in raw_frames:
            frame = self._resolve(raw)
            frames.append(frame)
            stack += FRAME_PREFIX + format_call_site(frame, self.abbreviate)

        # Only a fully rendered trace is persisted
        self.sink.set_call_site_evals(error, frames)
        log_event(
            "stack formatted",
            enabled=self.settings.log_events,
            error_name=identity.name,
            frame_count=len(frames),
        )
        return FormattedStack(identity=identity, text=stack, frames=frames)

    def prepare_stack_trace(self, error: Any, raw_frames: Iterable[Any]) -> str:
        return self.format(error, raw_frames).text
