"""Where resolved frames go once a stack has been formatted."""
from __future__ import annotations

import threading
import weakref
from collections import OrderedDict
from typing import Any, Optional, Protocol

from .frames import FrameRecord

CALL_SITE_EVALS_ATTR = "__call_site_evals__"
DEFAULT_MAX_DETACHED = 1024


class CallSiteEvalSink(Protocol):
    def set_call_site_evals(self, error: Any, frames: list[FrameRecord]) -> None: ...


class CallSiteEvalStore:
    """
    Keeps the call-site evals of each error.

    Frames live as long as their error does:
      - on the error itself as ``__call_site_evals__`` (any exception instance),
      - else in a weak-keyed table (weakrefable objects without a ``__dict__``),
      - else in an identity table capped at ``max_detached`` entries, oldest
        evicted first (dicts and other plain values).
    """

    def __init__(self, max_detached: int = DEFAULT_MAX_DETACHED):
        self.max_detached = max_detached
        self._lock = threading.Lock()
        self._weak: "weakref.WeakKeyDictionary[Any, list[FrameRecord]]" = weakref.WeakKeyDictionary()
        self._strong: "OrderedDict[int, tuple[Any, list[FrameRecord]]]" = OrderedDict()

    def set_call_site_evals(self, error: Any, frames: list[FrameRecord]) -> None:
        frames = list(frames)
        try:
            setattr(error, CALL_SITE_EVALS_ATTR, frames)
            return
        except (AttributeError, TypeError, ValueError):
            pass
        with self._lock:
            try:
                self._weak[error] = frames
                return
            except TypeError:
                pass
            key = id(error)
            self._strong.pop(key, None)
            self._strong[key] = (error, frames)
            while len(self._strong) > self.max_detached:
                self._strong.popitem(last=False)

    def get_call_site_evals(self, error: Any) -> Optional[list[FrameRecord]]:
        found = getattr(error, CALL_SITE_EVALS_ATTR, None)
        if found is not None:
            return found
        with self._lock:
            try:
                found = self._weak.get(error)
            except TypeError:
                found = None
            if found is not None:
                return found
            entry = self._strong.get(id(error))
            if entry is not None and entry[0] is error:
                return entry[1]
            return None

    def clear(self) -> None:
        with self._lock:
            self._weak.clear()
            self._strong.clear()
