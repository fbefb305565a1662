"""
Process-wide ``prepareStackTrace`` hook.

Installed once during environment setup; the host looks it up whenever an
error's stack text is first read.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Iterable, Optional

from .assemble import StackTraceAssembler
from .errors import HookAlreadyInstalledError
from .log import log_event
from .settings import Settings, load_settings

PrepareStackTrace = Callable[[Any, Iterable[Any]], str]

_lock = threading.Lock()
_installed: Optional[PrepareStackTrace] = None


def install_prepare_stack_trace(
    hook: PrepareStackTrace,
    replace: bool = False,
    log_events: Optional[bool] = None,
) -> PrepareStackTrace:
    global _installed
    with _lock:
        if _installed is not None and _installed != hook and not replace:
            raise HookAlreadyInstalledError("a different prepareStackTrace hook is already installed")
        _installed = hook
    log_event(
        "prepareStackTrace installed",
        enabled=log_events,
        hook=getattr(hook, "__qualname__", repr(hook)),
    )
    return hook


def get_prepare_stack_trace() -> Optional[PrepareStackTrace]:
    return _installed


def uninstall_prepare_stack_trace() -> None:
    global _installed
    with _lock:
        _installed = None


def install_default_hook(settings: Optional[Settings] = None, **collaborators) -> StackTraceAssembler:
    """Build an assembler from settings and install its hook.

    ``collaborators`` are passed through to ``StackTraceAssembler``
    (``mapper``, ``sink``, ``abbreviate``).
    """
    if settings is None:
        settings = load_settings()
    assembler = StackTraceAssembler(settings=settings, **collaborators)
    install_prepare_stack_trace(assembler.prepare_stack_trace, log_events=settings.log_events)
    return assembler
