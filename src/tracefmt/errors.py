from __future__ import annotations


class TraceFormatError(Exception):
    """Base class for errors raised while formatting a stack trace."""


class EvalOriginMissingError(TraceFormatError, AssertionError):
    """An eval frame arrived without an eval origin."""


class RemapProtocolError(TraceFormatError):
    """The source mapper returned a result code outside 0, 1, 2."""


class HookAlreadyInstalledError(TraceFormatError):
    pass
