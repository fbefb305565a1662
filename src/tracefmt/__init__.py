from .assemble import FormattedStack, StackTraceAssembler
from .call_site_evals_v1 import CallSiteEvalsV1
from .describe import format_call_site
from .errors import (
    EvalOriginMissingError,
    HookAlreadyInstalledError,
    RemapProtocolError,
    TraceFormatError,
)
from .filenames import DATA_URL_ABBREV_THRESHOLD, abbreviate_file_name, format_file_name
from .frames import ErrorIdentity, FrameRecord
from .hook import (
    get_prepare_stack_trace,
    install_default_hook,
    install_prepare_stack_trace,
    uninstall_prepare_stack_trace,
)
from .location import format_location
from .remap import (
    CallableSourceMapper,
    MappedPosition,
    NullSourceMapper,
    PositionRemapper,
    SourceMapper,
    StaticSourceMapper,
)
from .settings import Settings, load_settings
from .sinks import CallSiteEvalSink, CallSiteEvalStore

__all__ = [
    "FormattedStack",
    "StackTraceAssembler",
    "CallSiteEvalsV1",
    "format_call_site",
    "EvalOriginMissingError",
    "HookAlreadyInstalledError",
    "RemapProtocolError",
    "TraceFormatError",
    "DATA_URL_ABBREV_THRESHOLD",
    "abbreviate_file_name",
    "format_file_name",
    "ErrorIdentity",
    "FrameRecord",
    "get_prepare_stack_trace",
    "install_default_hook",
    "install_prepare_stack_trace",
    "uninstall_prepare_stack_trace",
    "format_location",
    "CallableSourceMapper",
    "MappedPosition",
    "NullSourceMapper",
    "PositionRemapper",
    "SourceMapper",
    "StaticSourceMapper",
    "Settings",
    "load_settings",
    "CallSiteEvalSink",
    "CallSiteEvalStore",
]
