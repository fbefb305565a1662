"""
Frame snapshots and error identity.

A ``FrameRecord`` is taken fresh for every formatting pass from whatever the
host hands over: a V8 CallSite-shaped object, a mapping (camelCase or
snake_case keys), or another ``FrameRecord``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# CallSite getter -> field name
_CALL_SITE_GETTERS = {
    "getThis": "receiver",
    "getTypeName": "type_name",
    "getFunction": "function",
    "getFunctionName": "function_name",
    "getMethodName": "method_name",
    "getFileName": "file_name",
    "getLineNumber": "line_number",
    "getColumnNumber": "column_number",
    "getEvalOrigin": "eval_origin",
    "isToplevel": "is_toplevel",
    "isEval": "is_eval",
    "isNative": "is_native",
    "isConstructor": "is_constructor",
    "isAsync": "is_async",
    "isPromiseAll": "is_promise_all",
    "getPromiseIndex": "promise_index",
}

_NAME_ATTR_ERRORS = (NameError, AttributeError, ImportError)


class FrameRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    # Live engine handles: carried along, never inspected or serialized
    receiver: Any = Field(default=None, exclude=True, repr=False)
    function: Any = Field(default=None, exclude=True, repr=False)

    type_name: Optional[str] = None
    function_name: Optional[str] = None
    method_name: Optional[str] = None
    file_name: Optional[str] = None
    line_number: Optional[int] = Field(default=None, ge=0)
    column_number: Optional[int] = Field(default=None, ge=0)
    eval_origin: Optional[str] = None

    is_toplevel: bool = False
    is_eval: bool = False
    is_native: bool = False
    is_constructor: bool = False
    is_async: bool = False
    is_promise_all: bool = False
    promise_index: Optional[int] = None

    @model_validator(mode="after")
    def column_needs_line(self) -> "FrameRecord":
        if self.column_number is not None and self.line_number is None:
            raise ValueError("frame has a column number but no line number")
        return self

    @property
    def has_position(self) -> bool:
        return (
            self.file_name is not None
            and self.line_number is not None
            and self.column_number is not None
        )

    @classmethod
    def snapshot(cls, raw: Any) -> "FrameRecord":
        """Build a new record from a raw engine frame."""
        if isinstance(raw, FrameRecord):
            return raw.model_copy()
        if isinstance(raw, Mapping):
            data = dict(raw)
            if "this" in data:
                data["receiver"] = data.pop("this")
            return cls.model_validate(data)
        if callable(getattr(raw, "getFileName", None)):
            data = {}
            for getter, field in _CALL_SITE_GETTERS.items():
                fn = getattr(raw, getter, None)
                if callable(fn):
                    data[field] = fn()
            return cls.model_validate(data)
        raise TypeError(f"cannot snapshot frame of type {type(raw).__name__}")


class ErrorIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Error"
    message: str = ""

    @classmethod
    def from_error(cls, error: Any) -> "ErrorIdentity":
        if isinstance(error, ErrorIdentity):
            return error
        if isinstance(error, Mapping):
            name, message = error.get("name"), error.get("message")
        elif isinstance(error, BaseException):
            # NameError and friends use ``name`` for the missing identifier
            name = None if isinstance(error, _NAME_ATTR_ERRORS) else getattr(error, "name", None)
            message = getattr(error, "message", None)
            if name is None:
                name = type(error).__name__
            if message is None:
                message = str(error)
        else:
            name, message = getattr(error, "name", None), getattr(error, "message", None)
        return cls(
            name="Error" if name is None else str(name),
            message="" if message is None else str(message),
        )

    @property
    def header(self) -> str:
        if self.name and self.message:
            return f"{self.name}: {self.message}"
        return self.name or self.message
