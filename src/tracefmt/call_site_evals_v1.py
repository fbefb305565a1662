"""Exported call-site evals for one error (v1)."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .frames import FrameRecord


class CallSiteEvalsV1(BaseModel):
    schema_version: Literal["call_site_evals.v1"] = "call_site_evals.v1"
    error_name: str = "Error"
    error_message: str = ""
    stack: str = ""
    frames: list[FrameRecord] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
