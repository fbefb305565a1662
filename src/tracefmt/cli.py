"""
Format a stack trace from a JSON dump of V8 call sites.

    python -m tracefmt trace.json
    cat trace.json | python -m tracefmt - --json

Input shape::

    {
      "error": {"name": "TypeError", "message": "boom"},
      "frames": [{"functionName": "run", "fileName": "file:///x.js", ...}],
      "mappings": [{"file_name": "file:///x.js", "line": 1, "column": 2,
                    "to_line": 10, "to_column": 4, "to_file_name": "/src/x.ts"}]
    }
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .assemble import StackTraceAssembler
from .remap import MappedPosition, StaticSourceMapper
from .settings import load_settings


class MappingEntry(BaseModel):
    file_name: str
    line: int = Field(ge=0)
    column: int = Field(ge=0)
    to_line: int = Field(ge=0)
    to_column: int = Field(ge=0)
    to_file_name: Optional[str] = None


class TraceDump(BaseModel):
    error: dict[str, Any] = Field(default_factory=dict)
    frames: list[dict[str, Any]] = Field(default_factory=list)
    mappings: list[MappingEntry] = Field(default_factory=list)


def build_mapper(mappings: list[MappingEntry]) -> StaticSourceMapper:
    mapper = StaticSourceMapper()
    for m in mappings:
        mapper.add(m.file_name, m.line, m.column, MappedPosition(m.to_line, m.to_column, m.to_file_name))
    return mapper


def _read(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tracefmt",
        description="Format a stack trace from a JSON dump of V8 call sites.",
    )
    parser.add_argument("input", help="JSON trace dump, or - for stdin")
    parser.add_argument("--json", action="store_true", help="print call-site evals as JSON")
    parser.add_argument("--no-source-maps", action="store_true", help="skip position remapping")
    args = parser.parse_args(argv)

    load_dotenv(dotenv_path=Path.cwd() / ".env")
    settings = load_settings()
    if args.no_source_maps:
        settings = settings.model_copy(update={"apply_source_maps": False})

    dump = TraceDump.model_validate(json.loads(_read(args.input)))
    assembler = StackTraceAssembler(mapper=build_mapper(dump.mappings), settings=settings)
    formatted = assembler.format(dump.error, dump.frames)

    if args.json:
        print(formatted.to_contract().to_json())
    else:
        print(formatted.text)
    return 0
