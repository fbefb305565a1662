"""
Inline-data filename abbreviation.

DATA_URL_ABBREV_THRESHOLD is a shared protocol constant: the native frame
formatter and the mapping-result filename decoder abbreviate at the same
length, so traces rendered on either side stay identical.
"""
from __future__ import annotations

from typing import Callable
from urllib.parse import unquote

DATA_URL_PREFIX = "data:"
DATA_URL_ABBREV_THRESHOLD = 150

# Payload chars kept on each side of the "......" marker
_ABBREV_KEEP = 20

Abbreviator = Callable[[str], str]


def abbreviate_file_name(file_name: str) -> str:
    """Shorten a data: URL to ``data:<head>,<first 20>......<last 20>``.

    Anything that is not a data: URL with a long enough payload is returned
    percent-decoded instead.
    """
    if file_name.startswith(DATA_URL_PREFIX) and "," in file_name:
        head, payload = file_name[len(DATA_URL_PREFIX):].split(",", 1)
        if len(payload) >= 2 * _ABBREV_KEEP:
            return (
                f"{DATA_URL_PREFIX}{head},"
                f"{payload[:_ABBREV_KEEP]}......{payload[-_ABBREV_KEEP:]}"
            )
    try:
        return unquote(file_name, errors="strict")
    except UnicodeDecodeError:
        return file_name


def format_file_name(file_name: str, abbreviate: Abbreviator = abbreviate_file_name) -> str:
    if file_name.startswith(DATA_URL_PREFIX) and len(file_name) > DATA_URL_ABBREV_THRESHOLD:
        return abbreviate(file_name)
    return file_name
