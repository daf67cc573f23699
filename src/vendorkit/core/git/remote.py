"""Parsing of ``git remote -v`` output."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# "<name>\t<uri> (fetch)"
_REMOTE_RECORD_RE = re.compile(r"^(?P<name>\S+)\s+(?P<uri>\S+) \((?P<direction>fetch|push)\)$")


@dataclass(frozen=True, slots=True)
class RemoteRecord:
    """One line of ``git remote -v``."""

    name: str
    uri: str
    direction: str


def parse_remote_records(output: str) -> list[RemoteRecord]:
    """Return every well-formed record in ``output``, in order."""
    records: list[RemoteRecord] = []
    for raw in output.splitlines():
        m = _REMOTE_RECORD_RE.match(raw.strip())
        if m:
            records.append(RemoteRecord(m.group("name"), m.group("uri"), m.group("direction")))
    return records


def select_fetch_uri(records: list[RemoteRecord], preferred: Optional[str] = None) -> Optional[str]:
    """Pick the fetch URI to vendor from.

    The fetch record named ``preferred`` wins; otherwise the first fetch
    record in git's listing order is used.
    """
    fetch = [r for r in records if r.direction == "fetch"]
    if preferred:
        for record in fetch:
            if record.name == preferred:
                return record.uri
    return fetch[0].uri if fetch else None


__all__ = ["RemoteRecord", "parse_remote_records", "select_fetch_uri"]
