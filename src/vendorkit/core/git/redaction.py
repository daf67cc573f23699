"""Credential redaction for git URIs, argv and git output.

Dependencies are often added from URIs with embedded tokens
(``https://token@host/repo.git``); those must not reach logs, error
messages or ``repr`` output.
"""
from __future__ import annotations

import re
from typing import Sequence
from urllib.parse import urlsplit, urlunsplit

REDACTED = "<redacted>"

# "git" is the conventional public user of scp-like SSH URIs.
_PUBLIC_SSH_USER = "git"

_USERINFO_RE = re.compile(r"(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*://)[^\s/@]+@")
_SCP_RE = re.compile(r"(?P<user>[^\s@/]+)@(?P<host>[^\s:/]+):")


def _redact_scp(match: re.Match) -> str:
    if match.group("user") == _PUBLIC_SSH_USER:
        return match.group(0)
    return f"{REDACTED}@{match.group('host')}:"


def redact_url_credentials(url: str) -> str:
    """Drop userinfo from ``scheme://`` URLs and mask the user of scp-like URIs."""
    raw = str(url)
    if "://" in raw:
        parts = urlsplit(raw)
        if "@" not in parts.netloc:
            return raw
        return urlunsplit(parts._replace(netloc=parts.netloc.rpartition("@")[2]))
    return _SCP_RE.sub(_redact_scp, raw, count=1) if _SCP_RE.match(raw) else raw


def redact_text_credentials(text: str) -> str:
    """Mask every credential-bearing URI fragment found in ``text``."""
    masked = _USERINFO_RE.sub(rf"\g<scheme>{REDACTED}@", str(text))
    return _SCP_RE.sub(_redact_scp, masked)


def redact_git_args(args: Sequence[str]) -> list[str]:
    return [redact_url_credentials(a) for a in args]


__all__ = [
    "redact_url_credentials",
    "redact_text_credentials",
    "redact_git_args",
]
