"""Output helpers shared by CLI commands.

Results go to stdout as text or JSON; errors go to stderr in the same mode.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from vendorkit.core.exceptions import VendorkitError


class OutputFormatter:
    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def _dump(self, data: Any, *, stream=None) -> None:
        print(json.dumps(data, indent=self.indent, default=str), file=stream or sys.stdout)

    def success(self, data: Dict[str, Any], message: str) -> None:
        """Print ``message``, or ``data`` tagged ``status: success`` in JSON mode."""
        if self.json_mode:
            self._dump({"status": "success", **data})
        else:
            print(message)

    def error(self, error: Exception, message: Optional[str] = None, *, error_code: str = "error") -> None:
        """Report ``error`` on stderr.

        In JSON mode vendorkit errors also contribute their class name and
        context.
        """
        msg = message or str(error)
        if not self.json_mode:
            print(f"Error: {msg}", file=sys.stderr)
            return
        payload: Dict[str, Any] = {"error": error_code, "message": msg}
        if isinstance(error, VendorkitError):
            details = error.to_json_error()
            payload["code"] = details["code"]
            payload["context"] = details["context"]
        self._dump(payload, stream=sys.stderr)

    def json_output(self, data: Any) -> None:
        self._dump(data)

    def text(self, message: str) -> None:
        print(message)


__all__ = ["OutputFormatter"]
