"""
JSON output envelope for CLI commands.

Every --json response has the same shape so callers (editors, scripts)
can parse it without knowing the command:

    {"meta": {"command": ..., "status": "success"|"error", "version": ...},
     "data": {...}}                      # on success
     "error": {"type": ..., "message": ...}  # on error
"""

import contextlib
import io
import json
import logging
from typing import Any, Dict, Iterator, Optional

import click
from pydantic import BaseModel

from .. import __version__
from ..core.exceptions import JsonTreeError

logger = logging.getLogger(__name__)


class JsonRenderer:
    """Builds and prints the JSON envelope for one command."""

    def __init__(self, command: str, indent: Optional[int] = 2):
        self.command = command
        self.indent = indent

    def _meta(self, status: str) -> Dict[str, Any]:
        return {"command": self.command, "status": status, "version": __version__}

    @contextlib.contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        """
        Swallow stray stdout while the command runs so the envelope is the
        only thing on stdout.
        """
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            yield buffer
        if buffer.getvalue():
            logger.debug(f"Suppressed output from {self.command}: {buffer.getvalue()!r}")

    def render_success(self, data: BaseModel | Dict[str, Any]) -> None:
        payload = data.model_dump(mode="json") if isinstance(data, BaseModel) else data
        click.echo(json.dumps({"meta": self._meta("success"), "data": payload}, indent=self.indent))

    def render_error(self, error: Exception) -> None:
        message = error.message if isinstance(error, JsonTreeError) else str(error)
        details: Dict[str, Any] = {"type": type(error).__name__, "message": message}
        for attr in ("line", "column", "position", "query", "node_id"):
            value = getattr(error, attr, None)
            if value is not None:
                details[attr] = value
        click.echo(json.dumps({"meta": self._meta("error"), "error": details}, indent=self.indent))
