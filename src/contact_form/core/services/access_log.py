"""Append-only access log, one line per request."""

from datetime import UTC, datetime
from pathlib import Path

from loguru import logger
from starlette.concurrency import run_in_threadpool

from src.contact_form.core.errors import AccessLogError


def format_access_line(method: str, target: str, when: datetime | None = None) -> str:
    """Format ``<ISO-8601 timestamp> - <METHOD> <target>`` with a trailing newline."""
    timestamp = (when or datetime.now(UTC)).isoformat(timespec="milliseconds")
    return f"{timestamp} - {method} {target}\n"


class AccessLogWriter:
    """Appends request lines to a file without ever failing the request."""

    def __init__(self, path: str | Path, enabled: bool = True) -> None:
        self._path = Path(path)
        self._enabled = enabled

    @property
    def path(self) -> Path:
        return self._path

    def append(self, line: str) -> None:
        """Append a line, raising ``AccessLogError`` on any I/O failure."""
        try:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise AccessLogError(f"Cannot append to {self._path}") from e

    async def record(self, method: str, target: str) -> None:
        """Record one request. Failures are logged and suppressed."""
        if not self._enabled:
            return
        try:
            await run_in_threadpool(self.append, format_access_line(method, target))
        except AccessLogError as e:
            logger.opt(exception=e).error("Failed to write access log entry")
