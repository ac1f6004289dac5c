"""Unit tests for the append-only access log."""

from datetime import UTC, datetime

import pytest

from src.contact_form.core.errors import AccessLogError
from src.contact_form.core.services import AccessLogWriter
from src.contact_form.core.services.access_log import format_access_line


class TestFormatAccessLine:
    def test_line_format(self):
        when = datetime(2024, 5, 17, 12, 30, 45, 123000, tzinfo=UTC)

        line = format_access_line("GET", "/contacts", when)

        assert line == "2024-05-17T12:30:45.123+00:00 - GET /contacts\n"

    def test_default_timestamp_is_iso_8601(self):
        line = format_access_line("POST", "/")
        timestamp, rest = line.split(" - ", 1)

        assert datetime.fromisoformat(timestamp).tzinfo is not None
        assert rest == "POST /\n"


class TestAccessLogWriter:
    @pytest.mark.asyncio
    async def test_record_appends_lines(self, tmp_path):
        path = tmp_path / "access.log"
        writer = AccessLogWriter(path)

        await writer.record("GET", "/")
        await writer.record("POST", "/")

        lines = path.read_text().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith(" - GET /")
        assert lines[1].endswith(" - POST /")

    @pytest.mark.asyncio
    async def test_existing_content_is_preserved(self, tmp_path):
        path = tmp_path / "access.log"
        path.write_text("earlier line\n")

        await AccessLogWriter(path).record("GET", "/contacts")

        assert path.read_text().startswith("earlier line\n")

    def test_append_failure_raises_access_log_error(self, tmp_path):
        writer = AccessLogWriter(tmp_path)  # a directory cannot be opened for append

        with pytest.raises(AccessLogError):
            writer.append("line\n")

    @pytest.mark.asyncio
    async def test_record_failure_is_suppressed(self, tmp_path):
        writer = AccessLogWriter(tmp_path / "missing-dir" / "access.log")

        await writer.record("GET", "/")

        assert not (tmp_path / "missing-dir").exists()

    @pytest.mark.asyncio
    async def test_disabled_writer_does_nothing(self, tmp_path):
        path = tmp_path / "access.log"

        await AccessLogWriter(path, enabled=False).record("GET", "/")

        assert not path.exists()
