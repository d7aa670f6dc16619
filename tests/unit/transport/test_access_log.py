"""Tests for the access logging transport."""

import logging

import httpx
import pytest

from transport_pipeline.testing import ScriptedTransport
from transport_pipeline.transport.access_log import DEFAULT_LOGGER, LoggingTransport


class TestLoggingTransport:
    """Test LoggingTransport records."""

    @pytest.mark.unit
    async def test_logs_one_record_per_request(self, access_logger, access_records):
        transport = LoggingTransport(ScriptedTransport([200]), logger=access_logger)

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://api.example.com/items")
            await client.post("https://api.example.com/items", json={})

        records = access_records()
        assert len(records) == 2
        assert [r.http_method for r in records] == ["GET", "POST"]

    @pytest.mark.unit
    async def test_record_fields_match_response(self, access_logger, access_records):
        transport = LoggingTransport(ScriptedTransport([404]), logger=access_logger)

        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get("https://api.example.com/items?page=2")

        (record,) = access_records()
        assert record.levelno == logging.INFO
        assert record.http_method == "GET"
        assert record.http_url == "https://api.example.com/items?page=2"
        assert record.http_status_code == response.status_code == 404
        assert record.http_reason_phrase == response.reason_phrase == "Not Found"
        assert record.duration_ms >= 0
        assert record.getMessage().startswith("GET https://api.example.com/items?page=2 404 Not Found, duration: ")

    @pytest.mark.unit
    async def test_response_passes_through_unchanged(self, access_logger):
        original = httpx.Response(201, headers={"X-Request-Id": "abc"}, content=b"created")
        transport = LoggingTransport(ScriptedTransport([original]), logger=access_logger)

        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get("https://api.example.com/items")

        assert response is original
        assert response.headers["X-Request-Id"] == "abc"
        assert response.content == b"created"

    @pytest.mark.unit
    async def test_transport_error_is_logged_and_reraised(self, access_logger, access_records):
        error = httpx.ConnectTimeout("timed out")
        transport = LoggingTransport(ScriptedTransport([error]), logger=access_logger)

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(httpx.ConnectTimeout) as exc_info:
                await client.get("https://api.example.com/items")

        assert exc_info.value is error
        (record,) = access_records()
        assert record.levelno == logging.WARNING
        assert record.http_status_code is None
        assert record.http_reason_phrase is None
        assert record.duration_ms >= 0
        assert "failed (ConnectTimeout)" in record.getMessage()

    @pytest.mark.unit
    async def test_log_start_emits_start_line_first(self, access_logger, caplog):
        transport = LoggingTransport(ScriptedTransport([200]), logger=access_logger, log_start=True)

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://api.example.com/items")

        messages = [r.getMessage() for r in caplog.records if r.name == "tests.access_log"]
        assert len(messages) == 2
        assert messages[0] == "start GET https://api.example.com/items"
        assert messages[1].startswith("GET https://api.example.com/items 200 OK")

    @pytest.mark.unit
    async def test_custom_level(self, access_logger, caplog):
        caplog.set_level(logging.DEBUG, logger="tests.access_log")
        transport = LoggingTransport(ScriptedTransport([200]), logger=access_logger, level=logging.DEBUG)

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://api.example.com/items")

        assert [r.levelno for r in caplog.records if r.name == "tests.access_log"] == [logging.DEBUG]

    @pytest.mark.unit
    async def test_defaults_to_module_logger(self, caplog):
        caplog.set_level(logging.INFO, logger=DEFAULT_LOGGER.name)
        transport = LoggingTransport(ScriptedTransport([200]))

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://api.example.com/items")

        assert transport.logger is DEFAULT_LOGGER
        records = [r for r in caplog.records if r.name == "transport_pipeline.transport.access_log"]
        assert len(records) == 1

    @pytest.mark.unit
    async def test_headers_are_not_logged(self, access_logger, caplog):
        transport = LoggingTransport(ScriptedTransport([200]), logger=access_logger)

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://api.example.com/items", headers={"Authorization": "Bearer s3cret"})

        assert "s3cret" not in caplog.text
