"""
Tests for APIManagerLogger and pipeline log output.
"""

import json
import logging

import pytest

from api_manager.async_manager import AsyncAPIManager, AsyncTransport
from api_manager.core.api_manager import APIManager
from api_manager.core.config import APIManagerConfig
from api_manager.core.exceptions import DecodingError, ServerError
from api_manager.core.logging import APIManagerLogger, LoggingConfig
from api_manager.core.models import HTTPResponseEnvelope
from api_manager.utils.sanitizer import MASK


def read_lines(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestAPIManagerLogger:
    def test_unconfigured_logger_left_alone(self):
        """Without a config the host application's setup is used."""
        std_logger = logging.getLogger("api_manager_test.unconfigured")
        handler = logging.NullHandler()
        std_logger.addHandler(handler)

        logger = APIManagerLogger(name="api_manager_test.unconfigured")
        logger.close()

        assert handler in std_logger.handlers
        assert std_logger.propagate is True
        std_logger.removeHandler(handler)

    def test_configured_logger_owns_handlers(self, logging_config_with_file):
        logger = APIManagerLogger(logging_config_with_file, name="api_manager_test.owned")
        std_logger = logging.getLogger("api_manager_test.owned")

        assert std_logger.propagate is False
        assert len(std_logger.handlers) == 1
        assert std_logger.level == logging.DEBUG

        logger.close()
        assert std_logger.handlers == []

    def test_close_idempotent(self, logging_config_with_file):
        logger = APIManagerLogger(logging_config_with_file, name="api_manager_test.idempotent")
        logger.close()
        logger.close()

    def test_context_manager(self, logging_config_with_file):
        with APIManagerLogger(logging_config_with_file, name="api_manager_test.ctx") as logger:
            logger.info("inside")

        assert logging.getLogger("api_manager_test.ctx").handlers == []

    def test_fields_written_and_masked(self, logging_config_with_file):
        with APIManagerLogger(logging_config_with_file, name="api_manager_test.mask") as logger:
            logger.info(
                "Request started",
                method="POST",
                headers={"Authorization": "Bearer abc", "Accept": "*/*"},
                raw_body='{"token": "abc123"}',
            )

        (entry,) = read_lines(logging_config_with_file.file_path)
        assert entry["message"] == "Request started"
        assert entry["method"] == "POST"
        assert entry["headers"] == {"Authorization": MASK, "Accept": "*/*"}
        assert entry["raw_body"] == f'{{"token": "{MASK}"}}'

    def test_level_filtering(self, tmp_path):
        config = LoggingConfig(
            level="WARNING",
            format="json",
            console=False,
            file_path=str(tmp_path / "warn.log"),
        )

        with APIManagerLogger(config, name="api_manager_test.level") as logger:
            logger.debug("hidden")
            logger.info("hidden")
            logger.warning("shown")
            logger.error("shown too")

        messages = [e["message"] for e in read_lines(config.file_path)]
        assert messages == ["shown", "shown too"]

    def test_static_fields(self, tmp_path):
        config = LoggingConfig(
            format="json",
            console=False,
            file_path=str(tmp_path / "extra.log"),
            static_fields={"service": "mobile-api"},
        )

        with APIManagerLogger(config, name="api_manager_test.extra") as logger:
            logger.info("hello")

        (entry,) = read_lines(config.file_path)
        assert entry["service"] == "mobile-api"

    def test_console_output(self, capsys):
        config = LoggingConfig(level="INFO", format="text")

        with APIManagerLogger(config, name="api_manager_test.console") as logger:
            logger.info("Request completed", status_code=200)

        out = capsys.readouterr().out
        assert "[INFO] [api_manager_test.console] Request completed status_code=200" in out


class TestPipelineLogging:
    """Log records produced by APIManager when logging is configured."""

    @pytest.fixture
    def logged_manager(self, make_transport, logging_config_with_file, base_url):
        def _make(response):
            return APIManager(
                config=APIManagerConfig(base_url=base_url, logging=logging_config_with_file),
                transport=make_transport(response),
            )
        return _make

    def test_success_lifecycle(self, logged_manager, logging_config_with_file):
        with logged_manager(HTTPResponseEnvelope(200, b'{"id": 1}')) as api:
            api.request("/users/1?token=abc", "GET", dict)

        entries = read_lines(logging_config_with_file.file_path)
        assert [e["message"] for e in entries] == ["Request started", "Request completed"]

        started, completed = entries
        assert started["logger"] == "api_manager.api.example.com"
        assert started["url"] == f"https://api.example.com/users/1?token={MASK}"
        assert completed["status_code"] == 200
        assert completed["response_size"] == 9
        assert "duration_ms" in completed
        assert started["request_id"] == completed["request_id"]

    def test_request_id_differs_per_call(self, logged_manager, logging_config_with_file):
        with logged_manager(HTTPResponseEnvelope(200, b"{}")) as api:
            api.request("/a", "GET", dict)
            api.request("/b", "GET", dict)

        ids = {e["request_id"] for e in read_lines(logging_config_with_file.file_path)}
        assert len(ids) == 2

    def test_server_error_warning(self, logged_manager, logging_config_with_file):
        with logged_manager(HTTPResponseEnvelope(500, b"")) as api:
            with pytest.raises(ServerError):
                api.request("/x", "GET", dict)

        last = read_lines(logging_config_with_file.file_path)[-1]
        assert last["level"] == "WARNING"
        assert last["message"] == "Server error"
        assert last["status_code"] == 500

    def test_decoding_failure_logs_raw_body(self, logged_manager, logging_config_with_file):
        with logged_manager(HTTPResponseEnvelope(200, b'{"id": "x"}')) as api:
            with pytest.raises(DecodingError):
                api.request("/x", "GET", int)

        last = read_lines(logging_config_with_file.file_path)[-1]
        assert last["level"] == "ERROR"
        assert last["message"] == "Response decoding failed"
        assert last["target_type"] == "int"
        assert last["raw_body"] == '{"id": "x"}'
        assert last["errors"]


class CannedAsyncTransport(AsyncTransport):
    def __init__(self, response):
        self.response = response

    async def execute(self, request):
        return self.response


class TestAsyncPipelineLogging:
    @pytest.mark.asyncio
    async def test_request_id_per_call(self, logging_config_with_file, base_url):
        config = APIManagerConfig(base_url=base_url, logging=logging_config_with_file)
        transport = CannedAsyncTransport(HTTPResponseEnvelope(200, b"{}"))

        async with AsyncAPIManager(config=config, transport=transport) as api:
            await api.request("/a", "GET", dict)
            await api.request("/b", "GET", dict)

        entries = read_lines(logging_config_with_file.file_path)
        assert [e["message"] for e in entries] == ["Request completed", "Request completed"]
        assert all(e["logger"] == "api_manager.async" for e in entries)
        assert len({e["request_id"] for e in entries}) == 2
