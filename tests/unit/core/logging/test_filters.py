"""
Tests for request_scope and RequestContextFilter.
"""

import asyncio
import logging
import threading

import pytest

from api_manager.core.logging.filters import (
    RequestContextFilter,
    current_request_id,
    request_scope,
)


def make_record(**extra):
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRequestScope:
    def test_fresh_id_per_scope(self):
        assert current_request_id() is None

        with request_scope() as first:
            assert current_request_id() == first
        with request_scope() as second:
            assert current_request_id() == second

        assert first != second
        assert len(first) == 32
        assert current_request_id() is None

    def test_explicit_id(self):
        with request_scope("req-1") as request_id:
            assert request_id == "req-1"

    def test_nested_scope_restores_outer(self):
        with request_scope("outer"):
            with request_scope("inner"):
                assert current_request_id() == "inner"
            assert current_request_id() == "outer"

    def test_reset_after_exception(self):
        with pytest.raises(RuntimeError):
            with request_scope("req-2"):
                raise RuntimeError("boom")

        assert current_request_id() is None

    def test_not_visible_in_other_thread(self):
        seen = []

        with request_scope("main"):
            thread = threading.Thread(target=lambda: seen.append(current_request_id()))
            thread.start()
            thread.join()

        assert seen == [None]

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self):
        async def call(request_id):
            with request_scope(request_id):
                await asyncio.sleep(0)
                return current_request_id()

        results = await asyncio.gather(call("a"), call("b"), call("c"))

        assert results == ["a", "b", "c"]


class TestRequestContextFilter:
    def test_stamps_request_id(self):
        record = make_record()

        with request_scope("req-3"):
            assert RequestContextFilter().filter(record) is True

        assert record.request_id == "req-3"

    def test_outside_scope(self):
        record = make_record()
        RequestContextFilter().filter(record)
        assert not hasattr(record, "request_id")

    def test_explicit_values_win(self):
        record = make_record(request_id="explicit", service="explicit")

        with request_scope("req-4"):
            RequestContextFilter({"service": "static"}).filter(record)

        assert record.request_id == "explicit"
        assert record.service == "explicit"

    def test_static_fields(self):
        record = make_record()
        RequestContextFilter({"service": "mobile-api", "env": "prod"}).filter(record)

        assert record.service == "mobile-api"
        assert record.env == "prod"
