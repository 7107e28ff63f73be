"""
Pytest configuration and fixtures for api-manager tests.
"""

from typing import List, Optional, Tuple

import pytest
import responses as responses_lib

from api_manager.core.api_manager import APIManager
from api_manager.core.config import APIManagerConfig
from api_manager.core.indicator import Indicator
from api_manager.core.logging.config import LoggingConfig
from api_manager.core.models import HTTPRequest, HTTPResponseEnvelope
from api_manager.core.serializer import JSONSerializer
from api_manager.core.transport import Transport


class FakeTransport(Transport):
    """Transport that records requests and returns a canned result."""

    def __init__(self, response=None, error: Optional[Exception] = None):
        self.response = response if response is not None else HTTPResponseEnvelope(200, b"{}")
        self.error = error
        self.requests: List[HTTPRequest] = []
        self.closed = False

    def execute(self, request: HTTPRequest):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


class RecordingIndicator(Indicator):
    """Indicator that records show/hide calls in order."""

    def __init__(self, enabled: bool = True):
        super().__init__(enabled=enabled)
        self.calls: List[Tuple[str, Optional[str]]] = []

    def show(self, message: Optional[str] = None) -> None:
        self.calls.append(("show", message))

    def hide(self) -> None:
        self.calls.append(("hide", None))

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.calls]


class SpySerializer(JSONSerializer):
    """JSONSerializer that counts decode calls."""

    def __init__(self):
        self.decode_calls = 0

    def decode(self, data, target_type):
        self.decode_calls += 1
        return super().decode(data, target_type)


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.example.com"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def make_transport():
    """Factory for FakeTransport."""
    return FakeTransport


@pytest.fixture
def indicator():
    """Enabled recording indicator."""
    return RecordingIndicator()


@pytest.fixture
def spy_serializer():
    return SpySerializer()


@pytest.fixture
def make_manager():
    """
    Factory for APIManager wired to fakes.

    Example:
        def test_x(make_manager, make_transport):
            manager = make_manager(make_transport(), base_url="https://api.example.com")
    """
    created = []

    def _make(transport, indicator=None, serializer=None, **config_kwargs):
        manager = APIManager(
            config=APIManagerConfig(**config_kwargs),
            transport=transport,
            serializer=serializer,
            indicator=indicator,
        )
        created.append(manager)
        return manager

    yield _make

    for manager in created:
        manager.close()


@pytest.fixture
def logging_config_with_file(tmp_path):
    """LoggingConfig writing JSON lines to a temporary file."""
    return LoggingConfig(
        level="DEBUG",
        format="json",
        console=False,
        file_path=str(tmp_path / "api.log"),
    )
