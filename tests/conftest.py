import pytest

from smsbroadcast import config, transports
from smsbroadcast.client import GatewayClient
from smsbroadcast.transports.locmem import Transport


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Each test starts with an empty settings registry and outbox."""
    config.clear()
    transports.outbox = []
    monkeypatch.delenv('SMSBROADCAST_USERNAME', raising=False)
    monkeypatch.delenv('SMSBROADCAST_PASSWORD', raising=False)
    yield
    config.clear()


@pytest.fixture
def locmem_transport() -> Transport:
    return Transport()


@pytest.fixture
def client(locmem_transport: Transport) -> GatewayClient:
    return GatewayClient('user', 'secret', transport=locmem_transport)


class FailingTransport:
    """Transport that must never be reached."""

    def __init__(self):
        self.calls = 0

    def post_form(self, url, body):
        self.calls += 1
        raise AssertionError('transport should not have been called')


@pytest.fixture
def failing_transport() -> FailingTransport:
    return FailingTransport()
