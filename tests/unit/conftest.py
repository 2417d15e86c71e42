import pytest

from circular_api import configure as conf
from circular_api.baseservice import GatewayClient
from tests.unit.test_util import FakeGateway, NAG_URL


@pytest.fixture
def gateway_config():
    return conf.GatewayConfig(nag_url=NAG_URL)


@pytest.fixture
def gateway_client(gateway_config):
    return GatewayClient(gateway_config)


@pytest.fixture
def fake_gateway(gateway_client, monkeypatch):
    fake = FakeGateway(gateway_client)
    monkeypatch.setattr(gateway_client, "call_async", fake.call_async)
    monkeypatch.setattr(gateway_client, "send_async", fake.send_async)
    return fake
