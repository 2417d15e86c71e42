"""Test wallet nonce resolution"""

import pytest

from circular_api.baseservice import GatewayMethod
from circular_api.blockchain.exceptions import NetworkError, NonceNotFoundError
from circular_api.blockchain.transactions import NonceResolver
from tests.unit.test_util import BLOCKCHAIN

ADDRESS = "0x" + "ab" * 32


@pytest.fixture
def nonce_resolver(gateway_client):
    return NonceResolver(gateway_client)


@pytest.mark.asyncio
class TestNonceResolver:
    async def test_next_nonce_is_current_plus_one(self, nonce_resolver, fake_gateway):
        fake_gateway.script(GatewayMethod.GetWalletNonce, {"Result": 200, "Response": {"Nonce": 41}})

        assert await nonce_resolver.resolve_next(BLOCKCHAIN, ADDRESS) == 42

    async def test_request_body(self, nonce_resolver, fake_gateway, gateway_config):
        fake_gateway.script(GatewayMethod.GetWalletNonce, {"Result": 200, "Response": {"Nonce": 0}})

        await nonce_resolver.resolve_next(BLOCKCHAIN, ADDRESS)

        assert fake_gateway.requests_for(GatewayMethod.GetWalletNonce) == [{
            "Blockchain": BLOCKCHAIN[2:],
            "Address": ADDRESS[2:],
            "Version": gateway_config.version
        }]

    async def test_every_call_reads_again(self, nonce_resolver, fake_gateway):
        fake_gateway.script(GatewayMethod.GetWalletNonce,
                            {"Result": 200, "Response": {"Nonce": 1}},
                            {"Result": 200, "Response": {"Nonce": 2}})

        assert await nonce_resolver.resolve_next(BLOCKCHAIN, ADDRESS) == 2
        assert await nonce_resolver.resolve_next(BLOCKCHAIN, ADDRESS) == 3
        assert len(fake_gateway.requests_for(GatewayMethod.GetWalletNonce)) == 2

    @pytest.mark.parametrize("answer", [
        {"Result": 200, "Response": {}},
        {"Result": 200, "Response": {"Nonce": "7"}},
        {"Result": 200, "Response": {"Nonce": True}},
        {"Result": 404, "Response": "Wallet Not Found"},
        {"Result": 200},
        [],
    ])
    async def test_missing_nonce(self, nonce_resolver, fake_gateway, answer):
        fake_gateway.script(GatewayMethod.GetWalletNonce, answer)

        with pytest.raises(NonceNotFoundError) as excinfo:
            await nonce_resolver.resolve_next(BLOCKCHAIN, ADDRESS)
        assert excinfo.value.address == ADDRESS[2:]

    async def test_transport_error_propagates(self, nonce_resolver, fake_gateway):
        fake_gateway.script(GatewayMethod.GetWalletNonce, NetworkError("Server unreachable"))

        with pytest.raises(NetworkError):
            await nonce_resolver.resolve_next(BLOCKCHAIN, ADDRESS)
