"""Test command line launcher"""

import json

import pytest

from circular_api import launcher
from circular_api.baseservice import GatewayMethod
from circular_api.client import CircularClient
from circular_api.crypto.signature import Signer
from tests.unit.test_util import BLOCKCHAIN, NAG_URL, FakeGateway

ADDRESS = "0x" + "ab" * 32


class TestParser:
    def test_defaults(self):
        args = launcher.create_parser().parse_args(["blockchains"])

        assert args.command == "blockchains"
        assert args.tx_type == "C_TYPE_COIN"
        assert args.payload == "{}"
        assert args.timeout == 60
        assert args.interval is None
        assert not args.develop

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            launcher.create_parser().parse_args(["mint"])

    def test_create_config(self):
        args = launcher.create_parser().parse_args(["blockchains", "-u", NAG_URL])
        config = launcher.create_config(args)

        assert config.url_for("GetBlockchains") == f"{NAG_URL}Circular_GetBlockchains_"

    def test_create_config_from_file(self, tmp_path):
        path = tmp_path / "circular.json"
        path.write_text(json.dumps({"NAG_URL": NAG_URL, "TIMEOUT": 3}))

        args = launcher.create_parser().parse_args(["blockchains", "-o", str(path)])
        config = launcher.create_config(args)

        assert config.nag_url == NAG_URL
        assert config.timeout == 3


class TestMain:
    def test_keygen(self, capsys):
        launcher.main(["keygen"])
        keys = json.loads(capsys.readouterr().out)

        assert Signer.from_prikey_hex(keys["PrivateKey"]).public_key_hex == keys["PublicKey"]


@pytest.mark.asyncio
class TestRun:
    @pytest.fixture
    def client(self, gateway_config, monkeypatch):
        client = CircularClient(gateway_config)
        fake = FakeGateway(client.gateway)
        monkeypatch.setattr(client.gateway, "call_async", fake.call_async)
        client.fake = fake
        return client

    async def test_nonce(self, client):
        client.fake.script(GatewayMethod.GetWalletNonce, {"Result": 200, "Response": {"Nonce": 7}})
        args = launcher.create_parser().parse_args(["nonce", "-b", BLOCKCHAIN, "-a", ADDRESS])

        assert await launcher.run(client, args) == {"Result": 200, "Response": {"Nonce": 7}}
        body, = client.fake.requests_for(GatewayMethod.GetWalletNonce)
        assert body["Address"] == ADDRESS[2:]

    async def test_missing_option(self, client):
        args = launcher.create_parser().parse_args(["wallet", "-b", BLOCKCHAIN])

        with pytest.raises(SystemExit):
            await launcher.run(client, args)
        assert not client.fake.requests
