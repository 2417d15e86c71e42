"""Test GatewayConfig"""

import json

from circular_api import configure as conf
from circular_api import configure_default as conf_default


class TestGatewayConfig:
    def test_defaults(self):
        config = conf.GatewayConfig()

        assert config.nag_url == conf_default.NAG_URL
        assert config.version == conf_default.PROTOCOL_VERSION
        assert isinstance(config.timeout, int)

    def test_url_for_operation(self):
        config = conf.GatewayConfig(nag_url="https://nag.example.com/NAG.php?cep=")

        assert config.url_for("GetWalletNonce") == "https://nag.example.com/NAG.php?cep=Circular_GetWalletNonce_"

    def test_configs_are_independent(self):
        first = conf.GatewayConfig(nag_url="https://first/?cep=")
        second = conf.GatewayConfig(nag_url="https://second/?cep=")

        first.nag_key = "key"
        assert second.nag_key == conf_default.NAG_KEY
        assert first.url_for("GetBlock") != second.url_for("GetBlock")

    def test_from_json(self, tmp_path):
        path = tmp_path / "circular.json"
        path.write_text(json.dumps({
            "NAG_URL": "https://json.example.com/?cep=",
            "TIMEOUT": 7,
            "UNKNOWN_KEY": 1
        }))

        config = conf.GatewayConfig.from_json(str(path))

        assert config.nag_url == "https://json.example.com/?cep="
        assert config.timeout == 7
        assert not hasattr(config, "unknown_key")
