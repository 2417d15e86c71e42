# Copyright 2019 ICON Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""The Client Interface for gateway call."""

import asyncio
import json
import logging
from collections import namedtuple
from enum import Enum
from typing import NamedTuple, Optional, Tuple

import requests
from aiohttp import ClientError, ClientSession, ClientTimeout

from circular_api import utils, configure as conf
from circular_api.blockchain.exceptions import NetworkError, ParseError

_GatewayMethod = namedtuple("_GatewayMethod", "operation params")

# Request fields are converted by name before they are sent.
_HEX_FIELDS = frozenset(("Blockchain", "Address", "From", "To", "ID", "NodeID", "Signature", "Payload"))
_NUMBER_FIELDS = frozenset(("Start", "End", "BlockNumber", "Code", "Nonce"))
_TEXT_FIELDS = frozenset(("Project", "Request"))


class GatewayMethod(Enum):
    # wallets
    CheckWallet = _GatewayMethod("CheckWallet", namedtuple("Params", "Blockchain Address"))
    GetWallet = _GatewayMethod("GetWallet", namedtuple("Params", "Blockchain Address"))
    GetLatestTransactions = _GatewayMethod("GetLatestTransactions", namedtuple("Params", "Blockchain Address"))
    GetWalletBalance = _GatewayMethod("GetWalletBalance", namedtuple("Params", "Blockchain Address Asset"))
    GetWalletNonce = _GatewayMethod("GetWalletNonce", namedtuple("Params", "Blockchain Address"))
    ResolveDomain = _GatewayMethod("ResolveDomain", namedtuple("Params", "Blockchain Domain"))

    # smart contracts
    TestContract = _GatewayMethod("TestContract", namedtuple("Params", "Blockchain From Timestamp Project"))
    CallContract = _GatewayMethod("CallContract", namedtuple("Params", "Blockchain From Address Request Timestamp"))

    # assets and vouchers
    GetAssetList = _GatewayMethod("GetAssetList", namedtuple("Params", "Blockchain"))
    GetAsset = _GatewayMethod("GetAsset", namedtuple("Params", "Blockchain AssetName"))
    GetAssetSupply = _GatewayMethod("GetAssetSupply", namedtuple("Params", "Blockchain AssetName"))
    GetVoucher = _GatewayMethod("GetVoucher", namedtuple("Params", "Blockchain Code"))

    # blocks and network
    GetBlockRange = _GatewayMethod("GetBlockRange", namedtuple("Params", "Blockchain Start End"))
    GetBlock = _GatewayMethod("GetBlock", namedtuple("Params", "Blockchain BlockNumber"))
    GetBlockHeight = _GatewayMethod("GetBlockHeight", namedtuple("Params", "Blockchain"))
    GetAnalytics = _GatewayMethod("GetAnalytics", namedtuple("Params", "Blockchain"))
    GetBlockchains = _GatewayMethod("GetBlockchains", None)

    # transactions
    GetPendingTransaction = _GatewayMethod("GetPendingTransaction", namedtuple("Params", "Blockchain ID"))
    GetTransactionbyID = _GatewayMethod("GetTransactionbyID", namedtuple("Params", "Blockchain ID Start End"))
    GetTransactionbyNode = _GatewayMethod("GetTransactionbyNode", namedtuple("Params", "Blockchain NodeID Start End"))
    GetTransactionbyAddress = _GatewayMethod("GetTransactionbyAddress",
                                             namedtuple("Params", "Blockchain Address Start End"))
    GetTransactionbyDate = _GatewayMethod("GetTransactionbyDate",
                                          namedtuple("Params", "Blockchain Address StartDate EndDate"))
    AddTransaction = _GatewayMethod("AddTransaction",
                                    namedtuple("Params", "ID From To Timestamp Payload Nonce Signature Blockchain Type"))


class GatewayClient:
    """Sends one JSON document per call to the gateway of the given config."""

    def __init__(self, config: conf.GatewayConfig = None):
        self.config = config or conf.GatewayConfig()

    def call(self, method: GatewayMethod, params: Optional[NamedTuple] = None, timeout=None) -> dict:
        timeout = timeout or self.config.timeout
        url = self.create_url(method)

        try:
            status, text = self._post(url, self.create_params(method, params), timeout)
            response = self._parse(url, status, text)
        except Exception as e:
            logging.warning(f"gateway call fail method_name({method.name}), caused by : {type(e)}, {e}")
            raise
        else:
            utils.logger.spam(f"gateway call complete method_name({method.name})")
            return response

    async def call_async(self, method: GatewayMethod, params: Optional[NamedTuple] = None, timeout=None) -> dict:
        timeout = timeout or self.config.timeout
        url = self.create_url(method)

        try:
            status, text = await self._post_async(url, self.create_params(method, params), timeout)
            response = self._parse(url, status, text)
        except Exception as e:
            logging.warning(f"gateway call async fail method_name({method.name}), caused by : {type(e)}, {e}")
            raise
        else:
            utils.logger.spam(f"gateway call async complete method_name({method.name})")
            return response

    async def send_async(self, method: GatewayMethod, params: Optional[NamedTuple] = None,
                         timeout=None) -> Tuple[int, str]:
        """POST without judging the answer. Returns (http status, body text)."""
        timeout = timeout or self.config.timeout
        return await self._post_async(self.create_url(method), self.create_params(method, params), timeout)

    def _post(self, url: str, body: dict, timeout) -> Tuple[int, str]:
        try:
            response = requests.post(url=url,
                                     json=body,
                                     headers={'Content-Type': conf.REST_CONTENT_TYPE},
                                     timeout=timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Server unreachable: {e}", url) from e
        return response.status_code, response.text

    async def _post_async(self, url: str, body: dict, timeout) -> Tuple[int, str]:
        try:
            async with ClientSession() as session:
                async with session.post(url=url,
                                        json=body,
                                        headers={'Content-Type': conf.REST_CONTENT_TYPE},
                                        timeout=ClientTimeout(total=timeout)) as response:
                    return response.status, await response.text()
        except (ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Server unreachable: {e!r}", url) from e

    @staticmethod
    def _parse(url: str, status: int, text: str) -> dict:
        if status != 200:
            raise NetworkError("Network response was not ok", url, status)

        try:
            return json.loads(text)
        except ValueError as e:
            raise ParseError(f"Invalid JSON response: {e}", text, status) from e

    def create_url(self, method: GatewayMethod) -> str:
        return self.config.url_for(method.value.operation)

    def create_params(self, method: GatewayMethod, params: Optional[NamedTuple]) -> dict:
        if method.value.params is None:
            return {}

        # noinspection PyProtectedMember
        data = {k: self._marshal(k, v) for k, v in params._asdict().items()}
        data["Version"] = self.config.version
        return data

    @staticmethod
    def _marshal(name: str, value):
        if name in _HEX_FIELDS:
            return utils.hex_fix(value)
        if name in _NUMBER_FIELDS:
            return str(value)
        if name in _TEXT_FIELDS:
            return utils.string_to_hex(value)
        return value
