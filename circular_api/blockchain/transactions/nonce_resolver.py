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
"""Reads a wallet nonce from the gateway and computes the next one."""

import logging

from circular_api import utils
from circular_api.baseservice.gateway_client import GatewayClient, GatewayMethod
from circular_api.blockchain.exceptions import NonceNotFoundError


class NonceResolver:
    """Every call is a fresh round trip; nothing is cached.

    Two resolutions for the same wallet that overlap in time see the same current
    nonce and so return the same next value. Callers sending several transactions
    from one wallet must wait for each submission before resolving the next nonce.
    """

    def __init__(self, gateway: GatewayClient):
        self._gateway = gateway

    async def get_nonce(self, blockchain: str, address: str) -> dict:
        params = GatewayMethod.GetWalletNonce.value.params(Blockchain=blockchain, Address=address)
        return await self._gateway.call_async(GatewayMethod.GetWalletNonce, params)

    async def resolve_next(self, blockchain: str, address: str) -> int:
        blockchain = utils.hex_fix(blockchain)
        address = utils.hex_fix(address)

        data = await self.get_nonce(blockchain, address)
        response = data.get("Response") if isinstance(data, dict) else None
        nonce = response.get("Nonce") if isinstance(response, dict) else None

        # bool is an int subclass but never a nonce
        if not isinstance(nonce, int) or isinstance(nonce, bool):
            logging.warning(f"no nonce in gateway response for wallet({address}): {data}")
            raise NonceNotFoundError(blockchain, address, data)

        utils.logger.spam(f"wallet({address}) nonce({nonce})")
        return nonce + 1
