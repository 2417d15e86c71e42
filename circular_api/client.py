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
"""One object wiring the gateway client, the transaction pipeline and the poller."""

from typing import Any

from circular_api import utils, configure as conf
from circular_api.baseservice import FinalityPoller, GatewayClient, GatewayMethod
from circular_api.blockchain.transactions import NonceResolver, TransactionSubmitter


class CircularClient:
    """Client of one gateway.

    Query wrappers return the gateway envelope ``{"Result", "Response", "Node"}`` as
    received and raise NetworkError or ParseError when there is none. Wrap it in
    GatewayResponse to turn a non-200 result into a GatewayError.
    """

    def __init__(self, config: conf.GatewayConfig = None):
        self.config = config or conf.GatewayConfig()
        self.gateway = GatewayClient(self.config)
        self.nonce_resolver = NonceResolver(self.gateway)
        self.submitter = TransactionSubmitter(self.gateway, self.nonce_resolver)

    async def _query(self, method: GatewayMethod, **params) -> dict:
        params = method.value.params(**params) if method.value.params else None
        return await self.gateway.call_async(method, params)

    # ------------------- wallets ----------------------------

    async def check_wallet(self, blockchain: str, address: str) -> dict:
        return await self._query(GatewayMethod.CheckWallet, Blockchain=blockchain, Address=address)

    async def get_wallet(self, blockchain: str, address: str) -> dict:
        return await self._query(GatewayMethod.GetWallet, Blockchain=blockchain, Address=address)

    async def get_latest_transactions(self, blockchain: str, address: str) -> dict:
        return await self._query(GatewayMethod.GetLatestTransactions, Blockchain=blockchain, Address=address)

    async def get_wallet_balance(self, blockchain: str, address: str, asset: str) -> dict:
        return await self._query(GatewayMethod.GetWalletBalance, Blockchain=blockchain, Address=address, Asset=asset)

    async def get_wallet_nonce(self, blockchain: str, address: str) -> dict:
        return await self.nonce_resolver.get_nonce(blockchain, address)

    async def register_wallet(self, blockchain: str, public_key: str) -> str:
        return await self.submitter.register_wallet(blockchain, public_key)

    async def get_domain(self, blockchain: str, name: str) -> dict:
        return await self._query(GatewayMethod.ResolveDomain, Blockchain=blockchain, Domain=name)

    # ------------------- smart contracts ----------------------------

    async def test_contract(self, blockchain: str, from_address: str, project: str) -> dict:
        return await self._query(GatewayMethod.TestContract, Blockchain=blockchain, From=from_address,
                                 Timestamp=utils.get_formatted_timestamp(), Project=project)

    async def call_contract(self, blockchain: str, from_address: str, address: str, request: str) -> dict:
        return await self._query(GatewayMethod.CallContract, Blockchain=blockchain, From=from_address,
                                 Address=address, Request=request, Timestamp=utils.get_formatted_timestamp())

    # ------------------- assets ----------------------------

    async def get_asset_list(self, blockchain: str) -> dict:
        return await self._query(GatewayMethod.GetAssetList, Blockchain=blockchain)

    async def get_asset(self, blockchain: str, name: str) -> dict:
        return await self._query(GatewayMethod.GetAsset, Blockchain=blockchain, AssetName=name)

    async def get_asset_supply(self, blockchain: str, name: str) -> dict:
        return await self._query(GatewayMethod.GetAssetSupply, Blockchain=blockchain, AssetName=name)

    async def get_voucher(self, blockchain: str, code) -> dict:
        return await self._query(GatewayMethod.GetVoucher, Blockchain=blockchain, Code=code)

    # ------------------- blocks ----------------------------

    async def get_block_range(self, blockchain: str, start: int, end: int) -> dict:
        """If end is 0, start counts blocks backward from the last one minted."""
        return await self._query(GatewayMethod.GetBlockRange, Blockchain=blockchain, Start=start, End=end)

    async def get_block(self, blockchain: str, num: int) -> dict:
        return await self._query(GatewayMethod.GetBlock, Blockchain=blockchain, BlockNumber=num)

    async def get_block_count(self, blockchain: str) -> dict:
        return await self._query(GatewayMethod.GetBlockHeight, Blockchain=blockchain)

    async def get_analytics(self, blockchain: str) -> dict:
        return await self._query(GatewayMethod.GetAnalytics, Blockchain=blockchain)

    async def get_blockchains(self) -> dict:
        return await self._query(GatewayMethod.GetBlockchains)

    # ------------------- transactions ----------------------------

    async def get_pending_transaction(self, blockchain: str, tx_id: str) -> dict:
        return await self._query(GatewayMethod.GetPendingTransaction, Blockchain=blockchain, ID=tx_id)

    async def get_transaction_by_id(self, blockchain: str, tx_id: str, start: int, end: int) -> dict:
        return await self._query(GatewayMethod.GetTransactionbyID, Blockchain=blockchain, ID=tx_id,
                                 Start=start, End=end)

    async def get_transaction_by_node(self, blockchain: str, node_id: str, start: int, end: int) -> dict:
        return await self._query(GatewayMethod.GetTransactionbyNode, Blockchain=blockchain, NodeID=node_id,
                                 Start=start, End=end)

    async def get_transaction_by_address(self, blockchain: str, address: str, start: int, end: int) -> dict:
        return await self._query(GatewayMethod.GetTransactionbyAddress, Blockchain=blockchain, Address=address,
                                 Start=start, End=end)

    async def get_transaction_by_date(self, blockchain: str, address: str, start_date: str, end_date: str) -> dict:
        return await self._query(GatewayMethod.GetTransactionbyDate, Blockchain=blockchain, Address=address,
                                 StartDate=start_date, EndDate=end_date)

    async def send_transaction(self, id: str, from_address: str, to_address: str, timestamp: str, type: str,
                               payload: str, nonce: int, signature: str, blockchain: str) -> dict:
        return await self.submitter.submit(id, from_address, to_address, timestamp, type,
                                           payload, nonce, signature, blockchain)

    async def send_transaction_with_private_key(self, from_address: str, private_key: str, to_address: str,
                                                type: str, payload: Any, blockchain: str) -> dict:
        return await self.submitter.submit_with_private_key(from_address, private_key, to_address,
                                                            type, payload, blockchain)

    def poll_transaction_outcome(self, blockchain: str, tx_id: str, timeout_sec: float,
                                 interval_sec: float = None) -> FinalityPoller:
        """Start polling and return the poller, which can be awaited through wait() or cancelled.

        Must be called from a coroutine, the poll runs on the running event loop.
        """
        poller = FinalityPoller(self.gateway, blockchain, tx_id, timeout_sec, interval_sec)
        poller.start()
        return poller

    async def get_transaction_outcome(self, blockchain: str, tx_id: str, timeout_sec: float,
                                      interval_sec: float = None):
        return await self.poll_transaction_outcome(blockchain, tx_id, timeout_sec, interval_sec).wait()
