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
from circular_api import utils
from circular_api.baseservice.gateway_client import GatewayMethod
from circular_api.blockchain.transactions.transaction import Transaction


class TransactionSerializer:
    """Maps Transaction objects to and from the gateway's field names."""

    def to_raw_data(self, tx: Transaction) -> dict:
        return {
            "ID": utils.hex_fix(tx.id),
            "From": utils.hex_fix(tx.from_address),
            "To": utils.hex_fix(tx.to_address),
            "Timestamp": tx.timestamp,
            "Payload": str(utils.hex_fix(tx.payload)),
            "Nonce": str(tx.nonce),
            "Signature": utils.hex_fix(tx.signature),
            "Blockchain": utils.hex_fix(tx.blockchain),
            "Type": tx.type
        }

    def to_params(self, tx: Transaction):
        return GatewayMethod.AddTransaction.value.params(**self.to_raw_data(tx))

    def from_(self, tx_data: dict) -> Transaction:
        return Transaction(
            id=utils.hex_fix(tx_data["ID"]),
            from_address=utils.hex_fix(tx_data["From"]),
            to_address=utils.hex_fix(tx_data["To"]),
            timestamp=tx_data["Timestamp"],
            type=tx_data["Type"],
            payload=utils.hex_fix(tx_data["Payload"]),
            nonce=int(tx_data["Nonce"]),
            signature=utils.hex_fix(tx_data.get("Signature", "")),
            blockchain=utils.hex_fix(tx_data["Blockchain"])
        )
