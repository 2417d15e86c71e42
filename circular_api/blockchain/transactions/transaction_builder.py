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
import json
from typing import Any, Optional, TYPE_CHECKING

from circular_api import utils
from circular_api.blockchain.transactions.transaction import Transaction
from circular_api.crypto.hashing import sha256_hex

if TYPE_CHECKING:
    from circular_api.crypto.signature import Signer


def build_id(blockchain: str, from_address: str, to_address: str, payload: str, nonce: int, timestamp: str) -> str:
    """SHA-256 of blockchain + from + to + payload + nonce + timestamp.

    The fields are joined without separators after their '0x' is dropped. The gateway
    recomputes this value, so neither the order nor the joining may change.
    """
    origin = ''.join((
        utils.hex_fix(blockchain),
        utils.hex_fix(from_address),
        utils.hex_fix(to_address),
        utils.hex_fix(payload),
        str(nonce),
        timestamp
    ))
    return sha256_hex(origin)


def encode_payload(payload: Any) -> str:
    """Serialize a payload the way the gateway expects it: compact JSON, then hex."""
    return utils.string_to_hex(json.dumps(payload, separators=(',', ':'), ensure_ascii=False))


class TransactionBuilder:
    def __init__(self):
        # Attributes that must be assigned
        self.blockchain: str = None
        self.from_address: str = None
        self.to_address: str = None
        self.type: str = None
        self.payload: str = None
        self.nonce: int = None

        # Attributes to be assigned(optional)
        self.fixed_timestamp: Optional[str] = None

        # Attributes to be generated
        self.timestamp: str = None
        self.hash: str = None
        self.signature: str = ""

    def reset_cache(self):
        self.timestamp = None
        self.hash = None
        self.signature = ""

    def build_hash(self) -> str:
        for name in ("blockchain", "from_address", "to_address", "payload", "nonce"):
            if getattr(self, name) is None:
                raise RuntimeError(f"'{name}' is required to build a transaction id.")

        self.timestamp = self.fixed_timestamp or utils.get_formatted_timestamp()
        self.hash = build_id(self.blockchain, self.from_address, self.to_address,
                             self.payload, self.nonce, self.timestamp)
        return self.hash

    def sign(self, signer: 'Signer') -> str:
        if self.hash is None:
            self.build_hash()

        self.signature = signer.sign(self.hash)
        return self.signature

    def build(self, signer: 'Signer' = None) -> Transaction:
        self.build_hash()
        if signer is not None:
            self.sign(signer)

        return Transaction(
            id=self.hash,
            from_address=utils.hex_fix(self.from_address),
            to_address=utils.hex_fix(self.to_address),
            timestamp=self.timestamp,
            type=self.type,
            payload=utils.hex_fix(self.payload),
            nonce=self.nonce,
            signature=self.signature,
            blockchain=utils.hex_fix(self.blockchain)
        )
