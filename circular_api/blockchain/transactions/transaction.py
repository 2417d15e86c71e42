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
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Transaction:
    """A ledger transaction as sent to the gateway.

    Hex fields carry no '0x' prefix. ``id`` is the SHA-256 of the ordered fields and
    ``signature`` is taken over ``id``.
    """

    id: str
    from_address: str
    to_address: str
    timestamp: str
    type: str
    payload: str
    nonce: int
    signature: str
    blockchain: str

    def is_signed(self) -> bool:
        return bool(self.signature)

    def with_signature(self, signature: str) -> 'Transaction':
        return replace(self, signature=signature)
