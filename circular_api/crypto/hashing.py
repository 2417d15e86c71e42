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
"""SHA-256 helpers used for transaction IDs, wallet addresses and signing digests."""

import hashlib
from typing import Union


def _to_bytes(data: Union[str, bytes]) -> bytes:
    return data.encode('utf-8') if isinstance(data, str) else bytes(data)


def sha256_digest(data: Union[str, bytes]) -> bytes:
    return hashlib.sha256(_to_bytes(data)).digest()


def sha256_hex(data: Union[str, bytes]) -> str:
    return hashlib.sha256(_to_bytes(data)).hexdigest()
