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
"""Client library for the Circular ledger network gateway."""

from circular_api.utils import hex_fix, string_to_hex, hex_to_string, get_formatted_timestamp
from circular_api.configure import GatewayConfig
from circular_api.blockchain.exceptions import (CircularError, NetworkError, ParseError, GatewayError,
                                                NonceNotFoundError, TransactionOutcomeTimeoutError)
from circular_api.blockchain.types import GatewayResponse
from circular_api.crypto.signature import Signer, SignatureVerifier, sign_message, verify_signature, get_public_key
from circular_api.client import CircularClient
