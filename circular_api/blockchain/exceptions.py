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
"""Errors raised while talking to the gateway."""


class CircularError(Exception):
    pass


class NetworkError(CircularError):
    """The gateway could not be reached or answered with a non-OK HTTP status."""

    def __init__(self, msg: str, url: str = None, status: int = None):
        super().__init__(msg)
        self.msg = msg
        self.url = url
        self.status = status

    def __str__(self):
        results = [self.msg]
        if self.url:
            results.append(f"url: {self.url}")
        if self.status is not None:
            results.append(f"status: {self.status}")
        return ' '.join(results)


class ParseError(CircularError):
    """The gateway answered with a body that is not JSON."""

    def __init__(self, msg: str, body: str = None, status: int = None):
        super().__init__(msg)
        self.msg = msg
        self.body = body
        self.status = status


class GatewayError(CircularError):
    def __init__(self, result_code: int, response, node_id: str = None):
        super().__init__(f"gateway result({result_code}): {response}")
        self.result_code = result_code
        self.response = response
        self.node_id = node_id


class NonceNotFoundError(CircularError):
    def __init__(self, blockchain: str, address: str, response=None):
        super().__init__(f"nonce not found for wallet({address}) on blockchain({blockchain})")
        self.blockchain = blockchain
        self.address = address
        self.response = response


class TransactionOutcomeTimeoutError(CircularError, TimeoutError):
    def __init__(self, tx_id: str, timeout_sec: float, elapsed_sec: float):
        super().__init__(f"Timeout exceeded: tx({tx_id}) not confirmed in {timeout_sec}s (elapsed {elapsed_sec:.3f}s)")
        self.tx_id = tx_id
        self.timeout_sec = timeout_sec
        self.elapsed_sec = elapsed_sec
