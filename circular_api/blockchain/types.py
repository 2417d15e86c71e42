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
"""Value types shared by the gateway client and the transaction pipeline."""

from typing import Any, NamedTuple, Optional

from circular_api import configure as conf
from circular_api.blockchain.exceptions import GatewayError


class GatewayResponse(NamedTuple):
    """Envelope of every gateway answer: {Result, Response, Node?}."""

    result_code: Optional[int]
    response: Any
    node_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'GatewayResponse':
        if not isinstance(data, dict):
            return cls(None, data)
        return cls(data.get("Result"), data.get("Response"), data.get("Node"))

    @property
    def success(self) -> bool:
        return self.result_code == conf.RESULT_SUCCESS

    def raise_for_result(self) -> Any:
        if not self.success:
            raise GatewayError(self.result_code, self.response, self.node_id)
        return self.response
