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
""" A module for configuration"""

import json
import logging
from typing import Optional

from circular_api.configure_default import *


class GatewayConfig:
    """Connection settings of one client.

    Every client holds its own instance, so several clients pointed at different
    gateways can live in one process. Changing a config while requests built from
    it are still in flight is not guarded; do it between calls.
    """

    def __init__(self,
                 nag_url: Optional[str] = None,
                 nag_key: Optional[str] = None,
                 version: Optional[str] = None,
                 timeout: Optional[int] = None):
        self.nag_url: str = nag_url or NAG_URL
        self.nag_key: str = nag_key if nag_key is not None else NAG_KEY
        self.version: str = version or PROTOCOL_VERSION
        self.timeout: int = timeout or REST_TIMEOUT

    def url_for(self, operation: str) -> str:
        return f"{self.nag_url}{OPERATION_PREFIX}{operation}{OPERATION_SUFFIX}"

    @classmethod
    def from_json(cls, configure_file_path: str) -> 'GatewayConfig':
        """method for reading json configuration.

        Unknown keys are skipped.

        :param configure_file_path: json configure file path
        :return: GatewayConfig
        """
        logging.debug(f"try load configure from json file ({configure_file_path})")

        with open(configure_file_path) as json_file:
            json_data = json.load(json_file)

        config = cls()
        for configure_key, configure_value in json_data.items():
            attr = configure_key.lower()
            if attr not in config.__dict__:
                logging.debug(f"this is not configure key({configure_key})")
                continue
            setattr(config, attr, type(getattr(config, attr))(configure_value))

        return config

    def __repr__(self):
        return f"GatewayConfig(nag_url={self.nag_url!r}, version={self.version!r}, timeout={self.timeout})"
