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
"""All circular_api configure value can set by system environment.
But before set by system environment, circular_api use this default values.

Values here are process-wide defaults only. A client reads them once, when its
GatewayConfig is created, and never looks at them again.
"""

import os

from enum import IntFlag, auto


#############
# LOGGING ###
#############
class LogOutputType(IntFlag):
    console = auto()
    file = auto()


CIRCULAR_LOG_LEVEL = os.getenv('CIRCULAR_LOG_LEVEL', 'INFO')
CIRCULAR_DEVELOP_LOG_LEVEL = "SPAM"
LOG_FORMAT = "%(asctime)s,%(msecs)03d %(process)d %(thread)d {CLIENT_NAME} " \
             "%(levelname)s %(filename)s(%(lineno)d) %(message)s"

LOG_OUTPUT_TYPE = os.getenv("CIRCULAR_LOG_OUTPUT_TYPE", "console")  # "console", "file" or "console|file"

LOG_FILE_LOCATION = os.getenv("CIRCULAR_LOG_DIR", "log")
LOG_FILE_PREFIX = "circular"
LOG_FILE_EXTENSION = "log"

LOG_FILE_ROTATE_WHEN = ''  # Default '', Do no rotate log files by time
LOG_FILE_ROTATE_INTERVAL = 1
LOG_FILE_ROTATE_MAX_BYTES = 0  # Default 0, Do not rotate log files by max bytes
LOG_FILE_ROTATE_BACKUP_COUNT = 10
LOG_FILE_ROTATE_UTC = False


######################
# GATEWAY SERVICE ###
######################
NAG_URL = os.getenv('CIRCULAR_NAG_URL', 'https://nag.circularlabs.io/NAG.php?cep=')
NAG_KEY = os.getenv('CIRCULAR_NAG_KEY', '')
PROTOCOL_VERSION = '1.0.7'  # version of the gateway protocol this library speaks
REST_TIMEOUT = int(os.getenv('CIRCULAR_REST_TIMEOUT', 30))  # seconds
REST_CONTENT_TYPE = 'application/json'
OPERATION_PREFIX = 'Circular_'
OPERATION_SUFFIX = '_'


##################
# TRANSACTION ###
##################
POLL_INTERVAL_SEC = int(os.getenv('CIRCULAR_POLL_INTERVAL_SEC', 5))
POLL_SEARCH_START = 0  # transaction lookup window used while polling for finality
POLL_SEARCH_END = 10
TX_NOT_FOUND = 'Transaction Not Found'
TX_STATUS_PENDING = 'Pending'
TX_TYPE_REGISTER_WALLET = 'C_TYPE_REGISTERWALLET'
TX_ACTION_REGISTER_WALLET = 'CP_REGISTERWALLET'
RESULT_SUCCESS = 200
