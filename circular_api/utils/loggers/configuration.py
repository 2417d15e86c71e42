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
import logging
import logging.handlers
import os
import sys
from functools import reduce
from operator import or_

import coloredlogs
import verboselogs

from circular_api import configure as conf

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# third-party loggers that stay at WARNING whatever the preset level is
QUIET_LOGGERS = ("aiohttp.access", "aiohttp.client", "urllib3.connectionpool")


class LogConfiguration:
    """Handlers and levels of the root logger.

    Console output goes to stderr only, so command output on stdout stays parseable.
    """

    def __init__(self):
        self.log_format = conf.LOG_FORMAT
        self.client_name = ""
        self.log_level = verboselogs.SPAM
        self.log_color = True
        self.log_output_type = conf.LogOutputType.console
        self.log_file_location = ""
        self.log_file_prefix = ""
        self.log_file_extension = ""
        self.log_file_rotate_when = ""
        self.log_file_rotate_interval = 1
        self.log_file_rotate_max_bytes = 0
        self.log_file_rotate_backup_count = 0
        self.log_file_rotate_utc = False

    @property
    def level(self) -> int:
        if isinstance(self.log_level, int):
            return self.log_level
        return logging.getLevelName(self.log_level.upper())

    @property
    def output_type(self) -> conf.LogOutputType:
        if isinstance(self.log_output_type, str):
            return reduce(or_, (conf.LogOutputType[flag.strip().lower()] for flag in self.log_output_type.split('|')))
        return self.log_output_type

    @property
    def log_file_path(self) -> str:
        name = self.log_file_prefix + (self.client_name and f".{self.client_name}")
        return os.path.join(self.log_file_location, f"{name.replace('/', '_')}.{self.log_file_extension}")

    def update_logger(self, logger: logging.Logger = None):
        logger = logger or logging.root
        fmt = self.log_format.format(CLIENT_NAME=self.client_name)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        output_type = self.output_type
        if output_type & conf.LogOutputType.console:
            handler = logging.StreamHandler(sys.stderr)
            if self.log_color:
                handler.setFormatter(coloredlogs.ColoredFormatter(fmt=fmt, datefmt=DATE_FORMAT))
            else:
                handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
            logger.addHandler(handler)

        if output_type & conf.LogOutputType.file and self.log_file_location:
            handler = self._create_file_handler()
            handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
            logger.addHandler(handler)

        logger.setLevel(self.level)
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(max(self.level, logging.WARNING))

    def _create_file_handler(self) -> logging.Handler:
        if os.path.exists(self.log_file_location) and not os.path.isdir(self.log_file_location):
            raise RuntimeError(f"LogFileLocation({self.log_file_location}) is not a directory.")
        os.makedirs(self.log_file_location, exist_ok=True)

        if self.log_file_rotate_when:
            return logging.handlers.TimedRotatingFileHandler(
                self.log_file_path,
                when=self.log_file_rotate_when,
                interval=self.log_file_rotate_interval,
                backupCount=self.log_file_rotate_backup_count,
                encoding='utf-8',
                utc=self.log_file_rotate_utc
            )
        if self.log_file_rotate_max_bytes:
            return logging.handlers.RotatingFileHandler(
                self.log_file_path,
                maxBytes=self.log_file_rotate_max_bytes,
                backupCount=self.log_file_rotate_backup_count,
                encoding='utf-8'
            )
        return logging.FileHandler(self.log_file_path, encoding='utf-8')
