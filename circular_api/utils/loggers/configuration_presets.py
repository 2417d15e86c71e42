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
from enum import Enum

from circular_api import configure as conf
from circular_api.utils.loggers.configuration import LogConfiguration


develop = LogConfiguration()
develop.log_color = True

production = LogConfiguration()
production.log_color = False


class PresetType(Enum):
    develop = 0
    production = 1


_preset_type = PresetType.production
_presets = {
    PresetType.develop: develop,
    PresetType.production: production
}


def get_preset_type():
    return _preset_type


def set_preset_type(preset, client_name: str = None):
    global _preset_type
    _preset_type = preset

    if client_name is not None:
        _presets[preset].client_name = client_name


def get_preset():
    return _presets[_preset_type]


def update_preset(update_logger=True):
    preset = get_preset()

    preset.log_format = conf.LOG_FORMAT
    preset.log_output_type = conf.LOG_OUTPUT_TYPE

    preset.log_file_location = conf.LOG_FILE_LOCATION
    preset.log_file_prefix = conf.LOG_FILE_PREFIX
    preset.log_file_extension = conf.LOG_FILE_EXTENSION
    preset.log_file_rotate_backup_count = conf.LOG_FILE_ROTATE_BACKUP_COUNT
    preset.log_file_rotate_interval = conf.LOG_FILE_ROTATE_INTERVAL
    preset.log_file_rotate_max_bytes = conf.LOG_FILE_ROTATE_MAX_BYTES
    preset.log_file_rotate_utc = conf.LOG_FILE_ROTATE_UTC
    preset.log_file_rotate_when = conf.LOG_FILE_ROTATE_WHEN

    if preset is develop:
        preset.log_level = conf.CIRCULAR_DEVELOP_LOG_LEVEL
    else:
        preset.log_level = conf.CIRCULAR_LOG_LEVEL

    if update_logger:
        preset.update_logger()
