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
"""Utilities for circular_api."""

import datetime
import string

import verboselogs

logger = verboselogs.VerboseLogger("circular")

_HEX_DIGITS = frozenset(string.hexdigits)


# ------------------- hex utils ----------------------------

def hex_fix(word) -> str:
    """Remove one leading '0x' from a hex string.

    Anything that is not a str becomes an empty string.
    """
    if not isinstance(word, str):
        return ''
    return word[2:] if word.startswith('0x') else word


def string_to_hex(s: str, utf8=False) -> str:
    """Convert a string to its hexadecimal representation without '0x'.

    By default each UTF-16 code unit is cut down to its low byte, which is what the
    gateway has always received. With ``utf8=True`` the UTF-8 bytes are encoded.
    """
    if utf8:
        return s.encode('utf-8').hex()
    return s.encode('utf-16-le', errors='surrogatepass')[::2].hex()


def hex_to_string(hex_str: str, utf8=False) -> str:
    """Convert a hexadecimal string back to a string.

    Each pair is read like a leading-digits parse: "ag" gives 0x0a, a pair with no
    leading hex digit ("g1") is skipped, and byte 0 is dropped.
    """
    hex_str = hex_fix(hex_str)
    codes = bytearray()
    for i in range(0, len(hex_str), 2):
        pair = hex_str[i:i + 2].lstrip()
        while pair and not _HEX_DIGITS.issuperset(pair):
            pair = pair[:-1]
        if not pair:
            continue
        code = int(pair, 16)
        if code != 0:
            codes.append(code)

    if utf8:
        return codes.decode('utf-8', errors='replace')
    return codes.decode('latin-1')


# ------------------- time utils ----------------------------

def get_formatted_timestamp(now: datetime.datetime = None) -> str:
    """Timestamp in the gateway format YYYY:MM:DD-hh:mm:ss, UTC."""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(datetime.timezone.utc)
    return now.strftime("%Y:%m:%d-%H:%M:%S")
