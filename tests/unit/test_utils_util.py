"""Test hex and timestamp utils"""

import datetime

import pytest
from freezegun import freeze_time

from circular_api import utils


class TestHexFix:
    @pytest.mark.parametrize("value, expected", [
        ("0xAB", "AB"),
        ("AB", "AB"),
        ("0x", ""),
        ("", ""),
        ("0x0xAB", "0xAB"),
        ("ab0x", "ab0x"),
    ])
    def test_strips_one_leading_prefix(self, value, expected):
        assert utils.hex_fix(value) == expected

    @pytest.mark.parametrize("value", [123, None, b"0xab", ["0xab"], 1.5])
    def test_non_string_returns_empty(self, value):
        assert utils.hex_fix(value) == ""

    @pytest.mark.parametrize("value", ["0xAB", "AB", "", "deadbeef", "0x0x12"])
    def test_idempotent_after_first_pass(self, value):
        once = utils.hex_fix(value)
        if not once.startswith("0x"):
            assert utils.hex_fix(once) == once


class TestStringHex:
    def test_string_to_hex_ascii(self):
        assert utils.string_to_hex('{"a":1}') == "7b2261223a317d"
        assert utils.string_to_hex("") == ""

    def test_string_to_hex_pads_low_bytes(self):
        assert utils.string_to_hex("\n") == "0a"

    def test_string_to_hex_truncates_to_low_byte(self):
        # U+20AC (euro sign) keeps only 0xac
        assert utils.string_to_hex("€") == "ac"

    def test_string_to_hex_utf8(self):
        assert utils.string_to_hex("€", utf8=True) == "e282ac"

    @pytest.mark.parametrize("text", [
        "hello",
        '{"Action":"CP_REGISTERWALLET","PublicKey":"04aabb"}',
        "Spaces and ~!@#$%^&*() symbols",
    ])
    def test_round_trip_ascii(self, text):
        assert utils.hex_to_string(utils.string_to_hex(text)) == text

    def test_hex_to_string_accepts_prefix(self):
        assert utils.hex_to_string("0x68656c6c6f") == "hello"

    def test_hex_to_string_drops_nul_bytes(self):
        assert utils.hex_to_string("6100620063") == "abc"

    def test_hex_to_string_skips_invalid_pairs(self):
        assert utils.hex_to_string("61zz62") == "ab"

    def test_hex_to_string_reads_leading_digit_of_pair(self):
        # "ag" reads as 0x0a, "g1" has no leading digit
        assert utils.hex_to_string("61ag62") == "a\nb"
        assert utils.hex_to_string("61g162") == "ab"

    def test_hex_to_string_utf8(self):
        assert utils.hex_to_string("e282ac", utf8=True) == "€"


class TestTimestamp:
    @freeze_time("2024-06-10 12:30:45")
    def test_formatted_timestamp_now(self):
        assert utils.get_formatted_timestamp() == "2024:06:10-12:30:45"

    @freeze_time("2023-01-02 03:04:05")
    def test_formatted_timestamp_zero_pads(self):
        assert utils.get_formatted_timestamp() == "2023:01:02-03:04:05"

    def test_formatted_timestamp_converts_to_utc(self):
        kst = datetime.timezone(datetime.timedelta(hours=9))
        now = datetime.datetime(2024, 6, 10, 21, 30, 45, tzinfo=kst)
        assert utils.get_formatted_timestamp(now) == "2024:06:10-12:30:45"
