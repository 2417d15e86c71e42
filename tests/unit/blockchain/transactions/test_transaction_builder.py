"""Test transaction id computation and building"""

import pytest

from circular_api.blockchain.transactions import (Transaction, TransactionBuilder, TransactionSerializer, build_id,
                                                   encode_payload)
from circular_api.crypto.signature import Signer, verify_signature
from tests.unit.test_util import BLOCKCHAIN

TIMESTAMP = "2024:06:10-12:30:45"
PAYLOAD_HEX = "7b2261223a317d"  # {"a":1}
EXPECTED_ID = "939d7d2a1fd37cc2ba840a99d39875833f4ace10181e963d235505168a8cc4da"


class TestBuildId:
    def test_known_vector(self):
        tx_id = build_id(BLOCKCHAIN, "0xabc123", "def456", PAYLOAD_HEX, 5, TIMESTAMP)
        assert tx_id == EXPECTED_ID

    def test_prefix_does_not_change_id(self):
        with_prefix = build_id(BLOCKCHAIN, "0xabc123", "0xdef456", "0x" + PAYLOAD_HEX, 5, TIMESTAMP)
        without_prefix = build_id(BLOCKCHAIN[2:], "abc123", "def456", PAYLOAD_HEX, 5, TIMESTAMP)
        assert with_prefix == without_prefix == EXPECTED_ID

    def test_deterministic(self):
        ids = {build_id(BLOCKCHAIN, "abc123", "def456", PAYLOAD_HEX, 5, TIMESTAMP) for _ in range(5)}
        assert ids == {EXPECTED_ID}

    @pytest.mark.parametrize("changed", [
        dict(nonce=6),
        dict(timestamp="2024:06:10-12:30:46"),
        dict(to_address="def457"),
        dict(payload=PAYLOAD_HEX + "00"),
    ])
    def test_every_field_counts(self, changed):
        fields = dict(blockchain=BLOCKCHAIN, from_address="abc123", to_address="def456",
                      payload=PAYLOAD_HEX, nonce=5, timestamp=TIMESTAMP)
        fields.update(changed)
        assert build_id(**fields) != EXPECTED_ID


class TestEncodePayload:
    def test_compact_json(self):
        assert encode_payload({"a": 1}) == PAYLOAD_HEX

    def test_string_payload_is_json_quoted(self):
        # '"hi"'
        assert encode_payload("hi") == "226869" + "22"


class TestTransactionBuilder:
    @pytest.fixture
    def tb(self):
        tb = TransactionBuilder()
        tb.blockchain = BLOCKCHAIN
        tb.from_address = "0xabc123"
        tb.to_address = "def456"
        tb.type = "C_TYPE_COIN"
        tb.payload = PAYLOAD_HEX
        tb.nonce = 5
        tb.fixed_timestamp = TIMESTAMP
        return tb

    def test_build_unsigned(self, tb: TransactionBuilder):
        tx = tb.build()

        assert isinstance(tx, Transaction)
        assert tx.id == EXPECTED_ID
        assert tx.from_address == "abc123"
        assert tx.blockchain == BLOCKCHAIN[2:]
        assert not tx.is_signed()

    def test_build_signed_signs_id(self, tb: TransactionBuilder):
        signer = Signer.new()

        tx = tb.build(signer)

        assert tx.is_signed()
        assert verify_signature(signer.public_key_hex, tx.id, tx.signature)

    def test_transaction_is_immutable(self, tb: TransactionBuilder):
        tx = tb.build()

        with pytest.raises(AttributeError):
            tx.nonce = 6
        assert tx.with_signature("30").signature == "30"
        assert tx.signature == ""

    def test_missing_field(self, tb: TransactionBuilder):
        tb.nonce = None

        with pytest.raises(RuntimeError):
            tb.build_hash()

    def test_timestamp_stamped_when_not_fixed(self, tb: TransactionBuilder, mocker):
        tb.fixed_timestamp = None
        mocker.patch("circular_api.utils.get_formatted_timestamp", return_value=TIMESTAMP)

        assert tb.build().id == EXPECTED_ID


class TestTransactionSerializer:
    def test_to_params(self):
        tx = Transaction(id=EXPECTED_ID, from_address="0xabc123", to_address="def456", timestamp=TIMESTAMP,
                         type="C_TYPE_COIN", payload=PAYLOAD_HEX, nonce=5, signature="0x3006", blockchain=BLOCKCHAIN)

        params = TransactionSerializer().to_params(tx)

        assert params.From == "abc123"
        assert params.Nonce == "5"
        assert params.Signature == "3006"
        assert params.Blockchain == BLOCKCHAIN[2:]

    def test_from_gateway_record(self):
        record = {"ID": EXPECTED_ID, "From": "abc123", "To": "def456", "Timestamp": TIMESTAMP,
                  "Type": "C_TYPE_COIN", "Payload": PAYLOAD_HEX, "Nonce": "5", "Blockchain": BLOCKCHAIN[2:],
                  "Status": "Executed"}

        tx = TransactionSerializer().from_(record)

        assert tx.nonce == 5
        assert not tx.is_signed()
        assert build_id(tx.blockchain, tx.from_address, tx.to_address, tx.payload, tx.nonce, tx.timestamp) == tx.id
