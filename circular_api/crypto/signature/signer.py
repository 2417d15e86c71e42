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
""" A class for signature signer of wallets"""

from typing import Union

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, utils as ec_utils

from circular_api import utils
from circular_api.crypto.hashing import sha256_digest


def _public_key_hex(public_key: ec.EllipticCurvePublicKey) -> str:
    return public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint
    ).hex()


class Signer:
    """secp256k1 ECDSA signer.

    Signatures are DER encoded and taken over the SHA-256 digest of the message,
    so ``sign(tx_id)`` signs ``sha256(tx_id)``. The nonce is derived from the key and
    the digest (RFC 6979), so equal inputs give equal signatures.
    """

    def __init__(self, private_key: ec.EllipticCurvePrivateKey):
        self.private_key = private_key

    @classmethod
    def new(cls) -> 'Signer':
        return cls(ec.generate_private_key(ec.SECP256K1(), default_backend()))

    @classmethod
    def from_prikey_hex(cls, prikey_hex: str) -> 'Signer':
        prikey_hex = utils.hex_fix(prikey_hex)
        try:
            private_value = int(prikey_hex, 16)
            private_key = ec.derive_private_key(private_value, ec.SECP256K1(), default_backend())
        except ValueError as e:
            raise ValueError(f"Invalid private key: {e}") from e
        return cls(private_key)

    @classmethod
    def from_prikey(cls, prikey: bytes) -> 'Signer':
        return cls.from_prikey_hex(prikey.hex())

    @property
    def private_key_hex(self) -> str:
        return f"{self.private_key.private_numbers().private_value:064x}"

    @property
    def public_key_hex(self) -> str:
        return _public_key_hex(self.private_key.public_key())

    def sign(self, message: Union[str, bytes]) -> str:
        digest = sha256_digest(message)
        signature = self.private_key.sign(
            digest, ec.ECDSA(ec_utils.Prehashed(hashes.SHA256()), deterministic_signing=True))
        utils.logger.spam(f"signed digest({digest.hex()})")
        return signature.hex()


def sign_message(message: Union[str, bytes], prikey_hex: str) -> str:
    return Signer.from_prikey_hex(prikey_hex).sign(message)


def get_public_key(prikey_hex: str) -> str:
    return Signer.from_prikey_hex(prikey_hex).public_key_hex