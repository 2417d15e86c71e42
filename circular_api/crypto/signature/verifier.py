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
""" A class for signature verifier of wallets"""

import logging
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, utils as ec_utils

from circular_api import utils
from circular_api.crypto.hashing import sha256_digest


class SignatureVerifier:
    def __init__(self, public_key: ec.EllipticCurvePublicKey):
        self.public_key = public_key

    @classmethod
    def from_pubkey_hex(cls, pubkey_hex: str) -> 'SignatureVerifier':
        try:
            pubkey = bytes.fromhex(utils.hex_fix(pubkey_hex))
            public_key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), pubkey)
        except ValueError as e:
            raise ValueError(f"Invalid public key: {e}") from e
        return cls(public_key)

    @classmethod
    def from_signer(cls, signer) -> 'SignatureVerifier':
        return cls(signer.private_key.public_key())

    def verify(self, message: Union[str, bytes], signature_hex: str) -> bool:
        digest = sha256_digest(message)
        try:
            signature = bytes.fromhex(utils.hex_fix(signature_hex))
            self.public_key.verify(signature, digest, ec.ECDSA(ec_utils.Prehashed(hashes.SHA256())))
        except (InvalidSignature, ValueError) as e:
            logging.debug(f"Fail to verify the signature : ({digest.hex()})/({signature_hex}) {type(e).__name__}")
            return False
        return True


def verify_signature(pubkey_hex: str, message: Union[str, bytes], signature_hex: str) -> bool:
    return SignatureVerifier.from_pubkey_hex(pubkey_hex).verify(message, signature_hex)
