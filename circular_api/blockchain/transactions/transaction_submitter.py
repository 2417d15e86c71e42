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
"""Builds, signs and submits transactions."""

import json
import logging
from typing import Any

from circular_api import utils, configure as conf
from circular_api.baseservice.gateway_client import GatewayClient, GatewayMethod
from circular_api.blockchain.exceptions import NetworkError
from circular_api.blockchain.transactions.nonce_resolver import NonceResolver
from circular_api.blockchain.transactions.transaction import Transaction
from circular_api.blockchain.transactions.transaction_builder import TransactionBuilder, encode_payload
from circular_api.blockchain.transactions.transaction_serializer import TransactionSerializer
from circular_api.crypto.hashing import sha256_hex
from circular_api.crypto.signature import Signer


class TransactionSubmitter:
    def __init__(self, gateway: GatewayClient, nonce_resolver: NonceResolver = None):
        self._gateway = gateway
        self._nonce_resolver = nonce_resolver or NonceResolver(gateway)
        self._serializer = TransactionSerializer()

    async def submit_raw(self, tx: Transaction) -> dict:
        """Send a built transaction.

        Never raises for transport trouble: an unreachable gateway gives
        ``{"success": False, "message": "Server unreachable", "error": ...}`` and a body
        that is not JSON gives ``{"status": <http status>, "message": <body>}``.
        """
        params = self._serializer.to_params(tx)
        try:
            status, text = await self._gateway.send_async(GatewayMethod.AddTransaction, params)
        except NetworkError as e:
            logging.error(f"submit tx({tx.id}) fail: {e}")
            return {"success": False, "message": "Server unreachable", "error": str(e)}

        try:
            response = json.loads(text)
        except ValueError:
            logging.warning(f"submit tx({tx.id}) answered with non-JSON body, status({status})")
            return {"status": status, "message": text}

        logging.info(f"submitted tx({tx.id}) result({response.get('Result') if isinstance(response, dict) else None})")
        return response

    async def submit(self, id: str, from_address: str, to_address: str, timestamp: str, type: str,
                     payload: str, nonce: int, signature: str, blockchain: str) -> dict:
        tx = Transaction(
            id=utils.hex_fix(id),
            from_address=utils.hex_fix(from_address),
            to_address=utils.hex_fix(to_address),
            timestamp=timestamp,
            type=type,
            payload=utils.hex_fix(payload),
            nonce=nonce,
            signature=utils.hex_fix(signature),
            blockchain=utils.hex_fix(blockchain)
        )
        return await self.submit_raw(tx)

    async def build_with_private_key(self, from_address: str, private_key: str, to_address: str, type: str,
                                     payload: Any, blockchain: str) -> Transaction:
        signer = Signer.from_prikey_hex(private_key)

        tb = TransactionBuilder()
        tb.blockchain = utils.hex_fix(blockchain)
        tb.from_address = utils.hex_fix(from_address)
        tb.to_address = utils.hex_fix(to_address)
        tb.type = type
        tb.payload = encode_payload(payload)
        # raises NonceNotFoundError before anything is signed
        tb.nonce = await self._nonce_resolver.resolve_next(tb.blockchain, tb.from_address)

        return tb.build(signer)

    async def submit_with_private_key(self, from_address: str, private_key: str, to_address: str, type: str,
                                      payload: Any, blockchain: str) -> dict:
        """Resolve the nonce, build and sign the transaction, then submit it.

        Each step runs once; a missing nonce raises NonceNotFoundError and nothing is
        retried. Concurrent calls for one wallet can pick the same nonce, see
        NonceResolver.
        """
        tx = await self.build_with_private_key(from_address, private_key, to_address, type, payload, blockchain)
        utils.logger.spam(f"built tx({tx.id}) nonce({tx.nonce}) timestamp({tx.timestamp})")
        return await self.submit_raw(tx)

    async def register_wallet(self, blockchain: str, public_key: str) -> str:
        """Register a wallet on a blockchain with an unsigned transaction.

        Sender and recipient are both the SHA-256 of the public key. The submission is
        awaited; its result is logged and the transaction id returned.
        """
        public_key = utils.hex_fix(public_key)
        address = sha256_hex(public_key)

        tb = TransactionBuilder()
        tb.blockchain = utils.hex_fix(blockchain)
        tb.from_address = address
        tb.to_address = address
        tb.type = conf.TX_TYPE_REGISTER_WALLET
        tb.payload = encode_payload({"Action": conf.TX_ACTION_REGISTER_WALLET, "PublicKey": public_key})
        tb.nonce = 0
        tx = tb.build()

        response = await self.submit_raw(tx)
        logging.info(f"register wallet({address}) tx({tx.id}) response({response})")
        return tx.id
