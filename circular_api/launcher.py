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

import argparse
import asyncio
import json
import logging

from circular_api import configure as conf
from circular_api.client import CircularClient
from circular_api.crypto.signature import Signer
from circular_api.utils import loggers, command_arguments
from circular_api.utils.command_arguments import Command


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="circular")
    for cmd_arg_type in command_arguments.Type:
        cmd_arg_attr = command_arguments.attributes[cmd_arg_type]
        parser.add_argument(*cmd_arg_attr.names, **cmd_arg_attr.kwargs)
    return parser


def create_config(args) -> conf.GatewayConfig:
    if args.configure_file_path:
        config = conf.GatewayConfig.from_json(args.configure_file_path)
    else:
        config = conf.GatewayConfig()

    if args.nag_url:
        config.nag_url = args.nag_url
    return config


def _require(args, *names):
    missing = [name for name in names if not getattr(args, name)]
    if missing:
        raise SystemExit(f"'{args.command}' needs --{', --'.join(missing)}")


async def run(client: CircularClient, args):
    command = Command[args.command]

    if command is Command.blockchains:
        return await client.get_blockchains()

    if command is Command.wallet:
        _require(args, "blockchain", "address")
        return await client.get_wallet(args.blockchain, args.address)

    if command is Command.nonce:
        _require(args, "blockchain", "address")
        return await client.get_wallet_nonce(args.blockchain, args.address)

    if command is Command.send:
        _require(args, "blockchain", "address", "private_key", "to")
        return await client.send_transaction_with_private_key(
            args.address, args.private_key, args.to, args.tx_type, json.loads(args.payload), args.blockchain)

    if command is Command.outcome:
        _require(args, "blockchain", "tx_id")
        return await client.get_transaction_outcome(args.blockchain, args.tx_id, args.timeout, args.interval)

    if command is Command.register:
        _require(args, "blockchain", "public_key")
        return {"ID": await client.register_wallet(args.blockchain, args.public_key)}

    if command is Command.keygen:
        signer = Signer.new()
        return {"PrivateKey": signer.private_key_hex, "PublicKey": signer.public_key_hex}

    raise NotImplementedError(command)


def main(argv):
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.develop:
        loggers.set_preset_type(loggers.PresetType.develop, client_name="cli")
    else:
        loggers.set_preset_type(loggers.PresetType.production, client_name="cli")
    loggers.update_preset()

    client = CircularClient(create_config(args))
    logging.debug(f"run command({args.command}) with {client.config}")

    result = asyncio.run(run(client, args))
    print(json.dumps(result, indent=2))
