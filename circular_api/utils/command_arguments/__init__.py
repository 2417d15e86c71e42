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

from enum import IntEnum


class Type(IntEnum):
    Command = 0
    NagUrl = 1
    ConfigurationFilePath = 2
    Develop = 3
    Blockchain = 4
    Address = 5
    PrivateKey = 6
    To = 7
    TxType = 8
    Payload = 9
    TxId = 10
    Timeout = 11
    Interval = 12
    PublicKey = 13


class Command(IntEnum):
    blockchains = 0
    wallet = 1
    nonce = 2
    send = 3
    outcome = 4
    register = 5
    keygen = 6


class Attribute:
    def __init__(self, *names, **kwargs):
        self.names = names
        self.kwargs = kwargs


attributes = {
    Type.Command:
        Attribute("command", type=str, choices=[command.name for command in Command],
                  help="gateway command to run [" + "|".join(command.name for command in Command) + "]"),

    Type.NagUrl:
        Attribute("-u", "--nag_url",
                  help="base url of the network access gateway"),

    Type.ConfigurationFilePath:
        Attribute("-o", "--configure_file_path",
                  help="json configure file path"),

    Type.Develop:
        Attribute("-d", "--develop", action="store_true",
                  help="develop mode(log level, etc)"),

    # options for wallets and transactions
    Type.Blockchain:
        Attribute("-b", "--blockchain",
                  help="blockchain address (hex)"),

    Type.Address:
        Attribute("-a", "--address",
                  help="wallet address, the sender for 'send' (hex)"),

    Type.PrivateKey:
        Attribute("-k", "--private_key",
                  help="private key of the sender (hex)"),

    Type.To:
        Attribute("-t", "--to",
                  help="recipient wallet address (hex)"),

    Type.TxType:
        Attribute("--tx_type", default="C_TYPE_COIN",
                  help="transaction type"),

    Type.Payload:
        Attribute("-p", "--payload", default="{}",
                  help="transaction payload as JSON"),

    Type.TxId:
        Attribute("-i", "--tx_id",
                  help="transaction id (hex)"),

    Type.Timeout:
        Attribute("--timeout", type=float, default=60,
                  help="seconds to wait for the transaction outcome"),

    Type.Interval:
        Attribute("--interval", type=float, default=None,
                  help="seconds between transaction outcome checks"),

    Type.PublicKey:
        Attribute("--public_key",
                  help="public key of the wallet to register (hex)")
}
