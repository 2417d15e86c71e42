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
"""Polls the gateway until a submitted transaction reaches a terminal status."""

import asyncio
import logging
import math
from enum import Enum
from typing import Optional

from circular_api import utils, configure as conf
from circular_api.baseservice.gateway_client import GatewayClient, GatewayMethod
from circular_api.baseservice.timer_service import Timer
from circular_api.blockchain.exceptions import TransactionOutcomeTimeoutError


class PollStatus(Enum):
    waiting = 0
    polling = 1
    confirmed = 2
    timed_out = 3
    failed = 4
    cancelled = 5

    def is_terminal(self) -> bool:
        return self not in (PollStatus.waiting, PollStatus.polling)


class FinalityPoller:
    """Waits for the outcome of one transaction.

    Checks run on a fixed grid, tick ``k`` at ``start + k * interval_sec``. Before each
    query the tick's elapsed time is compared with ``timeout_sec``, and a poll whose
    next tick would fall past ``timeout_sec`` ends right after its last answer.
    A transport or parse error ends the poll at once; only "pending" and "not found"
    answers are polled again.

    A poller is used once::

        poller = FinalityPoller(gateway, blockchain, tx_id, timeout_sec=60)
        poller.start()
        ...
        outcome = await poller.wait()    # or poller.cancel()
    """

    def __init__(self, gateway: GatewayClient, blockchain: str, tx_id: str,
                 timeout_sec: float, interval_sec: float = None):
        self._gateway = gateway
        self.blockchain = utils.hex_fix(blockchain)
        self.tx_id = utils.hex_fix(tx_id)
        self.timeout_sec = timeout_sec
        self.interval_sec = conf.POLL_INTERVAL_SEC if interval_sec is None else interval_sec
        if self.interval_sec <= 0:
            raise ValueError(f"interval_sec must be positive: {self.interval_sec}")

        self.status = PollStatus.waiting
        self.start_time: Optional[float] = None

        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._future: Optional[asyncio.Future] = None
        self._timer: Optional[Timer] = None
        self._tick = 0

    @property
    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def start(self) -> asyncio.Future:
        if self._future is not None:
            raise RuntimeError(f"poller for tx({self.tx_id}) already started")

        self._loop = asyncio.get_running_loop()
        self._future = self._loop.create_future()
        self._future.add_done_callback(self._on_future_done)
        self.start_time = self._loop.time()
        logging.debug(f"start polling tx({self.tx_id}) interval({self.interval_sec}) timeout({self.timeout_sec})")

        self._schedule(1)
        return self._future

    async def wait(self):
        if self._future is None:
            self.start()
        return await self._future

    def cancel(self) -> bool:
        """Stop polling. Awaiting the poller raises asyncio.CancelledError afterwards."""
        if self._future is None or self._future.done():
            return False

        self._future.cancel()
        self._stop_cancelled()
        return True

    def _on_future_done(self, future: asyncio.Future):
        # also cancelled when the task awaiting wait() is cancelled, e.g. by asyncio.wait_for
        if future.cancelled():
            self._stop_cancelled()

    def _stop_cancelled(self):
        if self.status is PollStatus.cancelled:
            return

        self.status = PollStatus.cancelled
        self._timer.off()
        logging.info(f"polling tx({self.tx_id}) cancelled")

    def elapsed(self) -> float:
        """Elapsed time of the current tick."""
        nominal = self._tick * self.interval_sec
        actual = self._loop.time() - self.start_time
        return actual if actual - nominal >= self.interval_sec else nominal

    def _schedule(self, tick: int):
        self._tick = tick
        self._timer = Timer(
            target=f"poll tx({self.tx_id}) tick({tick})",
            when=self.start_time + tick * self.interval_sec,
            callback=self._check
        )
        self._timer.on(self._loop)

    async def _check(self):
        if self._future.done():
            return

        elapsed = self.elapsed()
        utils.logger.spam(f"checking tx({self.tx_id}) elapsed({elapsed:.3f}) timeout({self.timeout_sec})")
        if elapsed > self.timeout_sec:
            self._settle(PollStatus.timed_out,
                         error=TransactionOutcomeTimeoutError(self.tx_id, self.timeout_sec, elapsed))
            return

        self.status = PollStatus.polling
        params = GatewayMethod.GetTransactionbyID.value.params(
            Blockchain=self.blockchain, ID=self.tx_id, Start=conf.POLL_SEARCH_START, End=conf.POLL_SEARCH_END)
        try:
            data = await self._gateway.call_async(GatewayMethod.GetTransactionbyID, params)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._settle(PollStatus.failed, error=e)
            return

        if self.is_final(data):
            self._settle(PollStatus.confirmed, result=data["Response"])
            return

        late_tick = math.ceil((self._loop.time() - self.start_time) / self.interval_sec)
        next_tick = max(self._tick + 1, late_tick)
        if next_tick * self.interval_sec > self.timeout_sec:
            elapsed = self._loop.time() - self.start_time
            self._settle(PollStatus.timed_out,
                         error=TransactionOutcomeTimeoutError(self.tx_id, self.timeout_sec, elapsed))
            return

        utils.logger.spam(f"tx({self.tx_id}) not yet confirmed or not found, polling again")
        self._schedule(next_tick)

    @staticmethod
    def is_final(data: dict) -> bool:
        if not isinstance(data, dict) or data.get("Result") != conf.RESULT_SUCCESS:
            return False

        response = data.get("Response")
        if response == conf.TX_NOT_FOUND:
            return False

        status = response.get("Status") if isinstance(response, dict) else None
        return status != conf.TX_STATUS_PENDING

    def _settle(self, status: PollStatus, result=None, error: Exception = None):
        if self._future.done():
            return

        self.status = status
        if error is not None:
            logging.warning(f"polling tx({self.tx_id}) ended {status.name}: {type(error).__name__} {error}")
            self._future.set_exception(error)
        else:
            logging.info(f"tx({self.tx_id}) {status.name}")
            self._future.set_result(result)
