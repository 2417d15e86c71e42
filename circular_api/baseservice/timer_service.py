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
"""circular_api timer service."""
import asyncio
import logging
from typing import Awaitable, Callable, Optional, Union

from circular_api import utils as util


class Timer:
    """One-shot timer on an asyncio event loop.

    The callback runs at the loop time ``when``. A coroutine callback is wrapped
    in a task, and ``off`` cancels the pending timer or that task.
    """

    def __init__(self, **kwargs):
        """initial function

        :param target:      target of timer
        :param when:        loop time at which the callback runs
        :param callback:    callback function (plain or coroutine function)
        :param kwargs:      parameters for callback function
        """
        self.target = kwargs.get("target")
        self.when: float = kwargs.get("when")
        self.__callback: Union[Callable, Awaitable] = kwargs.get("callback", None)
        self.__kwargs = kwargs.get("callback_kwargs") or {}

        self.__loop: Optional[asyncio.AbstractEventLoop] = None
        self.__handle: Optional[asyncio.TimerHandle] = None
        self.__task: Optional[asyncio.Task] = None

    @property
    def is_on(self) -> bool:
        if self.__handle is not None and not self.__handle.cancelled():
            return True
        return self.__task is not None and not self.__task.done()

    def remain_time(self) -> float:
        if self.__loop is None:
            return 0
        remain = self.when - self.__loop.time()
        return remain if remain > 0 else 0

    def on(self, loop: asyncio.AbstractEventLoop = None):
        self.__loop = loop or asyncio.get_running_loop()
        self.__handle = self.__loop.call_at(self.when, self.__fire)
        util.logger.spam(f'TIMER IS ON ({self.target}) remain({self.remain_time():.3f})')

    def off(self):
        """turn off timer, cancelling the callback task if it is running"""
        if self.__handle is not None:
            self.__handle.cancel()
        if self.__task is not None and not self.__task.done():
            self.__task.cancel()
        logging.debug(f'timer({self.target}) is turned off')

    def __fire(self):
        self.__handle = None
        if asyncio.iscoroutinefunction(self.__callback):
            self.__task = self.__loop.create_task(self.__callback(**self.__kwargs))
        else:
            self.__callback(**self.__kwargs)

    def __repr__(self):
        return f"Timer({self.target}, {self.__callback}, {self.remain_time()})"
