"""Test timer service"""

import asyncio

import pytest

from circular_api.baseservice import Timer

DELAY = 0.05


@pytest.mark.asyncio
class TestTimer:
    async def test_timer_on_triggers_blocking_func(self, mocker):
        loop = asyncio.get_running_loop()
        blocking_callback = mocker.MagicMock()

        timer = Timer(target="blocking", when=loop.time() + DELAY,
                      callback=blocking_callback, callback_kwargs={"tx": "cd"})
        timer.on(loop)
        assert timer.is_on
        assert not blocking_callback.called

        await asyncio.sleep(DELAY * 2)
        blocking_callback.assert_called_once_with(tx="cd")
        assert not timer.is_on

    async def test_timer_on_triggers_coroutine_func(self, mocker):
        loop = asyncio.get_running_loop()
        coro_call_checker = mocker.MagicMock()

        async def coro_callback(**kwargs):
            coro_call_checker(**kwargs)

        timer = Timer(when=loop.time() + DELAY, callback=coro_callback, callback_kwargs={"tick": 1})
        timer.on(loop)

        await asyncio.sleep(DELAY * 2)
        coro_call_checker.assert_called_once_with(tick=1)

    async def test_timer_off_before_fire(self, mocker):
        loop = asyncio.get_running_loop()
        blocking_callback = mocker.MagicMock()

        timer = Timer(when=loop.time() + DELAY, callback=blocking_callback)
        timer.on(loop)
        timer.off()
        assert not timer.is_on

        await asyncio.sleep(DELAY * 2)
        assert not blocking_callback.called

    async def test_timer_off_cancels_running_coroutine(self, mocker):
        loop = asyncio.get_running_loop()
        finished = mocker.MagicMock()
        started = asyncio.Event()

        async def coro_callback():
            started.set()
            await asyncio.sleep(10)
            finished()

        timer = Timer(when=loop.time(), callback=coro_callback)
        timer.on(loop)
        await asyncio.wait_for(started.wait(), timeout=1)
        assert timer.is_on

        timer.off()
        await asyncio.sleep(0)
        assert not timer.is_on
        assert not finished.called

    async def test_remain_time(self):
        loop = asyncio.get_running_loop()
        timer = Timer(when=loop.time() + 10, callback=lambda: None)
        assert timer.remain_time() == 0

        timer.on(loop)
        assert 0 < timer.remain_time() <= 10
        timer.off()

    async def test_remain_time_returns_zero_if_passed(self):
        loop = asyncio.get_running_loop()
        timer = Timer(when=loop.time() - 1, callback=lambda: None)
        timer.on(loop)

        assert timer.remain_time() == 0
        await asyncio.sleep(0)
