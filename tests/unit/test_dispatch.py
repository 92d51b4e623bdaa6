"""Unit tests for the UI-refresh dispatchers."""

import asyncio
import threading

import pytest

from sttsample.transcription.dispatch import EventLoopDispatcher, ImmediateDispatcher, QueueDispatcher


@pytest.mark.unit
class TestDispatchers:

    def test_immediate_dispatcher_runs_inline(self):
        calls = []
        ImmediateDispatcher().dispatch(lambda: calls.append(threading.current_thread()))
        assert calls == [threading.current_thread()]

    def test_queue_dispatcher_runs_on_draining_thread(self):
        dispatcher = QueueDispatcher()
        calls = []

        worker = threading.Thread(
            target=lambda: dispatcher.dispatch(lambda: calls.append(threading.current_thread()))
        )
        worker.start()
        worker.join()

        assert calls == []
        assert dispatcher.drain(timeout=1.0) == 1
        assert calls == [threading.current_thread()]

    def test_queue_dispatcher_drain_empty(self):
        assert QueueDispatcher().drain() == 0
        assert QueueDispatcher().drain(timeout=0.01) == 0

    def test_queue_dispatcher_keeps_draining_after_error(self):
        dispatcher = QueueDispatcher()
        calls = []

        def broken():
            raise RuntimeError("boom")

        dispatcher.dispatch(broken)
        dispatcher.dispatch(lambda: calls.append("ok"))

        assert dispatcher.drain() == 2
        assert calls == ["ok"]

    def test_event_loop_dispatcher(self):
        async def scenario():
            loop = asyncio.get_running_loop()
            dispatcher = EventLoopDispatcher(loop)
            done = loop.create_future()

            def from_worker():
                dispatcher.dispatch(lambda: done.set_result(threading.current_thread()))

            threading.Thread(target=from_worker).start()
            return await asyncio.wait_for(done, 1.0)

        assert asyncio.run(scenario()) is threading.current_thread()
