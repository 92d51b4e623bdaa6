"""Dispatchers that run callbacks on the context owning published state."""

import asyncio
import logging
import queue
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ImmediateDispatcher:
    """Runs callbacks inline on the calling thread."""

    def dispatch(self, callback: Callable[[], None]) -> None:
        callback()


class QueueDispatcher:
    """Queues callbacks until the owning thread drains them.

    The thread that renders the UI calls `drain()` from its loop; worker
    threads only ever call `dispatch()`.
    """

    def __init__(self):
        self.pending: "queue.Queue[Callable[[], None]]" = queue.Queue()

    def dispatch(self, callback: Callable[[], None]) -> None:
        self.pending.put(callback)

    def drain(self, timeout: Optional[float] = None) -> int:
        """Run queued callbacks on the calling thread.

        Args:
            timeout: Seconds to wait for the first callback; None returns immediately
                when the queue is empty

        Returns:
            Number of callbacks executed
        """
        executed = 0
        try:
            if timeout is None:
                callback = self.pending.get_nowait()
            else:
                callback = self.pending.get(timeout=timeout)
        except queue.Empty:
            return 0

        while True:
            try:
                callback()
            except Exception as e:
                logger.error(f"Error in dispatched callback: {e}", exc_info=True)
            finally:
                self.pending.task_done()
            executed += 1
            try:
                callback = self.pending.get_nowait()
            except queue.Empty:
                break
        return executed


class EventLoopDispatcher:
    """Schedules callbacks on an asyncio event loop from any thread."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.loop = loop

    def dispatch(self, callback: Callable[[], None]) -> None:
        self.loop.call_soon_threadsafe(callback)
