"""
runner.py - Background Event Loop
==================================
Flask handles each request on a worker thread, but a SortingSession must
only ever be touched from the single asyncio loop that runs its
playbacks.  LoopRunner owns that loop on a daemon thread and marshals
calls onto it.

    runner = LoopRunner()
    runner.submit(session.start("merge"))     # fire and forget
    runner.call(session.toggle_pause)         # run on the loop, wait for result
"""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional

logger = logging.getLogger(__name__)


class LoopRunner:

    def __init__(self, name: str = "sortviz-loop"):
        self._name   = name
        self._loop:   Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread]          = None
        self._lock   = threading.Lock()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The loop, started on first use."""
        with self._lock:
            if self._loop is None:
                self._loop   = asyncio.new_event_loop()
                self._thread = threading.Thread(
                    target=self._loop.run_forever, name=self._name, daemon=True
                )
                self._thread.start()
                logger.debug("Started event loop thread %s", self._name)
            return self._loop

    def submit(self, coro: Coroutine) -> Future:
        """Schedule `coro` on the loop.  Failures are logged, not lost."""
        future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        future.add_done_callback(self._log_failure)
        return future

    def call(self, fn: Callable[..., Any], *args, timeout: float = 5.0) -> Any:
        """Run a plain function on the loop thread and return its result."""
        async def _invoke():
            return fn(*args)

        return asyncio.run_coroutine_threadsafe(_invoke(), self.loop).result(timeout)

    def stop(self) -> None:
        with self._lock:
            if self._loop is None:
                return
            self._loop.call_soon_threadsafe(self._loop.stop)
            if self._thread is not None:
                self._thread.join(timeout=5.0)
            self._loop.close()
            self._loop   = None
            self._thread = None

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("Background operation failed", exc_info=exc)
