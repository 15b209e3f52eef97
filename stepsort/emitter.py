"""Pacing between observable steps, with cooperative cancellation."""

import asyncio

from .errors import SortCancelled


class CancelToken:
    """One-shot flag checked at every pacing point of a run."""

    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self):
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self):
        await self._event.wait()


class StepEmitter:
    def __init__(self, token: CancelToken = None):
        self.token = token if token is not None else CancelToken()

    async def pace(self, duration_ms: float):
        """
        Suspend the current task for ``duration_ms`` without blocking the loop.

        Wakes up early and raises ``SortCancelled`` if the token fires while
        waiting. A zero duration still yields once to the event loop.
        """
        if self.token.is_cancelled():
            raise SortCancelled()
        if duration_ms <= 0:
            await asyncio.sleep(0)
        else:
            try:
                await asyncio.wait_for(self.token.wait(), duration_ms / 1000.0)
            except asyncio.TimeoutError:
                pass
        if self.token.is_cancelled():
            raise SortCancelled()
