"""Callback Adapter — exposes async handlers in (token, callback) style.

Invariants:
    - callback(error, value) fires exactly once per call: error XOR value
    - The adapted call never raises; it schedules a Task and returns it
      (or, with no running loop, reports the RuntimeError through the callback)
    - Cancellation of the returned Task is the caller's business: the callback
      is not invoked for a cancelled Task

Design Decisions:
    - Handlers themselves are coroutine functions (single-resolution awaitables);
      this adapter exists for dispatch layers built around completion callbacks
    - An exception raised by the callback itself propagates into the returned Task,
      it is never fed back into the callback
"""

import asyncio
from typing import Any, Awaitable, Callable

Callback = Callable[[BaseException | None, Any], None]


def with_callback(
    handler: Callable[[str], Awaitable[Any]],
) -> Callable[[str, Callback], asyncio.Task | None]:
    """Wrap an async handler so it reports through a completion callback.

    Outside a running event loop nothing is scheduled: the RuntimeError
    goes to the callback and None is returned.
    """

    async def _run(token: str, callback: Callback) -> None:
        try:
            result = await handler(token)
        except Exception as exc:
            callback(exc, None)
            return
        callback(None, result)

    def callback_handler(token: str, callback: Callback) -> asyncio.Task | None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            callback(exc, None)
            return None
        return loop.create_task(_run(token, callback))

    return callback_handler

