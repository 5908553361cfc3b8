"""
frame_scheduler.py
------------------
One-shot per-refresh callbacks.

A callback passed to request_frame() runs once on the next tick; to keep
animating it must request itself again. Callbacks requested during a tick
wait for the following one.
"""

import time


class FrameScheduler:
    def __init__(self):
        self._queue = []

    def request_frame(self, callback):
        self._queue.append(callback)

    def has_pending(self) -> bool:
        return bool(self._queue)

    def run_pending(self, timestamp=None) -> int:
        """
        Run every callback queued before this call.

        Args:
            timestamp: Milliseconds passed to each callback (defaults to now)

        Returns:
            int: Number of callbacks run
        """
        if timestamp is None:
            timestamp = time.perf_counter() * 1000.0

        callbacks, self._queue = self._queue, []
        for callback in callbacks:
            callback(timestamp)
        return len(callbacks)
