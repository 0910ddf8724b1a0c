"""Millisecond clock and a busy-waiting sleep."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0005


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep until at least ``ms`` milliseconds have passed, polling in short steps."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(_POLL_SECONDS)