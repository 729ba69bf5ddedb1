"""单调时钟与线程挂起能力。"""

from __future__ import annotations

import threading
import time
from typing import Protocol


class Clock(Protocol):
    """栅栏依赖的时钟接口：读取单调时间并挂起当前线程。"""

    def now(self) -> float:
        """返回单调秒数。"""

    def sleep(self, seconds: float) -> None:
        """挂起当前线程 seconds 秒。"""

    def wait(self, event: threading.Event, timeout: float) -> bool:
        """等待 event 最多 timeout 秒；event 被置位时返回 True。"""


class SystemClock:
    """基于 time.monotonic / time.sleep 的生产时钟。"""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def wait(self, event: threading.Event, timeout: float) -> bool:
        return event.wait(timeout)


SYSTEM_CLOCK = SystemClock()
