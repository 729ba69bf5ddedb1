"""跨线程共享的栅栏包装。"""

from __future__ import annotations

import threading

from loop_fence.fence import Fence


class LockedFence:
    """用一把互斥锁串行化 Fence 的读取与布防。

    sleep() 在整个等待期间持锁，多个线程依次通过，每次间隔至少一个 interval。
    allow() 从不阻塞：锁被等待中的线程持有时栅栏必然关闭，直接返回 False。
    """

    def __init__(self, fence: Fence) -> None:
        self._fence = fence
        self._lock = threading.Lock()

    @property
    def fence(self) -> Fence:
        return self._fence

    @property
    def interval(self) -> float:
        return self._fence.interval

    def remaining(self) -> float:
        # 只读，不取锁；等待中的线程完成前读到的是旧水位线。
        return self._fence.remaining()

    def sleep(self) -> None:
        with self._lock:
            self._fence.sleep()

    def sleep_cancellable(self, cancel: threading.Event) -> bool:
        with self._lock:
            return self._fence.sleep_cancellable(cancel)

    def allow(self) -> bool:
        if not self._lock.acquire(blocking=False):
            return False
        try:
            return self._fence.allow()
        finally:
            self._lock.release()
