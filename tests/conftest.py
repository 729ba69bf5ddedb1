import threading

import pytest


class FakeClock:
    """手动推进的单调时钟，sleep() 直接推进时间并记录时长。"""

    def __init__(self, start: float = 0.0) -> None:
        self.current = start
        self.sleeps: list[float] = []
        self.waits: list[float] = []
        self._lock = threading.Lock()

    def now(self) -> float:
        with self._lock:
            return self.current

    def sleep(self, seconds: float) -> None:
        with self._lock:
            self.sleeps.append(seconds)
            self.current += seconds

    def wait(self, event: threading.Event, timeout: float) -> bool:
        with self._lock:
            self.waits.append(timeout)
            if event.is_set():
                return True
            self.current += timeout
            return False

    def advance(self, seconds: float) -> None:
        with self._lock:
            self.current += seconds

    def set(self, value: float) -> None:
        with self._lock:
            self.current = value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_clock():
    return FakeClock
