"""定时栅栏：保证相邻两次事件之间至少间隔 interval。

典型用法是把栅栏放在循环末尾，限制循环的执行频率（UI 帧率上限、轮询周期）。
构造时水位线即为 now + interval，因此第一次 sleep()/allow() 同样要等待一个完整间隔。

Fence 不做内部同步；跨线程共享请使用 loop_fence.shared.LockedFence。
"""

from __future__ import annotations

import logging
import math
import threading
from datetime import timedelta
from typing import Optional, Union

from loop_fence.clock import SYSTEM_CLOCK, Clock
from loop_fence.errors import InvalidIntervalError

logger = logging.getLogger(__name__)

IntervalLike = Union[timedelta, int, float]


class Fence:
    """以固定间隔放行事件的栅栏。"""

    def __init__(self, interval: IntervalLike, clock: Optional[Clock] = None) -> None:
        self._interval = _interval_seconds(interval)
        self._clock = clock if clock is not None else SYSTEM_CLOCK
        self._watermark = self._clock.now() + self._interval

    @classmethod
    def from_secs(cls, seconds: int, clock: Optional[Clock] = None) -> "Fence":
        """按整秒构造。"""
        return cls(_whole_units(seconds, "seconds"), clock=clock)

    @classmethod
    def from_millis(cls, millis: int, clock: Optional[Clock] = None) -> "Fence":
        """按整毫秒构造。"""
        whole = _whole_units(millis, "millis")
        try:
            seconds = whole / 1000.0
        except OverflowError as exc:
            raise InvalidIntervalError(f"millis 超出可表示范围: {whole}") from exc
        return cls(seconds, clock=clock)

    @classmethod
    def from_duration(cls, duration: IntervalLike, clock: Optional[Clock] = None) -> "Fence":
        """按 timedelta 或秒数构造。"""
        return cls(duration, clock=clock)

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def interval_timedelta(self) -> timedelta:
        return timedelta(seconds=self._interval)

    @property
    def watermark(self) -> float:
        """下一次允许通过的最早单调时间点。"""
        return self._watermark

    def remaining(self) -> float:
        """距离栅栏打开还剩多少秒，不修改水位线。"""
        return max(0.0, self._watermark - self._clock.now())

    def sleep(self) -> None:
        """阻塞当前线程直到水位线，然后从当前时刻重新布防。"""
        now = self._clock.now()
        if now < self._watermark:
            delay = self._watermark - now
            logger.debug("fence waiting %.6fs", delay)
            self._clock.sleep(delay)
        # 以等待结束后的时刻为基准，不追赶落后的周期。
        self._watermark = self._clock.now() + self._interval

    def allow(self) -> bool:
        """非阻塞检查：栅栏打开则重新布防并返回 True，否则返回 False 且不改水位线。"""
        now = self._clock.now()
        if now < self._watermark:
            return False
        self._watermark = now + self._interval
        return True

    def sleep_cancellable(self, cancel: threading.Event) -> bool:
        """可取消的 sleep()。

        cancel 在水位线之前被置位时立即返回 False，水位线保持不变；
        否则与 sleep() 一样重新布防并返回 True。
        """
        now = self._clock.now()
        if now < self._watermark:
            if self._clock.wait(cancel, self._watermark - now):
                logger.debug("fence wait cancelled")
                return False
        self._watermark = self._clock.now() + self._interval
        return True

    def __repr__(self) -> str:
        return f"Fence(interval={self._interval!r})"


def _interval_seconds(value: IntervalLike) -> float:
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidIntervalError(f"interval 必须是 timedelta 或秒数: {value!r}")
    else:
        try:
            seconds = float(value)
        except OverflowError as exc:
            raise InvalidIntervalError(f"interval 超出可表示范围: {value!r}") from exc

    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidIntervalError(f"interval 必须是非负有限值: {value!r}")
    return seconds


def _whole_units(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIntervalError(f"{name} 必须是整数: {value!r}")
    if value < 0:
        raise InvalidIntervalError(f"{name} 不能为负数: {value}")
    return value
