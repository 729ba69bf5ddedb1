"""循环节流栅栏：限制循环的最小间隔。"""

from __future__ import annotations

from loop_fence.clock import SYSTEM_CLOCK, Clock, SystemClock
from loop_fence.errors import InvalidIntervalError, LoopFenceError
from loop_fence.fence import Fence
from loop_fence.paced_loop import PacedLoop
from loop_fence.shared import LockedFence

__all__ = [
    "SYSTEM_CLOCK",
    "Clock",
    "Fence",
    "InvalidIntervalError",
    "LockedFence",
    "LoopFenceError",
    "PacedLoop",
    "SystemClock",
]
