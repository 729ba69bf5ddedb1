"""栅栏异常。"""

from __future__ import annotations


class LoopFenceError(Exception):
    """loop_fence 异常基类。"""


class InvalidIntervalError(LoopFenceError, ValueError):
    """间隔为负数、非有限值或类型错误。"""
