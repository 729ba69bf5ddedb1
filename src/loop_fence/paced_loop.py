"""按栅栏节奏运行的循环。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from loop_fence.fence import Fence

logger = logging.getLogger(__name__)


@dataclass
class PacedLoop:
    step: Callable[[], object]
    fence: Fence
    max_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError("max_iterations 不能为负数")

    def run(self) -> int:
        """反复执行 step，每轮末尾经过栅栏；step 返回 False 或达到上限时结束。"""
        iterations = 0
        while self.max_iterations is None or iterations < self.max_iterations:
            keep_going = self.step()
            iterations += 1
            logger.debug("iteration=%d keep_going=%s", iterations, keep_going is not False)

            if keep_going is False:
                break
            if self.max_iterations is not None and iterations >= self.max_iterations:
                break

            self.fence.sleep()

        logger.info("paced loop finished after %d iterations", iterations)
        return iterations
