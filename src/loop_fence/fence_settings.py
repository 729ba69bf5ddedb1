"""栅栏间隔配置：环境变量与 YAML 文件。"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from loop_fence.clock import Clock
from loop_fence.fence import Fence

DEFAULT_INTERVAL_MS = 1000
INTERVAL_ENV_VAR = "LOOP_FENCE_INTERVAL_MS"


@dataclass
class FenceSettings:
    """可持久化的栅栏设置。"""

    interval_ms: int = DEFAULT_INTERVAL_MS

    def build_fence(self, clock: Optional[Clock] = None) -> Fence:
        return Fence.from_millis(self.interval_ms, clock=clock)


def read_interval_ms(env: Mapping[str, str] | None = None) -> int:
    """读取栅栏间隔配置（毫秒），非法值回退默认值。"""

    source = env if env is not None else os.environ
    raw = source.get(INTERVAL_ENV_VAR, "").strip()
    return _normalize_interval_ms(raw)


class FenceSettingsStore:
    """读取/写入 fence.yaml。"""

    def __init__(self, settings_path: str | Path = "config/fence.yaml") -> None:
        self.settings_path = Path(settings_path)

    def load(self) -> FenceSettings:
        if not self.settings_path.exists():
            return FenceSettings()

        with self.settings_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return FenceSettings()

        return FenceSettings(interval_ms=_normalize_interval_ms(data.get("interval_ms")))

    def save(self, settings: FenceSettings) -> Path:
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        payload = asdict(FenceSettings(interval_ms=_normalize_interval_ms(settings.interval_ms)))
        with self.settings_path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(payload, f, allow_unicode=True, sort_keys=False)
        return self.settings_path


def _normalize_interval_ms(value: object) -> int:
    if isinstance(value, bool) or value is None:
        return DEFAULT_INTERVAL_MS
    if isinstance(value, int):
        interval_ms = value
    else:
        try:
            interval_ms = int(str(value).strip())
        except ValueError:
            return DEFAULT_INTERVAL_MS
    if interval_ms < 0:
        return DEFAULT_INTERVAL_MS
    return interval_ms
