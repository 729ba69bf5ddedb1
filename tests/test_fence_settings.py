from pathlib import Path

import pytest

from loop_fence.errors import InvalidIntervalError
from loop_fence.fence_settings import (
    DEFAULT_INTERVAL_MS,
    FenceSettings,
    FenceSettingsStore,
    read_interval_ms,
)


def test_read_interval_ms_returns_default_when_env_missing() -> None:
    assert read_interval_ms({}) == DEFAULT_INTERVAL_MS


def test_read_interval_ms_accepts_non_negative_integers() -> None:
    assert read_interval_ms({"LOOP_FENCE_INTERVAL_MS": "0"}) == 0
    assert read_interval_ms({"LOOP_FENCE_INTERVAL_MS": " 16 "}) == 16
    assert read_interval_ms({"LOOP_FENCE_INTERVAL_MS": "60000"}) == 60000


def test_read_interval_ms_rejects_invalid_values() -> None:
    for raw in ["-1", "abc", "10.5", "", "   "]:
        assert read_interval_ms({"LOOP_FENCE_INTERVAL_MS": raw}) == DEFAULT_INTERVAL_MS


def test_read_interval_ms_uses_os_environ(monkeypatch) -> None:
    monkeypatch.setenv("LOOP_FENCE_INTERVAL_MS", "250")
    assert read_interval_ms() == 250


def test_fence_settings_load_defaults_when_file_missing(tmp_path: Path) -> None:
    loaded = FenceSettingsStore(tmp_path / "config" / "fence.yaml").load()
    assert loaded == FenceSettings()


def test_fence_settings_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "config" / "fence.yaml"
    store = FenceSettingsStore(path)

    assert store.save(FenceSettings(interval_ms=40)) == path
    assert "interval_ms: 40" in path.read_text(encoding="utf-8")
    assert store.load() == FenceSettings(interval_ms=40)


def test_fence_settings_invalid_values_fallback_to_default(tmp_path: Path) -> None:
    path = tmp_path / "fence.yaml"
    store = FenceSettingsStore(path)

    for text in ["interval_ms: -5\n", "interval_ms: fast\n", "interval_ms: true\n", "- 1\n- 2\n"]:
        path.write_text(text, encoding="utf-8")
        assert store.load().interval_ms == DEFAULT_INTERVAL_MS


def test_fence_settings_build_fence(clock) -> None:
    fence = FenceSettings(interval_ms=1500).build_fence(clock=clock)

    assert fence.interval == 1.5
    clock.set(1.5)
    assert fence.allow() is True


def test_fence_settings_unrepresentable_interval_raises_interval_error(tmp_path: Path) -> None:
    path = tmp_path / "fence.yaml"
    path.write_text("interval_ms: 1" + "0" * 400 + "\n", encoding="utf-8")

    settings = FenceSettingsStore(path).load()

    with pytest.raises(InvalidIntervalError):
        settings.build_fence()
