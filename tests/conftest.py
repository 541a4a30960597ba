"""Pytest fixtures for the formscrub test-suite."""

from __future__ import annotations

import pytest

from formscrub import PresetRegistry, reset_preset_registry


@pytest.fixture(autouse=True)
def _reset_presets():  # noqa: D401
    """Every test starts and ends with the built-in presets only."""
    reset_preset_registry()
    yield
    reset_preset_registry()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def registry() -> PresetRegistry:  # noqa: D401
    """Return a fresh registry seeded with the built-in presets."""
    return PresetRegistry()


@pytest.fixture()
def presets_env(monkeypatch):  # noqa: D401
    """Make sure no preset file leaks in from the developer's environment."""
    monkeypatch.delenv("FORMSCRUB_PRESETS_FILE", raising=False)
    return monkeypatch
