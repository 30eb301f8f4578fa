"""Shared test fixtures — no network or real LLM needed."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from vocalnav.core.errors import ClassifierUnavailable
from vocalnav.core.types import ClassificationResult, Route


def completion_response(content: str | None) -> MagicMock:
    """Mimics the object returned by litellm.completion()."""
    response = MagicMock()
    response.choices[0].message.content = content
    return response


class StaticClassifier:
    """Returns a fixed result and records what it was asked."""

    def __init__(self, result: ClassificationResult) -> None:
        self.result = result
        self.calls: list[str] = []

    async def classify(self, text: str) -> ClassificationResult:
        self.calls.append(text)
        return self.result


class FailingClassifier:
    """Always fails, like an unreachable endpoint."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or ClassifierUnavailable("connection refused")
        self.calls = 0

    async def classify(self, text: str) -> ClassificationResult:
        self.calls += 1
        raise self.exc


class FakeNavigator:
    def __init__(self) -> None:
        self.opened: list[Route] = []
        self.backs = 0

    def open(self, route: Route) -> None:
        self.opened.append(route)

    def back(self) -> None:
        self.backs += 1


class FakeStore:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))

    def snapshot(self) -> dict[str, str]:
        return dict(self.values)


class FakeAnnouncer:
    def __init__(self) -> None:
        self.spoken: list[dict[str, Any]] = []
        self.haptics = 0

    def say(self, message: str, *, language: str, rate: float) -> None:
        self.spoken.append({"message": message, "language": language, "rate": rate})

    def haptic(self) -> None:
        self.haptics += 1


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def announcer() -> FakeAnnouncer:
    return FakeAnnouncer()


@pytest.fixture
def config_dir(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    """Isolated config directory via VOCALNAV_CONFIG_DIR."""
    path = tmp_path / "config"
    path.mkdir()
    monkeypatch.setenv("VOCALNAV_CONFIG_DIR", str(path))
    return path
