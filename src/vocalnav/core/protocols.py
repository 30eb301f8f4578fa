"""Structural type protocols for classifiers and application collaborators."""

from collections.abc import Mapping
from typing import Protocol

from vocalnav.core.types import ClassificationResult, Route


class ClassifierLike(Protocol):
    """Anything that turns an utterance into a classification."""

    async def classify(self, text: str) -> ClassificationResult: ...


class Navigator(Protocol):
    """Screen navigation owned by the application shell."""

    def open(self, route: Route) -> None: ...

    def back(self) -> None: ...


class PreferenceStore(Protocol):
    """Persisted key-value settings. Values are strings."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def snapshot(self) -> Mapping[str, str]: ...


class Announcer(Protocol):
    """User feedback: spoken confirmations and haptics."""

    def say(self, message: str, *, language: str, rate: float) -> None: ...

    def haptic(self) -> None: ...
