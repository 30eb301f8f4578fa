"""Core data types shared across vocalnav modules.

Everything here is immutable: a classification is created per utterance,
handed to the dispatcher, and dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Final, Literal

LANGUAGES: Final = frozenset({"ru", "en", "kk"})
UI_LANGUAGES: Final = frozenset({"ru", "en"})
INPUT_METHODS: Final = frozenset({"voice", "keyboard"})
SPEECH_SPEEDS: Final = frozenset({"fast", "medium", "slow"})
WARNING_MODES: Final = frozenset({"voice", "vibration", "none"})

_TRUE_STRINGS: Final = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS: Final = frozenset({"false", "0", "no", "off"})


class Intent(StrEnum):
    """Closed set of command categories."""

    OPEN_SETTINGS = "OPEN_SETTINGS"
    OPEN_LANGUAGE = "OPEN_LANGUAGE"
    OPEN_SPEECH = "OPEN_SPEECH"
    OPEN_INPUT = "OPEN_INPUT"
    OPEN_SUPPORT = "OPEN_SUPPORT"
    GO_BACK = "GO_BACK"
    ACTIVATE_VOICE_NAV = "ACTIVATE_VOICE_NAV"
    DEACTIVATE_VOICE_NAV = "DEACTIVATE_VOICE_NAV"
    SET_LANGUAGE = "SET_LANGUAGE"
    SET_INPUT_METHOD = "SET_INPUT_METHOD"
    SET_SPEECH_ENABLE = "SET_SPEECH_ENABLE"
    SET_SPEECH_SPEED = "SET_SPEECH_SPEED"
    SET_WARNING = "SET_WARNING"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Any) -> Intent:
        """Map a raw intent label to a member, ``UNKNOWN`` when unrecognized."""
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.UNKNOWN


class Route(StrEnum):
    """Route keys understood by the navigation collaborator."""

    SETTINGS = "settings"
    LANGUAGE = "language"
    SPEECH = "speech"
    INPUT = "input"
    SUPPORT = "support"
    CAMERA = "camera"
    NAVIGATION = "navigation"
    EXPLORE = "explore"
    INFO = "info"


def _vocab_value(raw: Any, vocab: frozenset[str]) -> str | None:
    if not isinstance(raw, str):
        return None
    value = raw.strip().lower()
    return value if value in vocab else None


def _bool_value(raw: Any) -> bool | None:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        value = raw.strip().lower()
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
    return None


@dataclass(frozen=True, slots=True)
class Slots:
    """Intent parameters. ``None`` means absent."""

    language: str | None = None
    method: str | None = None
    enable: bool | None = None
    speed: str | None = None
    warning: str | None = None

    def __post_init__(self) -> None:
        # Out-of-vocabulary values are treated as absent however slots are built.
        object.__setattr__(self, "language", _vocab_value(self.language, LANGUAGES))
        object.__setattr__(self, "method", _vocab_value(self.method, INPUT_METHODS))
        object.__setattr__(self, "enable", _bool_value(self.enable))
        object.__setattr__(self, "speed", _vocab_value(self.speed, SPEECH_SPEEDS))
        object.__setattr__(self, "warning", _vocab_value(self.warning, WARNING_MODES))

    @classmethod
    def from_mapping(cls, raw: Any) -> Slots:
        """Build slots from untrusted data."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            language=raw.get("language"),
            method=raw.get("method"),
            enable=raw.get("enable"),
            speed=raw.get("speed"),
            warning=raw.get("warning"),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return only the populated slots."""
        values = {
            "language": self.language,
            "method": self.method,
            "enable": self.enable,
            "speed": self.speed,
            "warning": self.warning,
        }
        return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Immutable outcome of classifying one utterance."""

    intent: Intent = Intent.UNKNOWN
    confidence: float = 0.0
    slots: Slots = field(default_factory=Slots)
    source: Literal["remote", "lexical"] = "lexical"

    @classmethod
    def unknown(cls, source: Literal["remote", "lexical"] = "lexical") -> ClassificationResult:
        return cls(Intent.UNKNOWN, 0.0, Slots(), source)

    def as_dict(self) -> dict[str, Any]:
        return {
            "intent": str(self.intent),
            "confidence": self.confidence,
            "slots": self.slots.as_dict(),
            "source": self.source,
        }


@dataclass(frozen=True, slots=True)
class PreferenceSnapshot:
    """Read-only view of the persisted user preferences."""

    language: str = "ru"
    speech_enabled: bool = True
    speech_speed: str = "medium"

    @classmethod
    def from_store(cls, values: Mapping[str, str | None]) -> PreferenceSnapshot:
        """Build a snapshot from raw key-value store strings.

        Missing or invalid entries keep their defaults.
        """
        language = _vocab_value(values.get("language"), UI_LANGUAGES)
        enabled = _bool_value(values.get("speechEnabled"))
        speed = _vocab_value(values.get("speechSpeed"), SPEECH_SPEEDS)
        return cls(
            language=language or "ru",
            speech_enabled=True if enabled is None else enabled,
            speech_speed=speed or "medium",
        )


# ---------------------------------------------------------------------------
# Actions emitted by the dispatcher
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Navigate:
    target: Route


@dataclass(frozen=True, slots=True)
class NavigateBack:
    pass


@dataclass(frozen=True, slots=True)
class SetMode:
    active: bool


@dataclass(frozen=True, slots=True)
class PersistPreference:
    """Request to write one preference key.

    *changed* is False when the snapshot already holds *value*, so the
    caller can confirm without rewriting.
    """

    key: str
    value: str
    changed: bool = True


@dataclass(frozen=True, slots=True)
class Unhandled:
    reason: Literal["low_confidence", "unknown_intent", "missing_slot", "empty"] = (
        "unknown_intent"
    )


type Action = Navigate | NavigateBack | SetMode | PersistPreference | Unhandled
