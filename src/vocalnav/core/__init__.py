"""Core interpretation package — no UI or storage dependencies.

Re-exports key symbols for convenience.
"""

from vocalnav.core.config import ClassifierConfig
from vocalnav.core.dispatch import CommandContext, DispatchOutcome, dispatch
from vocalnav.core.errors import ClassifierUnavailable, ConfigError, VocalnavError
from vocalnav.core.lexical import LexicalMatcher, has_activation_phrase
from vocalnav.core.remote import RemoteClassifier, parse_response
from vocalnav.core.resolver import IntentResolver
from vocalnav.core.screens import screen_from_text
from vocalnav.core.text import apply_vocab, normalize
from vocalnav.core.types import (
    Action,
    ClassificationResult,
    Intent,
    Navigate,
    NavigateBack,
    PersistPreference,
    PreferenceSnapshot,
    Route,
    SetMode,
    Slots,
    Unhandled,
)

__all__ = [
    "Action",
    "ClassificationResult",
    "ClassifierConfig",
    "ClassifierUnavailable",
    "CommandContext",
    "ConfigError",
    "DispatchOutcome",
    "Intent",
    "IntentResolver",
    "LexicalMatcher",
    "Navigate",
    "NavigateBack",
    "PersistPreference",
    "PreferenceSnapshot",
    "RemoteClassifier",
    "Route",
    "SetMode",
    "Slots",
    "Unhandled",
    "VocalnavError",
    "apply_vocab",
    "dispatch",
    "has_activation_phrase",
    "normalize",
    "parse_response",
    "screen_from_text",
]
