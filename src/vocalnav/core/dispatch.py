"""Map a classification to exactly one application action.

``dispatch`` is a pure function: the voice-navigation flag comes in with
the context and goes out with the outcome. It never raises.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Final

from vocalnav.core.constants import MIN_CONFIDENCE
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

INTENT_TO_ROUTE: Final = {
    Intent.OPEN_SETTINGS: Route.SETTINGS,
    Intent.OPEN_LANGUAGE: Route.LANGUAGE,
    Intent.OPEN_SPEECH: Route.SPEECH,
    Intent.OPEN_INPUT: Route.INPUT,
    Intent.OPEN_SUPPORT: Route.SUPPORT,
}


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Caller-owned state threaded through each dispatch."""

    voice_nav_active: bool = False
    preferences: PreferenceSnapshot = field(default_factory=PreferenceSnapshot)

    def with_mode(self, active: bool) -> CommandContext:
        return dataclasses.replace(self, voice_nav_active=active)


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    action: Action
    context: CommandContext


def _preference(intent: Intent, slots: Slots, prefs: PreferenceSnapshot) -> Action:
    match intent:
        case Intent.SET_LANGUAGE:
            if slots.language is None:
                return Unhandled("missing_slot")
            # The UI has no Kazakh locale yet; Kazakh speakers get Russian.
            lang = "ru" if slots.language == "kk" else slots.language
            return PersistPreference("language", lang, lang != prefs.language)
        case Intent.SET_INPUT_METHOD:
            return PersistPreference("inputMethod", slots.method or "voice")
        case Intent.SET_SPEECH_ENABLE:
            if slots.enable is None:
                return Unhandled("missing_slot")
            value = "true" if slots.enable else "false"
            return PersistPreference("speechEnabled", value, slots.enable != prefs.speech_enabled)
        case Intent.SET_SPEECH_SPEED:
            speed = slots.speed or "medium"
            return PersistPreference("speechSpeed", speed, speed != prefs.speech_speed)
        case Intent.SET_WARNING:
            return PersistPreference("obstacleWarning", slots.warning or "none")
    return Unhandled("unknown_intent")


def dispatch(
    result: ClassificationResult,
    context: CommandContext,
    *,
    exit_on_preference: bool = False,
) -> DispatchOutcome:
    """Apply the confidence gate and map *result* to an action.

    Navigation and ``DEACTIVATE_VOICE_NAV`` leave voice-navigation mode;
    ``ACTIVATE_VOICE_NAV`` enters it. Preference writes keep the mode
    unless *exit_on_preference* is set. Unhandled results leave the
    context untouched.
    """
    if not result.confidence >= MIN_CONFIDENCE:
        return DispatchOutcome(Unhandled("low_confidence"), context)

    intent = Intent.parse(result.intent)
    if intent in INTENT_TO_ROUTE:
        return DispatchOutcome(Navigate(INTENT_TO_ROUTE[intent]), context.with_mode(False))
    if intent is Intent.GO_BACK:
        return DispatchOutcome(NavigateBack(), context.with_mode(False))
    if intent is Intent.ACTIVATE_VOICE_NAV:
        return DispatchOutcome(SetMode(True), context.with_mode(True))
    if intent is Intent.DEACTIVATE_VOICE_NAV:
        return DispatchOutcome(SetMode(False), context.with_mode(False))

    action = _preference(intent, result.slots, context.preferences)
    if isinstance(action, PersistPreference) and exit_on_preference:
        return DispatchOutcome(action, context.with_mode(False))
    return DispatchOutcome(action, context)
