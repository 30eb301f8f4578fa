"""Command session: one utterance in, one applied action out.

Owns the voice-navigation flag and wires the resolver and dispatcher to
the application's collaborators (navigation, preference store, speech
and haptics). Turns are serialized; at most one classification is in
flight per session.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Literal

from vocalnav.apps.config import SessionConfig
from vocalnav.apps.messages import confirmation, speech_rate
from vocalnav.core.dispatch import CommandContext, dispatch
from vocalnav.core.lexical import has_activation_phrase
from vocalnav.core.protocols import Announcer, Navigator, PreferenceStore
from vocalnav.core.resolver import IntentResolver
from vocalnav.core.screens import screen_from_text
from vocalnav.core.text import apply_vocab, normalize
from vocalnav.core.types import (
    Action,
    ClassificationResult,
    Navigate,
    NavigateBack,
    PersistPreference,
    PreferenceSnapshot,
    SetMode,
    Unhandled,
)

_log = logging.getLogger("vocalnav")


@dataclass(frozen=True, slots=True)
class SessionTurn:
    """Record of one handled utterance."""

    text: str
    action: Action
    result: ClassificationResult | None
    voice_nav_active: bool
    message: str | None
    via: Literal["empty", "activation", "classifier", "screens"]


class CommandSession:
    """Interprets utterances and applies the resulting actions."""

    def __init__(
        self,
        resolver: IntentResolver,
        navigator: Navigator,
        store: PreferenceStore,
        announcer: Announcer,
        config: SessionConfig | None = None,
        corrections: dict[str, str] | None = None,
        voice_nav_active: bool = False,
    ) -> None:
        self.resolver = resolver
        self.navigator = navigator
        self.store = store
        self.announcer = announcer
        self.config = config or SessionConfig()
        self.corrections = corrections or {}
        self.voice_nav_active = voice_nav_active
        self._lock = asyncio.Lock()

    @property
    def preferences(self) -> PreferenceSnapshot:
        return PreferenceSnapshot.from_store(self.store.snapshot())

    async def handle(self, text: str) -> SessionTurn:
        async with self._lock:
            return await self._handle(text)

    async def _handle(self, raw: str) -> SessionTurn:
        text = normalize(apply_vocab(raw or "", self.corrections))
        _log.debug("Utterance: %r", text)

        if not text:
            return SessionTurn(text, Unhandled("empty"), None, self.voice_nav_active, None, "empty")

        # Activation phrases are spotted before any classification.
        if not self.voice_nav_active and has_activation_phrase(text):
            self.voice_nav_active = True
            self.announcer.haptic()
            return SessionTurn(text, SetMode(True), None, True, None, "activation")

        prefs = self.preferences
        result = await self.resolver.resolve(text)
        outcome = dispatch(
            result,
            CommandContext(self.voice_nav_active, prefs),
            exit_on_preference=self.config.exit_on_preference,
        )
        action = outcome.action
        active = outcome.context.voice_nav_active
        via: Literal["classifier", "screens"] = "classifier"

        if isinstance(action, Unhandled) and self.config.screen_fallback:
            route = screen_from_text(text, prefs.language)
            if route is not None:
                action, active, via = Navigate(route), False, "screens"

        _log.info(
            "%s (%.2f, %s) -> %s",
            result.intent, result.confidence, result.source, type(action).__name__,
        )
        self._apply(action)
        self.voice_nav_active = active
        message = self._announce(action)
        return SessionTurn(text, action, result, active, message, via)

    def _apply(self, action: Action) -> None:
        match action:
            case Navigate(target=route):
                self.navigator.open(route)
            case NavigateBack():
                self.navigator.back()
            case SetMode(active=True):
                self.announcer.haptic()
            case PersistPreference(key=key, value=value, changed=changed):
                if changed:
                    self.store.set(key, value)
                if key == "obstacleWarning" and value == "vibration":
                    self.announcer.haptic()

    def _announce(self, action: Action) -> str | None:
        """Speak the confirmation using the preferences as they are now."""
        if isinstance(action, SetMode) and action.active:
            return None
        prefs = self.preferences
        message = confirmation(action, prefs.language)
        if prefs.speech_enabled:
            self.announcer.say(
                message, language=prefs.language, rate=speech_rate(prefs.speech_speed)
            )
        return message
