"""Tests for vocalnav.core.screens and vocalnav.apps.messages."""

from __future__ import annotations

import pytest

from vocalnav.apps.messages import confirmation, not_understood, speech_rate
from vocalnav.core.screens import SCREEN_SYNONYMS, compound_screen_from_text, screen_from_text
from vocalnav.core.types import (
    Navigate,
    NavigateBack,
    PersistPreference,
    Route,
    SetMode,
    Unhandled,
)


class TestScreenFromText:
    @pytest.mark.parametrize(
        ("text", "route"),
        [
            ("открой камеру", Route.CAMERA),
            ("съёмка", Route.CAMERA),
            ("построить маршрут", Route.NAVIGATION),
            ("maps", Route.NAVIGATION),
            ("explore", Route.EXPLORE),
            ("о приложении", Route.INFO),
            ("faq", Route.INFO),
            ("settings menu", Route.SETTINGS),
        ],
    )
    def test_synonyms(self, text: str, route: Route) -> None:
        assert screen_from_text(text) is route

    def test_compound_first(self) -> None:
        assert compound_screen_from_text("настройки для языка") is Route.LANGUAGE
        assert screen_from_text("settings for language", "en") is Route.LANGUAGE

    def test_specific_screen_before_general_settings(self) -> None:
        assert screen_from_text("настройки озвучки") is Route.SPEECH

    def test_word_boundaries(self) -> None:
        # "map" must not match inside "bitmap".
        assert screen_from_text("bitmap", "en") is None

    def test_no_match(self) -> None:
        assert screen_from_text("какая погода") is None
        assert screen_from_text("") is None

    def test_every_route_has_both_languages(self) -> None:
        for route in Route:
            assert set(SCREEN_SYNONYMS[route]) == {"ru", "en"}


class TestMessages:
    def test_navigate(self) -> None:
        assert confirmation(Navigate(Route.CAMERA), "ru") == "Открываю камеру"
        assert confirmation(Navigate(Route.CAMERA), "en") == "Opening camera"

    def test_back_and_mode(self) -> None:
        assert confirmation(NavigateBack(), "en") == "Going back"
        assert confirmation(SetMode(False), "ru") == "Голосовая навигация выключена"

    def test_preference(self) -> None:
        action = PersistPreference("inputMethod", "keyboard")
        assert confirmation(action, "ru") == "Способ ввода: клавиатура"

    def test_unknown_language_falls_back_to_russian(self) -> None:
        assert confirmation(Unhandled(), "kk") == not_understood("ru")

    @pytest.mark.parametrize(("speed", "rate"), [("fast", 1.15), ("medium", 1.0), ("slow", 0.85), ("odd", 1.0)])
    def test_speech_rate(self, speed: str, rate: float) -> None:
        assert speech_rate(speed) == rate
