"""Tests for vocalnav.core.lexical — ordered keyword rules."""

from __future__ import annotations

import asyncio
import re

import pytest

from vocalnav.core.lexical import (
    COMPOUND_RULES,
    DEFAULT_RULES,
    KEYWORD_RULES,
    LexicalMatcher,
    Rule,
    has_activation_phrase,
)
from vocalnav.core.types import ClassificationResult, Intent, Slots


@pytest.fixture
def matcher() -> LexicalMatcher:
    return LexicalMatcher()


class TestLexicalMatcher:
    @pytest.mark.parametrize("text", ["назад", "Назад!", "back", "  go BACK  ", "вернись"])
    def test_go_back_in_both_languages(self, matcher: LexicalMatcher, text: str) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.GO_BACK
        assert result.confidence == 0.6
        assert result.source == "lexical"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_is_unknown(self, matcher: LexicalMatcher, text: str) -> None:
        result = matcher.match(text)
        assert result == ClassificationResult.unknown()
        assert result.confidence == 0.0
        assert result.slots.as_dict() == {}

    def test_no_match_is_unknown(self, matcher: LexicalMatcher) -> None:
        result = matcher.match("какая сегодня погода")
        assert result.intent is Intent.UNKNOWN
        assert result.confidence == 0.0

    @pytest.mark.parametrize(
        "text",
        ["настройки языка", "языковые настройки", "открой настройки для языка", "language settings", "settings for language"],
    )
    def test_compound_language_settings_beats_settings(
        self, matcher: LexicalMatcher, text: str
    ) -> None:
        assert matcher.match(text).intent is Intent.OPEN_LANGUAGE

    @pytest.mark.parametrize(
        ("text", "intent"),
        [
            ("открой настройки", Intent.OPEN_SETTINGS),
            ("open settings", Intent.OPEN_SETTINGS),
            ("язык", Intent.OPEN_LANGUAGE),
            ("настройки озвучки", Intent.OPEN_SPEECH),
            ("speech", Intent.OPEN_SPEECH),
            ("клавиатура", Intent.OPEN_INPUT),
            ("input", Intent.OPEN_INPUT),
            ("поддержка", Intent.OPEN_SUPPORT),
            ("help", Intent.OPEN_SUPPORT),
        ],
    )
    def test_open_screen_keywords(
        self, matcher: LexicalMatcher, text: str, intent: Intent
    ) -> None:
        assert matcher.match(text).intent is intent

    @pytest.mark.parametrize(
        ("text", "language"),
        [
            ("русский", "ru"),
            ("switch to russian", "ru"),
            ("английский", "en"),
            ("english please", "en"),
            ("выбери казахский", "kk"),
            ("қазақ тілі", "kk"),
        ],
    )
    def test_language_names_fill_slot(
        self, matcher: LexicalMatcher, text: str, language: str
    ) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.SET_LANGUAGE
        assert result.slots == Slots(language=language)
        assert result.confidence == 0.7

    @pytest.mark.parametrize(
        ("text", "enable"),
        [
            ("включи озвучку", True),
            ("turn on speech", True),
            ("выключи озвучку", False),
            ("отключи речь", False),
            ("turn off speech", False),
        ],
    )
    def test_speech_enable_checked_before_speech_screen(
        self, matcher: LexicalMatcher, text: str, enable: bool
    ) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.SET_SPEECH_ENABLE
        assert result.slots.enable is enable

    @pytest.mark.parametrize(
        ("text", "intent"),
        [
            ("включи голосовую навигацию", Intent.ACTIVATE_VOICE_NAV),
            ("activate voice navigation", Intent.ACTIVATE_VOICE_NAV),
            ("выключи голосовую навигацию", Intent.DEACTIVATE_VOICE_NAV),
            ("disable voice navigation", Intent.DEACTIVATE_VOICE_NAV),
        ],
    )
    def test_voice_navigation_toggles(
        self, matcher: LexicalMatcher, text: str, intent: Intent
    ) -> None:
        assert matcher.match(text).intent is intent

    @pytest.mark.parametrize(
        ("text", "speed"),
        [("медленная речь", "slow"), ("быстрая речь", "fast"), ("medium", "medium"), ("slow", "slow")],
    )
    def test_speed_tiers(self, matcher: LexicalMatcher, text: str, speed: str) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.SET_SPEECH_SPEED
        assert result.slots.speed == speed
        assert result.confidence == 0.65

    @pytest.mark.parametrize(
        ("text", "warning"),
        [
            ("вибрация", "vibration"),
            ("vibrate", "vibration"),
            ("голосовые предупреждения", "voice"),
            ("voice warnings", "voice"),
            ("без предупреждений", "none"),
            ("no warnings", "none"),
        ],
    )
    def test_warning_modes(self, matcher: LexicalMatcher, text: str, warning: str) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.SET_WARNING
        assert result.slots.warning == warning

    @pytest.mark.parametrize(
        ("text", "method"),
        [
            ("голосовой ввод", "voice"),
            ("ввод голосом", "voice"),
            ("keyboard input", "keyboard"),
            ("ввод с клавиатуры", "keyboard"),
        ],
    )
    def test_input_method(self, matcher: LexicalMatcher, text: str, method: str) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.SET_INPUT_METHOD
        assert result.slots.method == method

    @pytest.mark.parametrize(
        ("text", "intent", "slots"),
        [
            ("включи голосовой ввод", Intent.SET_INPUT_METHOD, Slots(method="voice")),
            ("turn on voice input", Intent.SET_INPUT_METHOD, Slots(method="voice")),
            ("отключи голосовой ввод", Intent.SET_INPUT_METHOD, Slots(method="keyboard")),
            ("disable voice input", Intent.SET_INPUT_METHOD, Slots(method="keyboard")),
            ("включи голосовые предупреждения", Intent.SET_WARNING, Slots(warning="voice")),
            ("enable voice warnings", Intent.SET_WARNING, Slots(warning="voice")),
            ("отключи голосовые предупреждения", Intent.SET_WARNING, Slots(warning="none")),
            ("turn off voice warnings", Intent.SET_WARNING, Slots(warning="none")),
        ],
    )
    def test_input_and_warning_phrases_not_taken_as_speech_toggle(
        self, matcher: LexicalMatcher, text: str, intent: Intent, slots: Slots
    ) -> None:
        result = matcher.match(text)
        assert result.intent is intent
        assert result.slots == slots

    @pytest.mark.parametrize("text", ["отключи вибрацию", "выключи вибрацию", "disable vibration", "stop vibrating"])
    def test_disabling_vibration_turns_warnings_off(self, matcher: LexicalMatcher, text: str) -> None:
        result = matcher.match(text)
        assert result.intent is Intent.SET_WARNING
        assert result.slots.warning == "none"

    def test_first_match_wins_over_later_rules(self, matcher: LexicalMatcher) -> None:
        # "back" and "settings" both present: go-back comes first.
        assert matcher.match("go back to settings").intent is Intent.GO_BACK

    def test_custom_rule_order(self) -> None:
        first = Rule(re.compile("x"), ClassificationResult(Intent.GO_BACK, 0.6))
        second = Rule(re.compile("x"), ClassificationResult(Intent.OPEN_SETTINGS, 0.6))
        assert LexicalMatcher([first, second]).match("x").intent is Intent.GO_BACK
        assert LexicalMatcher([second, first]).match("x").intent is Intent.OPEN_SETTINGS

    def test_default_rules_are_compound_then_keyword(self) -> None:
        assert DEFAULT_RULES == COMPOUND_RULES + KEYWORD_RULES

    def test_rule_confidences_in_fixed_band(self) -> None:
        for rule in DEFAULT_RULES:
            assert 0.6 <= rule.result.confidence <= 0.7

    def test_classify_coroutine_matches_sync(self, matcher: LexicalMatcher) -> None:
        result = asyncio.run(matcher.classify("назад"))
        assert result == matcher.match("назад")


class TestActivationPhrase:
    @pytest.mark.parametrize(
        "text",
        ["Аудио навигация", "голосовая навигация пожалуйста", "activate navigation", "Voice Navigation"],
    )
    def test_detected(self, text: str) -> None:
        assert has_activation_phrase(text)

    @pytest.mark.parametrize("text", ["", "навигация", "open settings"])
    def test_not_detected(self, text: str) -> None:
        assert not has_activation_phrase(text)

    @pytest.mark.parametrize(
        "text",
        ["turn off voice navigation", "disable audio navigation", "stop voice navigation", "отключи аудио навигация"],
    )
    def test_deactivation_verb_suppresses(self, text: str) -> None:
        assert not has_activation_phrase(text)
