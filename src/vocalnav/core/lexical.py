"""Deterministic keyword classifier used when the remote model is unavailable.

Rules are an ordered decision list of ``(pattern, result)`` pairs. The
first matching rule wins, so overlaps between keyword sets are settled by
position: multi-keyword phrases live in the compound tier, which is tried
before the single-keyword tier. Scores are fixed constants that mean
"a rule fired", not calibrated probabilities.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

from vocalnav.core.constants import (
    RULE_CONFIDENCE_SCREEN,
    RULE_CONFIDENCE_SETTING,
    RULE_CONFIDENCE_STRONG,
)
from vocalnav.core.text import normalize
from vocalnav.core.types import ClassificationResult, Intent, Slots

ACTIVATION_PHRASES: Final = {
    "ru": ("аудио навигация", "активация навигации", "голосовая навигация"),
    "en": ("audio navigation", "voice navigation", "activate navigation"),
}

# "turn off voice navigation" contains an activation phrase but asks the opposite.
_DEACTIVATION_VERBS: Final = re.compile(
    r"выключ|отключ|деактивир|останов|\b(disable|deactivate|turn off|stop|exit)\b"
)


@dataclass(frozen=True, slots=True)
class Rule:
    """One entry of the decision list."""

    pattern: re.Pattern[str]
    result: ClassificationResult

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(pattern: str, intent: Intent, confidence: float, **slots: Any) -> Rule:
    return Rule(
        pattern=re.compile(pattern),
        result=ClassificationResult(intent, confidence, Slots(**slots), "lexical"),
    )


COMPOUND_RULES: Final[tuple[Rule, ...]] = (
    _rule(
        r"настройки языка|языковые настройки|настро\w*.*язык|язык\w*.*настро"
        r"|\bsettings?\b.*\blanguage|\blanguage\b.*\bsettings?\b",
        Intent.OPEN_LANGUAGE,
        RULE_CONFIDENCE_SCREEN,
    ),
    _rule(
        r"(выключ|отключ|деактивир|останов)\w*\s.*навигац"
        r"|\b(disable|deactivate|turn off|stop|exit)\b.*\bnav",
        Intent.DEACTIVATE_VOICE_NAV,
        RULE_CONFIDENCE_SCREEN,
    ),
    _rule(
        r"(включ|актив)\w*\s.*навигац|(аудио|голосов)\w*\s+навигац"
        r"|\b(enable|activate|turn on|start)\b.*\bnav|\b(voice|audio) nav",
        Intent.ACTIVATE_VOICE_NAV,
        RULE_CONFIDENCE_SCREEN,
    ),
    _rule(
        r"без предупрежд|(выключ|отключ)\w*\s.*(предупрежд|вибрац)"
        r"|\b(no|without)\s+warnings?\b|\b(disable|turn off|stop)\b.*\b(warn|vibrat)",
        Intent.SET_WARNING,
        RULE_CONFIDENCE_SETTING,
        warning="none",
    ),
    _rule(
        r"голосов\w* предупрежд|предупрежд\w* голосом|\bvoice[\s-]warn|\bwarn\w* (by|with) voice",
        Intent.SET_WARNING,
        RULE_CONFIDENCE_SETTING,
        warning="voice",
    ),
    _rule(
        r"ввод\w* с клавиатуры|клавиатурн\w* ввод|(выключ|отключ)\w*\s.*голосов\w* ввод"
        r"|\bkeyboard (input|typing)|\b(input|type) (by|with) (the )?keyboard"
        r"|\b(disable|turn off)\b.*\bvoice (input|typing)",
        Intent.SET_INPUT_METHOD,
        RULE_CONFIDENCE_SETTING,
        method="keyboard",
    ),
    _rule(
        r"голосов\w* ввод|ввод\w* голосом|\bvoice (input|typing)|\b(input|type) (by|with) voice",
        Intent.SET_INPUT_METHOD,
        RULE_CONFIDENCE_SETTING,
        method="voice",
    ),
    _rule(
        r"(выключ|отключ)\w*\s.*(озвучк|реч|голос)"
        r"|\b(disable|turn off|mute|stop)\b.*\b(speech|voice|tts|narrat)",
        Intent.SET_SPEECH_ENABLE,
        RULE_CONFIDENCE_STRONG,
        enable=False,
    ),
    _rule(
        r"включ\w*\s.*(озвучк|реч|голос)"
        r"|\b(enable|turn on|unmute)\b.*\b(speech|voice|tts|narrat)",
        Intent.SET_SPEECH_ENABLE,
        RULE_CONFIDENCE_STRONG,
        enable=True,
    ),
)

KEYWORD_RULES: Final[tuple[Rule, ...]] = (
    _rule(r"\b(назад|back|вернись|вернуться)\b", Intent.GO_BACK, RULE_CONFIDENCE_SCREEN),
    _rule(r"русск|\brussian", Intent.SET_LANGUAGE, RULE_CONFIDENCE_STRONG, language="ru"),
    _rule(r"англ|\benglish", Intent.SET_LANGUAGE, RULE_CONFIDENCE_STRONG, language="en"),
    _rule(
        r"казах|қазақ|\bkazakh|\bqazaq",
        Intent.SET_LANGUAGE,
        RULE_CONFIDENCE_STRONG,
        language="kk",
    ),
    _rule(
        r"\bголосом\b|\bby voice\b",
        Intent.SET_INPUT_METHOD,
        RULE_CONFIDENCE_SETTING,
        method="voice",
    ),
    _rule(
        r"с клавиатуры|\b(use|by) (the )?keyboard\b",
        Intent.SET_INPUT_METHOD,
        RULE_CONFIDENCE_SETTING,
        method="keyboard",
    ),
    _rule(r"быстр|\bfast", Intent.SET_SPEECH_SPEED, RULE_CONFIDENCE_SETTING, speed="fast"),
    _rule(r"средн|\bmedium\b|\bnormal speed", Intent.SET_SPEECH_SPEED, RULE_CONFIDENCE_SETTING, speed="medium"),
    _rule(r"медлен|\bslow", Intent.SET_SPEECH_SPEED, RULE_CONFIDENCE_SETTING, speed="slow"),
    _rule(r"вибрац|\bvibrat", Intent.SET_WARNING, RULE_CONFIDENCE_SETTING, warning="vibration"),
    _rule(r"язык|локал|\blanguages?\b|\blocale\b", Intent.OPEN_LANGUAGE, RULE_CONFIDENCE_SCREEN),
    _rule(
        r"озвучк|\bреч|синтез|\bголос|\bspeech\b|\bvoice\b|\btts\b|\bnarrator\b",
        Intent.OPEN_SPEECH,
        RULE_CONFIDENCE_SCREEN,
    ),
    _rule(r"ввод|клавиатур|\binput\b|\bkeyboard\b|\btyping\b", Intent.OPEN_INPUT, RULE_CONFIDENCE_SCREEN),
    _rule(r"поддержк|помощ|хелп|\bhelp\b|\bsupport\b", Intent.OPEN_SUPPORT, RULE_CONFIDENCE_SCREEN),
    _rule(
        r"настройк|параметр|\bsettings\b|\bpreferences\b|\boptions\b",
        Intent.OPEN_SETTINGS,
        RULE_CONFIDENCE_SCREEN,
    ),
)

DEFAULT_RULES: Final[tuple[Rule, ...]] = COMPOUND_RULES + KEYWORD_RULES


def has_activation_phrase(text: str) -> bool:
    """True when *text* contains an activation phrase and no deactivation verb."""
    t = normalize(text)
    if _DEACTIVATION_VERBS.search(t):
        return False
    return any(p in t for phrases in ACTIVATION_PHRASES.values() for p in phrases)


class LexicalMatcher:
    """Ordered-rule classifier. Never raises, never blocks."""

    def __init__(self, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def match(self, text: str) -> ClassificationResult:
        t = normalize(text)
        if not t:
            return ClassificationResult.unknown()
        for rule in self.rules:
            if rule.matches(t):
                return rule.result
        return ClassificationResult.unknown()

    async def classify(self, text: str) -> ClassificationResult:
        return self.match(text)
