"""User-facing confirmations in the UI language (ru/en).

Messages never repeat the user's utterance back.
"""

from typing import Final

from vocalnav.core.constants import SPEECH_RATES
from vocalnav.core.types import (
    Action,
    Navigate,
    NavigateBack,
    PersistPreference,
    Route,
    SetMode,
    Unhandled,
)

SCREEN_LABELS: Final[dict[Route, dict[str, str]]] = {
    Route.SETTINGS: {"ru": "настройки", "en": "settings"},
    Route.LANGUAGE: {"ru": "настройки языка", "en": "language settings"},
    Route.SPEECH: {"ru": "озвучку", "en": "speech"},
    Route.INPUT: {"ru": "ввод текста", "en": "text input"},
    Route.SUPPORT: {"ru": "поддержку", "en": "support"},
    Route.CAMERA: {"ru": "камеру", "en": "camera"},
    Route.NAVIGATION: {"ru": "навигацию", "en": "navigation"},
    Route.EXPLORE: {"ru": "обзор", "en": "explore"},
    Route.INFO: {"ru": "информацию", "en": "info"},
}

_VALUE_LABELS: Final[dict[str, dict[str, str]]] = {
    "ru": {"ru": "русский", "en": "английский"},
    "en": {"ru": "Russian", "en": "English"},
}

_PREFERENCE_TEMPLATES: Final[dict[str, dict[str, str]]] = {
    "language": {"ru": "Язык: {value}", "en": "Language: {value}"},
    "inputMethod": {"ru": "Способ ввода: {value}", "en": "Input method: {value}"},
    "speechEnabled": {"ru": "Озвучка: {value}", "en": "Speech: {value}"},
    "speechSpeed": {"ru": "Скорость речи: {value}", "en": "Speech speed: {value}"},
    "obstacleWarning": {"ru": "Предупреждения: {value}", "en": "Warnings: {value}"},
}

_SETTING_WORDS: Final[dict[str, dict[str, str]]] = {
    "ru": {
        "voice": "голос", "keyboard": "клавиатура", "true": "включена",
        "false": "выключена", "fast": "быстрая", "medium": "средняя",
        "slow": "медленная", "vibration": "вибрация", "none": "нет",
    },
    "en": {
        "voice": "voice", "keyboard": "keyboard", "true": "on", "false": "off",
        "fast": "fast", "medium": "medium", "slow": "slow",
        "vibration": "vibration", "none": "none",
    },
}


def _lang(language: str) -> str:
    return language if language in ("ru", "en") else "ru"


def speech_rate(speed: str) -> float:
    """Playback rate for a speech speed tier."""
    return SPEECH_RATES.get(speed, 1.0)


def screen_label(route: Route, language: str) -> str:
    return SCREEN_LABELS[route][_lang(language)]


def not_understood(language: str) -> str:
    if _lang(language) == "ru":
        return "Не понял команду. Скажи, например: «настройки языка»."
    return 'Did not understand. Say e.g. "language settings".'


def preference_message(action: PersistPreference, language: str) -> str:
    lang = _lang(language)
    if action.key == "language":
        value = _VALUE_LABELS[lang].get(action.value, action.value)
    else:
        value = _SETTING_WORDS[lang].get(action.value, action.value)
    template = _PREFERENCE_TEMPLATES.get(action.key, {"ru": "{value}", "en": "{value}"})
    message = template[lang].format(value=value)
    if not action.changed:
        message += " (уже установлено)" if lang == "ru" else " (already set)"
    return message


def confirmation(action: Action, language: str) -> str:
    """Spoken confirmation for *action*."""
    lang = _lang(language)
    match action:
        case Navigate(target=route):
            prefix = "Открываю" if lang == "ru" else "Opening"
            return f"{prefix} {screen_label(route, lang)}"
        case NavigateBack():
            return "Назад" if lang == "ru" else "Going back"
        case SetMode(active=True):
            return "Голосовая навигация включена" if lang == "ru" else "Voice navigation on"
        case SetMode(active=False):
            return "Голосовая навигация выключена" if lang == "ru" else "Voice navigation off"
        case PersistPreference():
            return preference_message(action, lang)
        case Unhandled():
            return not_understood(lang)
    return not_understood(lang)
