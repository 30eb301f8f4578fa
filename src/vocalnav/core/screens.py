"""Synonym-based screen routing for commands no classifier handled.

When a command ends up unhandled, a bare screen name ("камера",
"settings") is still a reasonable request to open that screen. Compound
phrases are checked first so that "language settings" opens the
language screen rather than general settings.
"""

from __future__ import annotations

import re
from typing import Final

from vocalnav.core.text import normalize
from vocalnav.core.types import Route

SCREEN_SYNONYMS: Final[dict[Route, dict[str, tuple[str, ...]]]] = {
    Route.SPEECH: {
        "ru": (
            "озвучка", "озвучку", "озвучивание", "настройки озвучки", "голос",
            "голосовые настройки", "звук", "речь", "синтез речи", "синтезатор речи",
            "ттс", "прочитай вслух", "чтение вслух", "диктор", "объявления",
        ),
        "en": (
            "speech", "voice", "audio", "sound", "tts", "text to speech", "read aloud",
            "narrator", "voice over", "voiceover", "spoken output", "announcements",
            "speech settings", "speak",
        ),
    },
    Route.LANGUAGE: {
        "ru": (
            "язык", "языки", "локализация", "локаль", "сменить язык", "выбор языка",
            "настройки языка", "языковые настройки", "переключить язык",
        ),
        "en": (
            "language", "languages", "locale", "localization", "change language",
            "switch language", "select language", "language settings",
            "language preferences",
        ),
    },
    Route.INPUT: {
        "ru": (
            "ввод", "ввод текста", "способ ввода", "тип ввода", "клавиатура",
            "раскладка", "набор текста", "печатать", "вводить текст",
        ),
        "en": (
            "input", "text input", "text entry", "keyboard", "keyboards",
            "keyboard layout", "typing", "input method", "enter text",
        ),
    },
    Route.CAMERA: {
        "ru": (
            "камера", "камеру", "фото", "снимок", "съёмка", "сфотографировать",
            "сделать фото", "фотокамера", "фотоаппарат", "режим камеры", "открыть камеру",
        ),
        "en": (
            "camera", "photo", "picture", "capture", "snap", "take photo",
            "open camera", "camera mode",
        ),
    },
    Route.NAVIGATION: {
        "ru": (
            "навигация", "навигацию", "маршрут", "направление", "карта", "карты",
            "навигатор", "gps", "джи пи эс", "куда идти", "ориентирование",
            "построить маршрут",
        ),
        "en": (
            "navigation", "route", "directions", "map", "maps", "navigator", "gps",
            "wayfinding", "routing", "turn by turn",
        ),
    },
    Route.EXPLORE: {
        "ru": (
            "исследование", "исследовать", "поиск", "обзор", "изучение", "обзор мест",
            "рекомендации", "каталог", "просмотр", "лента",
        ),
        "en": (
            "explore", "search", "discover", "browse", "feed", "trending",
            "catalog", "nearby", "suggestions",
        ),
    },
    Route.SUPPORT: {
        "ru": ("поддержка", "поддержку", "хелп", "помощь"),
        "en": ("support", "help"),
    },
    Route.INFO: {
        "ru": (
            "информация", "инфо", "сведения", "справка", "о программе",
            "о приложении", "документация", "частые вопросы",
        ),
        "en": ("info", "information", "about", "about app", "docs", "documentation", "faq"),
    },
    Route.SETTINGS: {
        "ru": (
            "настройки", "параметры", "опции", "меню настроек", "общие настройки",
            "системные настройки", "конфигурация", "предпочтения",
        ),
        "en": (
            "settings", "options", "preferences", "prefs", "configuration",
            "config", "setup", "settings menu",
        ),
    },
}


def _compile(synonyms: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(
        re.escape(normalize(s)) for s in sorted(synonyms, key=len, reverse=True)
    )
    return re.compile(rf"\b(?:{alternatives})\b")


_PATTERNS: Final[dict[str, tuple[tuple[Route, re.Pattern[str]], ...]]] = {
    lang: tuple(
        (route, _compile(by_lang[lang])) for route, by_lang in SCREEN_SYNONYMS.items()
    )
    for lang in ("ru", "en")
}


def compound_screen_from_text(text: str) -> Route | None:
    """Higher-priority multi-keyword phrases."""
    t = normalize(text)
    if "настройки языка" in t or "языковые настройки" in t or ("настрой" in t and "язык" in t):
        return Route.LANGUAGE
    if "language settings" in t or ("settings" in t and "language" in t):
        return Route.LANGUAGE
    return None


def screen_from_text(text: str, language: str = "ru") -> Route | None:
    """Find a route for *text*.

    Compound phrases first, then synonyms of *language*, then synonyms of
    the other supported language.
    """
    t = normalize(text)
    if not t:
        return None
    compound = compound_screen_from_text(t)
    if compound is not None:
        return compound
    order = (language, "en" if language == "ru" else "ru")
    for lang in order:
        for route, pattern in _PATTERNS.get(lang, ()):
            if pattern.search(t):
                return route
    return None
