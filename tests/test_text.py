"""Tests for vocalnav.core.text — corrections and normalization."""

from __future__ import annotations

from vocalnav.core.text import apply_vocab, normalize


class TestApplyVocab:
    def test_case_insensitive_replacement(self) -> None:
        result = apply_vocab("Открой НАСТОРОЙКИ", {"насторойки": "настройки"})
        assert result == "Открой настройки"

    def test_multiple_replacements(self) -> None:
        vocab = {"lang which": "language", "setings": "settings"}
        result = apply_vocab("open lang which setings", vocab)
        assert result == "open language settings"

    def test_empty_vocab_no_change(self) -> None:
        text = "назад"
        assert apply_vocab(text, {}) == text


class TestNormalize:
    def test_casefold_and_trim(self) -> None:
        assert normalize("  Назад  ") == "назад"

    def test_collapses_whitespace(self) -> None:
        assert normalize("language\t  settings\n") == "language settings"

    def test_yo_folds_to_ye(self) -> None:
        assert normalize("Съёмка") == "съемка"

    def test_empty_and_none(self) -> None:
        assert normalize("") == ""
        assert normalize("   ") == ""
        assert normalize(None) == ""
