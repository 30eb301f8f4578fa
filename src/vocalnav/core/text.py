"""Text processing utilities applied to utterances before classification.

Contains the ASR corrections dictionary and the normalization shared by
the lexical matcher, the screen router and the activation spotter.
"""

import re

_WHITESPACE = re.compile(r"\s+")


def apply_vocab(text: str, vocab: dict[str, str]) -> str:
    """Apply vocabulary corrections to text.

    Each key in *vocab* is matched case-insensitively and replaced with
    the corresponding value. Used for recurring ASR misrecognitions.
    """
    for wrong, correct in vocab.items():
        pattern = re.compile(re.escape(wrong), re.IGNORECASE)
        text = pattern.sub(correct, text)
    return text


def normalize(text: str | None) -> str:
    """Case-fold, trim and collapse whitespace. ``ё`` folds to ``е``."""
    if not text:
        return ""
    folded = text.casefold().replace("ё", "е")
    return _WHITESPACE.sub(" ", folded).strip()
