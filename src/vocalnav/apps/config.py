"""Application-level configuration.

Loads ``~/.config/vocalnav/config.json`` into frozen dataclasses::

    {
      "classifier": {"model": "ollama/qwen2.5", "timeout": 5, "prompt_file": "prompt.md"},
      "session": {"screen_fallback": true, "exit_on_preference": false},
      "corrections": {"насторойки": "настройки"}
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from vocalnav.core.config import ClassifierConfig
from vocalnav.core.constants import (
    DEFAULT_CLASSIFIER_MAX_TOKENS,
    DEFAULT_CLASSIFIER_PROMPT,
    DEFAULT_CLASSIFIER_TEMPERATURE,
    DEFAULT_CLASSIFIER_TIMEOUT,
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
    DEFAULT_LLM_MODEL,
    DEFAULT_PROMPT_FILE,
    DEFAULT_STORE_FILE,
)
from vocalnav.core.errors import ConfigError

_log = logging.getLogger("vocalnav")


# ---------------------------------------------------------------------------
# Nested config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Command-session behavior."""

    screen_fallback: bool = True
    exit_on_preference: bool = False
    store_file: str = DEFAULT_STORE_FILE


@dataclass(frozen=True, slots=True)
class VocalnavConfig:
    """Top-level configuration loaded from ~/.config/vocalnav/config.json."""

    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    corrections: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Config loading helpers
# ---------------------------------------------------------------------------


def config_dir() -> Path:
    """Config directory, honoring ``VOCALNAV_CONFIG_DIR``."""
    return Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()


def _resolve_config_path(base: Path, path_str: str) -> Path:
    """Resolve a path relative to *base*. Absolute paths used as-is."""
    p = Path(path_str).expanduser()
    if p.is_absolute():
        return p
    return base / p


def _resolve_prompt(base: Path, section: dict[str, Any]) -> str | None:
    """Resolve ``prompt`` / ``prompt_file`` from the classifier section."""
    prompt = section.get("prompt")
    prompt_file = section.get("prompt_file")
    if prompt and prompt_file:
        _log.debug("Both 'prompt' and 'prompt_file' in classifier; using 'prompt_file'")
    if prompt_file:
        path = _resolve_config_path(base, str(prompt_file))
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"cannot read prompt file {path}: {exc}") from exc
    if prompt:
        return str(prompt)
    return None


def _read_default_prompt_file(base: Path) -> str | None:
    path = base / DEFAULT_PROMPT_FILE
    if path.exists():
        return path.read_text(encoding="utf-8").strip() or None
    return None


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    raw = data.get(name, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"'{name}' must be an object")
    return raw


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(path: str | None = None) -> VocalnavConfig:
    """Load vocalnav configuration from a JSON file.

    Reads ``~/.config/vocalnav/config.json`` (or *path*). A ``prompt.md``
    next to the config overrides the built-in classifier prompt unless the
    config names one itself.

    Returns a default config if the file does not exist. Raises
    :class:`ConfigError` when the file is not valid JSON or a section has
    the wrong shape.
    """
    base = config_dir()
    config_path = Path(path).expanduser() if path else base / DEFAULT_CONFIG_FILE

    if not config_path.exists():
        prompt = _read_default_prompt_file(base)
        if prompt:
            return VocalnavConfig(classifier=ClassifierConfig(prompt=prompt))
        return VocalnavConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc

    if not isinstance(data, dict):
        _log.warning("Ignoring %s: top level is not an object", config_path)
        return VocalnavConfig()

    # -- classifier --------------------------------------------------------
    cls_raw = _section(data, "classifier")
    prompt = _resolve_prompt(base, cls_raw) or _read_default_prompt_file(base)
    try:
        classifier = ClassifierConfig(
            model=str(cls_raw.get("model", DEFAULT_LLM_MODEL)),
            enabled=bool(cls_raw.get("enabled", True)),
            timeout=float(cls_raw.get("timeout", DEFAULT_CLASSIFIER_TIMEOUT)),
            temperature=float(cls_raw.get("temperature", DEFAULT_CLASSIFIER_TEMPERATURE)),
            max_tokens=int(cls_raw.get("max_tokens", DEFAULT_CLASSIFIER_MAX_TOKENS)),
            prompt=prompt or DEFAULT_CLASSIFIER_PROMPT,
            api_base=cls_raw.get("api_base"),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{config_path}: bad classifier value: {exc}") from exc

    # -- session -----------------------------------------------------------
    sess_raw = _section(data, "session")
    session = SessionConfig(
        screen_fallback=bool(sess_raw.get("screen_fallback", True)),
        exit_on_preference=bool(sess_raw.get("exit_on_preference", False)),
        store_file=str(sess_raw.get("store_file", DEFAULT_STORE_FILE)),
    )

    # -- corrections -------------------------------------------------------
    corrections = {str(k): str(v) for k, v in _section(data, "corrections").items()}

    return VocalnavConfig(
        classifier=classifier,
        session=session,
        corrections=corrections,
    )
