"""Default configuration values for vocalnav."""

from typing import Final

# Confidence gate applied by the dispatcher (inclusive).
MIN_CONFIDENCE: Final = 0.55

# Remote classifier
DEFAULT_LLM_MODEL: Final = "openai/gpt-4o-mini"
DEFAULT_CLASSIFIER_TIMEOUT: Final = 8.0
DEFAULT_CLASSIFIER_TEMPERATURE: Final = 0.0
DEFAULT_CLASSIFIER_MAX_TOKENS: Final = 200

# Lexical fallback scores
RULE_CONFIDENCE_SCREEN: Final = 0.6
RULE_CONFIDENCE_SETTING: Final = 0.65
RULE_CONFIDENCE_STRONG: Final = 0.7

# Playback rates per speech speed tier
SPEECH_RATES: Final = {"fast": 1.15, "medium": 1.0, "slow": 0.85}

# Config / storage
DEFAULT_CONFIG_DIR: Final = "~/.config/vocalnav"
DEFAULT_CONFIG_DIR_ENV: Final = "VOCALNAV_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"
DEFAULT_PROMPT_FILE: Final = "prompt.md"
DEFAULT_STORE_FILE: Final = "~/.local/share/vocalnav/preferences.json"

DEFAULT_CLASSIFIER_PROMPT: Final = """You are an intent classifier for a mobile app for blind users.
Understand Russian, English and Kazakh. Reply with ONLY a compact JSON object.
Supported intents and slots:
- OPEN_SETTINGS
- OPEN_LANGUAGE
- OPEN_SPEECH
- OPEN_INPUT
- OPEN_SUPPORT
- GO_BACK
- ACTIVATE_VOICE_NAV
- DEACTIVATE_VOICE_NAV
- SET_LANGUAGE { slots: { language: one of ["ru","en","kk"] } }
- SET_INPUT_METHOD { slots: { method: one of ["voice","keyboard"] } }
- SET_SPEECH_ENABLE { slots: { enable: boolean } }
- SET_SPEECH_SPEED { slots: { speed: one of ["fast","medium","slow"] } }
- SET_WARNING { slots: { warning: one of ["voice","vibration","none"] } }
- UNKNOWN
Return strict JSON: {"intent":"...","confidence":0.0-1.0,"slots":{...}} with lowercase slot values.
Examples: "перейди в настройки языка" -> OPEN_LANGUAGE; "назад" -> GO_BACK;
"go back" -> GO_BACK; "open support" -> OPEN_SUPPORT;
"включи озвучку" -> SET_SPEECH_ENABLE {enable:true}; "медленная речь" -> SET_SPEECH_SPEED {speed:"slow"};
"выбери казахский" -> SET_LANGUAGE {language:"kk"}; "клавиатура" -> SET_INPUT_METHOD {method:"keyboard"};
"warn me with vibration" -> SET_WARNING {warning:"vibration"};
If unclear, choose UNKNOWN with low confidence."""
