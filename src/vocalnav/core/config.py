"""Frozen configuration dataclass for the remote classifier."""

from dataclasses import dataclass

from vocalnav.core.constants import (
    DEFAULT_CLASSIFIER_MAX_TOKENS,
    DEFAULT_CLASSIFIER_PROMPT,
    DEFAULT_CLASSIFIER_TEMPERATURE,
    DEFAULT_CLASSIFIER_TIMEOUT,
    DEFAULT_LLM_MODEL,
)


@dataclass(frozen=True, slots=True)
class ClassifierConfig:
    """Remote intent classifier settings.

    Attributes:
        model: litellm model string (``provider/model``).
        enabled: When False the resolver runs offline, lexical rules only.
        timeout: Upper bound in seconds for one completion call.
        temperature: Sampling temperature; 0 keeps labels stable.
        max_tokens: Completion budget. The reply is a single small object.
        prompt: Instruction document sent as the system message.
        api_base: Optional endpoint override (e.g. a local Ollama server).
    """

    model: str = DEFAULT_LLM_MODEL
    enabled: bool = True
    timeout: float = DEFAULT_CLASSIFIER_TIMEOUT
    temperature: float = DEFAULT_CLASSIFIER_TEMPERATURE
    max_tokens: int = DEFAULT_CLASSIFIER_MAX_TOKENS
    prompt: str = DEFAULT_CLASSIFIER_PROMPT
    api_base: str | None = None
