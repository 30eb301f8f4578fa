"""LLM-backed intent classification via litellm.

Sends the utterance with a fixed instruction document and expects a
single JSON object ``{"intent", "confidence", "slots"}`` back. One
attempt only; every failure raises :class:`ClassifierUnavailable` so
the resolver can fall back.
"""

from __future__ import annotations

import asyncio
import json
import math
import re
from typing import Any

from vocalnav.core.config import ClassifierConfig
from vocalnav.core.env import LOGGER
from vocalnav.core.errors import ClassifierUnavailable
from vocalnav.core.types import ClassificationResult, Intent, Slots

_THINK_TAGS = re.compile(r"<think>.*?</think>", re.DOTALL)


def _parse_confidence(raw: Any) -> float:
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        raise ClassifierUnavailable(f"confidence is not a number: {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ClassifierUnavailable(f"confidence is not a number: {raw!r}") from exc
    if math.isnan(value):
        raise ClassifierUnavailable("confidence is NaN")
    clamped = min(1.0, max(0.0, value))
    if clamped != value:
        LOGGER.debug("Clamped remote confidence %s to %s", value, clamped)
    return clamped


def parse_response(content: str) -> ClassificationResult:
    """Parse a completion body into a result.

    Unrecognized intent labels become ``UNKNOWN`` with the reported
    confidence; structural problems raise :class:`ClassifierUnavailable`.
    """
    body = _THINK_TAGS.sub("", content).strip()
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ClassifierUnavailable(f"response is not JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ClassifierUnavailable("response is not a JSON object")

    raw_intent = data.get("intent")
    if not isinstance(raw_intent, str) or not raw_intent.strip():
        raise ClassifierUnavailable("response has no intent")

    intent = Intent.parse(raw_intent)
    if intent is Intent.UNKNOWN and raw_intent.strip().upper() != Intent.UNKNOWN:
        LOGGER.debug("Remote model returned unsupported intent %r", raw_intent)

    return ClassificationResult(
        intent=intent,
        confidence=_parse_confidence(data.get("confidence")),
        slots=Slots.from_mapping(data.get("slots")),
        source="remote",
    )


class RemoteClassifier:
    """Classifier backed by a chat-completion endpoint."""

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        self.config = config or ClassifierConfig()

    def complete(self, text: str) -> str:
        """Run one completion and return the raw message content.

        This is a blocking call designed to be run via ``asyncio.to_thread``.
        The litellm import is deferred to keep ``import vocalnav`` cheap.
        """
        from litellm import completion  # deferred import

        kwargs: dict[str, Any] = {}
        if self.config.api_base:
            kwargs["api_base"] = self.config.api_base

        try:
            response = completion(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": self.config.prompt},
                    {"role": "user", "content": text},
                ],
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
                timeout=self.config.timeout,
                **kwargs,
            )
        except Exception as exc:
            raise ClassifierUnavailable(f"completion failed: {exc}") from exc

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ClassifierUnavailable("completion has no message") from exc
        if not content:
            raise ClassifierUnavailable("completion is empty")
        return content

    async def classify(self, text: str) -> ClassificationResult:
        try:
            content = await asyncio.wait_for(
                asyncio.to_thread(self.complete, text),
                timeout=self.config.timeout,
            )
        except TimeoutError as exc:
            raise ClassifierUnavailable(
                f"no reply within {self.config.timeout:g}s"
            ) from exc
        return parse_response(content)
