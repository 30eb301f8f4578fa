"""Public API for vocalnav command interpretation.

litellm is only imported when a remote classification actually runs, so
``import vocalnav.api`` is cheap.

Typical usage::

    import asyncio
    from vocalnav.api import build_resolver, interpret, CommandContext

    resolver = build_resolver()
    outcome = asyncio.run(interpret("открой настройки языка", resolver))
    print(outcome.action)
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from vocalnav.core.config import ClassifierConfig
from vocalnav.core.dispatch import CommandContext, dispatch
from vocalnav.core.lexical import LexicalMatcher, has_activation_phrase
from vocalnav.core.remote import RemoteClassifier
from vocalnav.core.resolver import IntentResolver
from vocalnav.core.types import Action, ClassificationResult, SetMode


@dataclass(frozen=True, slots=True)
class Interpretation:
    """Immutable result of interpreting one utterance.

    Attributes:
        result: The classification, or None when an activation phrase
            short-circuited classification.
        action: The single action to perform.
        context: Context to pass with the next utterance.
        latency_ms: Wall-clock time spent resolving and dispatching.
    """

    result: ClassificationResult | None
    action: Action
    context: CommandContext
    latency_ms: float


def build_resolver(
    config: ClassifierConfig | None = None,
    *,
    offline: bool = False,
) -> IntentResolver:
    """Create a resolver: remote classifier first, keyword rules as fallback.

    Args:
        config: Remote classifier settings (defaults to :class:`ClassifierConfig`).
        offline: Skip the remote classifier entirely.

    Returns:
        An :class:`IntentResolver` that never raises.
    """
    cfg = config or ClassifierConfig()
    primary = None if offline or not cfg.enabled else RemoteClassifier(cfg)
    return IntentResolver(primary=primary, fallback=LexicalMatcher())


async def interpret(
    text: str,
    resolver: IntentResolver | None = None,
    context: CommandContext | None = None,
    *,
    exit_on_preference: bool = False,
) -> Interpretation:
    """Resolve and dispatch one utterance without touching collaborators.

    Args:
        text: Transcribed utterance, untrimmed.
        resolver: Resolver to use (defaults to an offline keyword resolver).
        context: Current voice-navigation flag and preferences.
        exit_on_preference: Leave voice-navigation mode after preference writes.

    Returns:
        An :class:`Interpretation`; apply ``action`` and keep ``context``.
    """
    resolver = resolver or build_resolver(offline=True)
    ctx = context or CommandContext()

    start = time.perf_counter()
    if not ctx.voice_nav_active and has_activation_phrase(text):
        return Interpretation(
            result=None,
            action=SetMode(True),
            context=ctx.with_mode(True),
            latency_ms=(time.perf_counter() - start) * 1000,
        )

    result = await resolver.resolve(text)
    outcome = dispatch(result, ctx, exit_on_preference=exit_on_preference)
    return Interpretation(
        result=result,
        action=outcome.action,
        context=outcome.context,
        latency_ms=(time.perf_counter() - start) * 1000,
    )
