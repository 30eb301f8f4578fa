"""Remote-first intent resolution with a deterministic fallback."""

from __future__ import annotations

from vocalnav.core.env import LOGGER
from vocalnav.core.lexical import LexicalMatcher
from vocalnav.core.protocols import ClassifierLike
from vocalnav.core.types import ClassificationResult


class IntentResolver:
    """Tries *primary*, substitutes *fallback* on any failure.

    No retry and no blending: either the primary result is returned
    as-is or the fallback result for the same text is. ``resolve`` never
    raises (cancellation aside).
    """

    def __init__(
        self,
        primary: ClassifierLike | None = None,
        fallback: LexicalMatcher | None = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback or LexicalMatcher()

    async def resolve(self, text: str) -> ClassificationResult:
        if self.primary is None or not text.strip():
            return self.fallback.match(text)
        try:
            return await self.primary.classify(text)
        except Exception as exc:
            LOGGER.warning("Remote classifier unavailable, using keyword rules: %s", exc)
            return self.fallback.match(text)
