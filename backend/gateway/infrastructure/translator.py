"""Translator — async wrapper over deep-translator's GoogleTranslator.

Invariants:
    - Source language always auto-detected
    - Blocking HTTP call runs in a worker thread (event loop never blocks)
    - Errors propagate unchanged: the caller surfaces the upstream message verbatim
    - Empty/None translation result → UpstreamMalformedResponseError

Design Decisions:
    - deep-translator GoogleTranslator: free, no API key
    - No cache: each request performs exactly one outbound call
"""

import asyncio

from deep_translator import GoogleTranslator

from gateway.core.errors import UpstreamMalformedResponseError

SOURCE = "google-translate"


class Translator:
    """Translates text to a target language code (e.g. "en", "pt", "zh-CN")."""

    async def translate(self, text: str, target: str) -> str:
        result = await asyncio.to_thread(self._translate_sync, text, target)
        if not result:
            raise UpstreamMalformedResponseError(
                "Empty translation returned by google-translate", SOURCE,
            )
        return result

    def _translate_sync(self, text: str, target: str) -> str | None:
        return GoogleTranslator(source="auto", target=target).translate(text)
