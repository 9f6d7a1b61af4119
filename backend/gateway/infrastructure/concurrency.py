"""Capability Gates — bounded in-flight upstream calls per capability.

Invariants:
    - At most `limit` calls per Capability are in flight at once
    - limit <= 0 disables gating entirely
    - Gates for different capabilities never block each other
    - Semaphores created lazily, on first use, inside the running event loop
"""

import asyncio
from collections import Counter
from contextlib import asynccontextmanager
from typing import AsyncIterator

from gateway.core.domain_types import Capability


class CapabilityGates:
    """One asyncio.Semaphore per Capability."""

    def __init__(self, limit: int):
        self.limit = limit
        self._semaphores: dict[Capability, asyncio.Semaphore] = {}
        self._in_flight: Counter[Capability] = Counter()

    def _semaphore(self, capability: Capability) -> asyncio.Semaphore:
        sem = self._semaphores.get(capability)
        if sem is None:
            sem = asyncio.Semaphore(self.limit)
            self._semaphores[capability] = sem
        return sem

    @asynccontextmanager
    async def acquire(self, capability: Capability) -> AsyncIterator[None]:
        """Hold a slot for capability for the duration of the block."""
        if self.limit <= 0:
            yield
            return
        async with self._semaphore(capability):
            self._in_flight[capability] += 1
            try:
                yield
            finally:
                self._in_flight[capability] -= 1

    def in_flight(self, capability: Capability) -> int:
        """Number of gated calls currently running for capability."""
        return self._in_flight[capability]
