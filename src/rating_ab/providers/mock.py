"""Mock provider that simulates judge ratings without external services."""

import asyncio
import math
import random
from typing import Any

from rating_ab.providers.base import MAX_RATING, MIN_RATING, RatingProvider

_HASH_SAMPLE_SIZE = 1000


def simple_hash(text: str) -> int:
    """Non-negative 32-bit rolling hash over the first 1000 characters."""
    value = 0
    for char in text[:_HASH_SAMPLE_SIZE]:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    # Reinterpret as signed 32-bit before taking the magnitude
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


class MockProvider(RatingProvider):
    """Mock provider for testing.

    The base rating (3-7) is derived from the image payload so one image
    rates consistently, with uniform jitter of +/-2 on every call.
    """

    def __init__(
        self,
        delay: tuple[float, float] = (20, 50),
        rng: random.Random | None = None,
    ) -> None:
        """Initialize mock provider.

        Args:
            delay: Min and max simulated latency in milliseconds
            rng: Random source, seed it for reproducible ratings
        """
        self.delay = delay
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "mock"

    async def rate_image(self, image_base64: str, question: str) -> int:
        min_ms, max_ms = self.delay
        delay_ms = min_ms + self._rng.random() * (max_ms - min_ms)
        await asyncio.sleep(delay_ms / 1000)

        base_rating = 3 + simple_hash(image_base64) % 5
        variation = (self._rng.random() - 0.5) * 4
        clamped = min(MAX_RATING, max(MIN_RATING, base_rating + variation))
        return math.floor(clamped + 0.5)

    async def is_available(self) -> bool:
        return True

    def get_info(self) -> dict[str, Any]:
        return {
            "name": "Mock Provider",
            "description": "Simulated responses for testing",
            "supports_vision": True,
        }
