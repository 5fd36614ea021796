"""Base interface shared by rating providers."""

from abc import ABC, abstractmethod
from typing import Any

MIN_RATING = 1
MAX_RATING = 10


class RatingProvider(ABC):
    """Abstract interface for a judge that rates images on a 1-10 scale."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        pass

    @abstractmethod
    async def rate_image(self, image_base64: str, question: str) -> int:
        """Rate an image in answer to a question.

        Args:
            image_base64: Base64 image payload, optionally a data URL
            question: The question the rating answers

        Returns:
            Rating between 1 and 10
        """
        pass

    @abstractmethod
    async def is_available(self) -> bool:
        """Check whether the provider can currently serve ratings."""
        pass

    @abstractmethod
    def get_info(self) -> dict[str, Any]:
        """Describe the provider for display."""
        pass
