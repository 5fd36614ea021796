"""Rating providers: sources of numeric ratings for an image."""

from rating_ab.providers.base import RatingProvider
from rating_ab.providers.mock import MockProvider
from rating_ab.providers.ollama import OllamaProvider

__all__ = ["MockProvider", "OllamaProvider", "RatingProvider"]
