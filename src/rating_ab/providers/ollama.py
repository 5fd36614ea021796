"""Ollama provider using a local vision model as the judge."""

import logging
import re
from typing import Any

import httpx
import ollama

from rating_ab.providers.base import RatingProvider

logger = logging.getLogger(__name__)

DEFAULT_HOST = "http://localhost:11434"
DEFAULT_MODEL = "llama3.2-vision:latest"
FALLBACK_RATING = 5

_DATA_URL_PREFIX = re.compile(r"^data:image/[a-z]+;base64,")
_RATING_PATTERN = re.compile(r"\b([1-9]|10)\b")

_RATING_INSTRUCTION = (
    "IMPORTANT: You must respond with ONLY a single number between 1 and 10. "
    "No words, no explanation, just the number."
)

# Raised by the ollama client when the server is unreachable or errors
_CLIENT_ERRORS = (ollama.ResponseError, httpx.HTTPError, ConnectionError)


def _entry_name(entry: Any) -> str:
    """Model name from a list() entry across ollama client versions."""
    return str(entry.get("model") or entry.get("name") or "")


class OllamaProvider(RatingProvider):
    """Ollama provider implementation."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        host: str = DEFAULT_HOST,
        *,
        temperature: float = 0.7,
        num_predict: int = 10,
    ) -> None:
        self.model = model
        self.host = host
        self.temperature = temperature
        self.num_predict = num_predict
        self.client = ollama.AsyncClient(host=host)

    @property
    def name(self) -> str:
        return "ollama"

    async def rate_image(self, image_base64: str, question: str) -> int:
        """Ask the model for a rating and parse the first number it returns.

        Raises:
            ollama.ResponseError: If the Ollama API rejects the request
        """
        image_data = _DATA_URL_PREFIX.sub("", image_base64)
        prompt = f"{question}\n\n{_RATING_INSTRUCTION}"

        response = await self.client.chat(
            model=self.model,
            messages=[
                {"role": "user", "content": prompt, "images": [image_data]},
            ],
            stream=False,
            options={
                "temperature": self.temperature,
                "num_predict": self.num_predict,
            },
        )

        content = str(response["message"]["content"] or "").strip()
        return self.extract_rating(content)

    @staticmethod
    def extract_rating(response: str) -> int:
        """Extract a 1-10 rating from free text, defaulting to 5."""
        match = _RATING_PATTERN.search(response)
        if match:
            return int(match.group(1))

        logger.warning(
            "Could not extract rating from %r, using default %d",
            response,
            FALLBACK_RATING,
        )
        return FALLBACK_RATING

    async def list_models(self) -> list[Any]:
        """List models installed on the Ollama server, [] if unreachable."""
        try:
            response = await self.client.list()
        except _CLIENT_ERRORS as e:
            logger.debug("Ollama list failed at %s: %s", self.host, e)
            return []
        return list(response.get("models") or [])

    async def is_available(self) -> bool:
        """True when the server is reachable and has a usable vision model."""
        try:
            response = await self.client.list()
        except _CLIENT_ERRORS as e:
            logger.debug("Ollama not available at %s: %s", self.host, e)
            return False

        names = [_entry_name(entry) for entry in response.get("models") or []]
        return any("vision" in name or name == self.model for name in names)

    def get_info(self) -> dict[str, Any]:
        return {
            "name": "Ollama",
            "description": f"Local LLM inference using {self.model}",
            "supports_vision": True,
            "model": self.model,
            "base_url": self.host,
        }
