"""Collect ratings for two images and compare them."""

import logging
from collections.abc import Callable
from typing import Any

from rating_ab.core.execution.result_types import ExperimentResult, ImageRatings
from rating_ab.core.stats.welch import DEFAULT_ALPHA, independent_t_test
from rating_ab.provider_registry import ProviderRegistry
from rating_ab.providers.base import RatingProvider

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class ExperimentRunner:
    """Runs A/B rating experiments against a registered provider."""

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry

    async def run(
        self,
        image1: str,
        image2: str,
        question: str,
        *,
        provider_name: str = "mock",
        provider_config: dict[str, Any] | None = None,
        sample_size: int = 50,
        alpha: float = DEFAULT_ALPHA,
        on_progress: ProgressCallback | None = None,
    ) -> ExperimentResult:
        """Rate each image ``sample_size`` times and test the difference.

        Images are rated sequentially, all of image 1 first, so a remote
        judge only ever sees one request at a time.

        Args:
            image1: Base64 payload of the first image
            image2: Base64 payload of the second image
            question: Question put to the judge for every rating
            provider_name: Registered provider to use
            provider_config: Keyword arguments for the provider
            sample_size: Ratings to collect per image
            alpha: Significance threshold
            on_progress: Called with (completed, total) after each rating

        Returns:
            Ratings, statistics and provider description

        Raises:
            ValueError: If the provider name is unknown
            RuntimeError: If the provider is not available
        """
        provider = self._registry.create(provider_name, **(provider_config or {}))

        if not await provider.is_available():
            raise RuntimeError(
                f'Provider "{provider_name}" is not available. '
                "Make sure the service is running."
            )

        total = sample_size * 2
        logger.info(
            "Collecting %d ratings per image from %s", sample_size, provider.name
        )

        completed = 0

        async def collect(image: str) -> list[int]:
            nonlocal completed
            ratings: list[int] = []
            for _ in range(sample_size):
                ratings.append(await provider.rate_image(image, question))
                completed += 1
                if on_progress is not None:
                    on_progress(completed, total)
            return ratings

        ratings1 = await collect(image1)
        ratings2 = await collect(image2)

        return self._build_result(provider, ratings1, ratings2, alpha)

    @staticmethod
    def _build_result(
        provider: RatingProvider,
        ratings1: list[int],
        ratings2: list[int],
        alpha: float,
    ) -> ExperimentResult:
        stats = independent_t_test(ratings1, ratings2, alpha=alpha)
        logger.info(
            "Experiment finished: t=%.4f df=%.2f p=%.4g",
            stats.t_statistic,
            stats.degrees_of_freedom,
            stats.p_value,
        )
        return ExperimentResult(
            image1=ImageRatings(ratings=ratings1, mean=stats.mean1, std=stats.std1),
            image2=ImageRatings(ratings=ratings2, mean=stats.mean2, std=stats.std2),
            statistics=stats,
            provider=provider.get_info(),
        )
