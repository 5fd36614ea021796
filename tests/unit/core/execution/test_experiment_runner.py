"""Tests for the experiment runner."""

import itertools
import math
import random
from typing import Any

import pytest

from rating_ab.core.execution.experiment_runner import ExperimentRunner
from rating_ab.provider_registry import ProviderRegistry
from rating_ab.providers.base import RatingProvider
from rating_ab.providers.mock import MockProvider


class ScriptedProvider(RatingProvider):
    """Provider cycling through fixed ratings per image."""

    def __init__(
        self, ratings: dict[str, list[int]], available: bool = True
    ) -> None:
        self._ratings = {
            image: itertools.cycle(values) for image, values in ratings.items()
        }
        self._available = available
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "scripted"

    async def rate_image(self, image_base64: str, question: str) -> int:
        self.calls.append(image_base64)
        return next(self._ratings[image_base64])

    async def is_available(self) -> bool:
        return self._available

    def get_info(self) -> dict[str, Any]:
        return {"name": "Scripted"}


def _registry(provider: RatingProvider) -> ProviderRegistry:
    registry = ProviderRegistry()
    registry.register("scripted", lambda **_: provider)
    return registry


class TestExperimentRunner:
    """Scenario: collecting ratings and testing the difference."""

    @pytest.mark.asyncio
    async def test_collects_image1_then_image2(self) -> None:
        provider = ScriptedProvider({"img1": [8], "img2": [3]})
        runner = ExperimentRunner(_registry(provider))

        result = await runner.run(
            "img1", "img2", "q", provider_name="scripted", sample_size=3
        )

        assert provider.calls == ["img1"] * 3 + ["img2"] * 3
        assert result.image1.ratings == [8, 8, 8]
        assert result.image2.ratings == [3, 3, 3]
        assert result.image1.mean == 8
        assert result.image2.std == 0
        assert result.provider == {"name": "Scripted"}

    @pytest.mark.asyncio
    async def test_reports_progress(self) -> None:
        provider = ScriptedProvider({"a": [5], "b": [6]})
        runner = ExperimentRunner(_registry(provider))
        updates: list[tuple[int, int]] = []

        await runner.run(
            "a",
            "b",
            "q",
            provider_name="scripted",
            sample_size=4,
            on_progress=lambda done, total: updates.append((done, total)),
        )

        assert updates == [(i, 8) for i in range(1, 9)]

    @pytest.mark.asyncio
    async def test_unavailable_provider_raises(self) -> None:
        provider = ScriptedProvider({}, available=False)
        runner = ExperimentRunner(_registry(provider))

        with pytest.raises(RuntimeError, match='Provider "scripted" is not available'):
            await runner.run("a", "b", "q", provider_name="scripted")

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_unknown_provider_raises(self) -> None:
        runner = ExperimentRunner(ProviderRegistry())
        with pytest.raises(ValueError, match="Unknown provider"):
            await runner.run("a", "b", "q", provider_name="missing")

    @pytest.mark.asyncio
    async def test_constant_ratings_are_significant(self) -> None:
        provider = ScriptedProvider({"good": [9], "bad": [2]})
        runner = ExperimentRunner(_registry(provider))

        result = await runner.run(
            "good", "bad", "q", provider_name="scripted", sample_size=10
        )

        assert result.statistics.is_significant is True
        assert result.statistics.t_statistic == math.inf

    @pytest.mark.asyncio
    async def test_alpha_passed_through(self) -> None:
        provider = ScriptedProvider(
            {
                "a": [7, 8, 7, 9, 8, 7, 8, 9, 7, 8],
                "b": [5, 6, 5, 7, 6, 5, 6, 7, 5, 6],
            }
        )
        runner = ExperimentRunner(_registry(provider))

        lenient = await runner.run(
            "a", "b", "q", provider_name="scripted", sample_size=10
        )
        strict = await runner.run(
            "a", "b", "q", provider_name="scripted", sample_size=10, alpha=1e-5
        )

        assert lenient.statistics.is_significant is True
        assert strict.statistics.is_significant is False

    @pytest.mark.asyncio
    async def test_provider_config_forwarded(self) -> None:
        registry = ProviderRegistry()
        created: list[dict[str, Any]] = []

        def build(**config: Any) -> RatingProvider:
            created.append(config)
            return MockProvider(delay=(0, 0), rng=random.Random(3))

        registry.register("mock", build)
        runner = ExperimentRunner(registry)

        result = await runner.run(
            "a",
            "b",
            "q",
            provider_name="mock",
            provider_config={"delay": (0, 0)},
            sample_size=5,
        )

        assert created == [{"delay": (0, 0)}]
        assert len(result.image1.ratings) == 5

    @pytest.mark.asyncio
    async def test_to_dict(self) -> None:
        provider = ScriptedProvider({"a": [7], "b": [4]})
        runner = ExperimentRunner(_registry(provider))

        result = await runner.run(
            "a", "b", "q", provider_name="scripted", sample_size=2
        )
        data = result.to_dict()

        assert data["image1"] == {"ratings": [7, 7], "mean": 7.0, "std": 0.0}
        assert set(data["statistics"]) == {
            "t_statistic",
            "degrees_of_freedom",
            "p_value",
            "is_significant",
            "effect_size",
        }
        assert data["provider"] == {"name": "Scripted"}
