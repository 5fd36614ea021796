"""Typed result models for rating experiments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rating_ab.core.stats.result_types import TestResult


@dataclass
class ImageRatings:
    """Ratings collected for one image and their summary."""

    ratings: list[int]
    mean: float
    std: float

    def to_dict(self) -> dict[str, Any]:
        return {"ratings": list(self.ratings), "mean": self.mean, "std": self.std}


@dataclass
class ExperimentResult:
    """Outcome of comparing two images with repeated judge ratings."""

    image1: ImageRatings
    image2: ImageRatings
    statistics: TestResult
    provider: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for JSON output."""
        statistics = self.statistics.to_dict()
        for key in ("mean1", "mean2", "std1", "std2"):
            statistics.pop(key)
        return {
            "image1": self.image1.to_dict(),
            "image2": self.image2.to_dict(),
            "statistics": statistics,
            "provider": dict(self.provider),
        }
