"""Experiment execution components."""

from rating_ab.core.execution.experiment_runner import ExperimentRunner
from rating_ab.core.execution.result_types import ExperimentResult, ImageRatings

__all__ = ["ExperimentResult", "ExperimentRunner", "ImageRatings"]
