"""Experiment configuration."""

from rating_ab.core.config.experiment_config import (
    ExperimentConfig,
    load_experiment_config,
)

__all__ = ["ExperimentConfig", "load_experiment_config"]
