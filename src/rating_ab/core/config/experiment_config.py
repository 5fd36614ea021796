"""Experiment configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rating_ab.core.stats.welch import DEFAULT_ALPHA

DEFAULT_QUESTION = "How visually appealing is this image on a scale of 1 to 10?"


class ExperimentConfig(BaseModel):
    """Settings for one rating experiment."""

    model_config = ConfigDict(extra="forbid")

    provider: str = "mock"
    provider_options: dict[str, Any] = Field(default_factory=dict)
    question: str = DEFAULT_QUESTION
    sample_size: int = Field(default=50, ge=2)
    alpha: float = Field(default=DEFAULT_ALPHA, gt=0, lt=1)

    def merged(self, **overrides: Any) -> "ExperimentConfig":
        """Return a copy with non-None overrides applied and re-validated."""
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "provider_options":
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        return ExperimentConfig.model_validate(data)


def load_experiment_config(path: Path | None) -> ExperimentConfig:
    """Load an experiment configuration from a YAML file.

    No path yields the defaults.

    Raises:
        ValueError: If the file cannot be read, is not valid YAML or fails
            validation
    """
    if path is None:
        return ExperimentConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ValueError(f"Failed to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Experiment config {path} must be a mapping")

    try:
        return ExperimentConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid experiment config {path}: {e}") from e
