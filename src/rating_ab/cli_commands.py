"""Main CLI command implementations."""

import asyncio
from pathlib import Path
from typing import Any

import click
import ollama
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from rating_ab.cli_modules.utils.input_utils import (
    encode_image,
    load_values_file,
    parse_values,
)
from rating_ab.cli_modules.utils.results_display import (
    display_experiment_result,
    display_test_result,
    render_json,
)
from rating_ab.core.config.experiment_config import (
    ExperimentConfig,
    load_experiment_config,
)
from rating_ab.core.execution.experiment_runner import ExperimentRunner
from rating_ab.core.execution.result_types import ExperimentResult
from rating_ab.core.stats.welch import independent_t_test
from rating_ab.provider_registry import ProviderRegistry


def compare_ratings(
    values_a: str | None,
    values_b: str | None,
    file_a: Path | None,
    file_b: Path | None,
    alpha: float,
    output_format: str,
) -> None:
    """Run Welch's t-test on two rating lists and print the result."""
    sample_a = parse_values(values_a) or load_values_file(file_a)
    sample_b = parse_values(values_b) or load_values_file(file_b)
    if not sample_a or not sample_b:
        raise click.ClickException(
            "Provide ratings via --values-a/--values-b or --file-a/--file-b"
        )

    result = independent_t_test(sample_a, sample_b, alpha=alpha)

    if output_format == "json":
        data = result.to_dict()
        data["n1"] = len(sample_a)
        data["n2"] = len(sample_b)
        data["alpha"] = alpha
        click.echo(render_json(data))
    else:
        display_test_result(result, (len(sample_a), len(sample_b)), alpha)


def _resolve_config(
    config_file: Path | None,
    question: str | None,
    provider: str | None,
    model: str | None,
    host: str | None,
    sample_size: int | None,
    alpha: float | None,
) -> ExperimentConfig:
    """Load the config file and apply command-line overrides."""
    try:
        config = load_experiment_config(config_file)
        provider_options: dict[str, Any] = {}
        if model is not None:
            provider_options["model"] = model
        if host is not None:
            provider_options["host"] = host
        return config.merged(
            question=question,
            provider=provider,
            provider_options=provider_options,
            sample_size=sample_size,
            alpha=alpha,
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e


async def _run_with_progress(
    runner: ExperimentRunner,
    image1: str,
    image2: str,
    config: ExperimentConfig,
    show_progress: bool,
) -> ExperimentResult:
    if not show_progress:
        return await runner.run(
            image1,
            image2,
            config.question,
            provider_name=config.provider,
            provider_config=config.provider_options,
            sample_size=config.sample_size,
            alpha=config.alpha,
        )

    with Progress(
        TextColumn("[bold blue]Collecting ratings"),
        BarColumn(),
        MofNCompleteColumn(),
        console=Console(stderr=True),
        transient=True,
    ) as progress:
        task = progress.add_task("ratings", total=config.sample_size * 2)
        return await runner.run(
            image1,
            image2,
            config.question,
            provider_name=config.provider,
            provider_config=config.provider_options,
            sample_size=config.sample_size,
            alpha=config.alpha,
            on_progress=lambda done, total: progress.update(task, completed=done),
        )


def run_experiment(
    registry: ProviderRegistry,
    image1_path: Path,
    image2_path: Path,
    config_file: Path | None,
    question: str | None,
    provider: str | None,
    model: str | None,
    host: str | None,
    sample_size: int | None,
    alpha: float | None,
    output_format: str,
) -> None:
    """Rate two images repeatedly with a provider and compare the ratings."""
    config = _resolve_config(
        config_file, question, provider, model, host, sample_size, alpha
    )
    image1 = encode_image(image1_path)
    image2 = encode_image(image2_path)

    runner = ExperimentRunner(registry)
    try:
        result = asyncio.run(
            _run_with_progress(
                runner, image1, image2, config, show_progress=output_format == "text"
            )
        )
    except (ValueError, RuntimeError) as e:
        raise click.ClickException(str(e)) from e
    except ollama.ResponseError as e:
        raise click.ClickException(f"Provider request failed: {e}") from e

    if output_format == "json":
        click.echo(render_json(result.to_dict()))
    else:
        display_experiment_result(result, config.alpha)


async def _provider_statuses(registry: ProviderRegistry) -> list[tuple[str, bool]]:
    statuses = []
    for name in registry.list_providers():
        provider = registry.create(name)
        statuses.append((name, await provider.is_available()))
    return statuses


def list_providers(registry: ProviderRegistry) -> None:
    """List registered providers with their availability."""
    for name, available in asyncio.run(_provider_statuses(registry)):
        status = "available" if available else "not available"
        click.echo(f"{name} ({status})")
