"""Command line interface for rating-ab."""

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from rating_ab.cli_commands import compare_ratings, list_providers, run_experiment
from rating_ab.core.stats.welch import DEFAULT_ALPHA
from rating_ab.provider_registry import create_default_registry


def _enable_debug_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="rating-ab")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """rating-ab - Compare two sets of judge ratings with Welch's t-test."""
    if verbose:
        _enable_debug_logging()


@cli.command()
@click.option("--values-a", default=None, help="Comma-separated ratings for A")
@click.option("--values-b", default=None, help="Comma-separated ratings for B")
@click.option(
    "--file-a",
    type=click.Path(path_type=Path),
    default=None,
    help="JSON or YAML array of ratings for A",
)
@click.option(
    "--file-b",
    type=click.Path(path_type=Path),
    default=None,
    help="JSON or YAML array of ratings for B",
)
@click.option(
    "--alpha",
    type=click.FloatRange(0, 1, min_open=True, max_open=True),
    default=DEFAULT_ALPHA,
    show_default=True,
    help="Significance threshold",
)
@click.option(
    "--output-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format for results",
)
def compare(
    values_a: str | None,
    values_b: str | None,
    file_a: Path | None,
    file_b: Path | None,
    alpha: float,
    output_format: str,
) -> None:
    """Compare two existing lists of ratings."""
    compare_ratings(values_a, values_b, file_a, file_b, alpha, output_format)


@cli.command()
@click.argument("image1", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("image2", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML experiment configuration",
)
@click.option("--question", default=None, help="Question put to the judge")
@click.option("--provider", default=None, help="Rating provider (mock, ollama)")
@click.option("--model", default=None, help="Model name for the provider")
@click.option("--host", default=None, help="Provider service URL")
@click.option(
    "--sample-size",
    type=click.IntRange(min=2),
    default=None,
    help="Ratings to collect per image",
)
@click.option(
    "--alpha",
    type=click.FloatRange(0, 1, min_open=True, max_open=True),
    default=None,
    help="Significance threshold",
)
@click.option(
    "--output-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format for results",
)
def run(
    image1: Path,
    image2: Path,
    config_file: Path | None,
    question: str | None,
    provider: str | None,
    model: str | None,
    host: str | None,
    sample_size: int | None,
    alpha: float | None,
    output_format: str,
) -> None:
    """Rate two images repeatedly and test whether their ratings differ."""
    run_experiment(
        create_default_registry(),
        image1,
        image2,
        config_file,
        question,
        provider,
        model,
        host,
        sample_size,
        alpha,
        output_format,
    )


@cli.command()
def providers() -> None:
    """List available rating providers."""
    list_providers(create_default_registry())


if __name__ == "__main__":
    cli()
