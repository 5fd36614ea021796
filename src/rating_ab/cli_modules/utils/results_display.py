"""Rich rendering of test and experiment results."""

import json
import math
from typing import Any

from rich.console import Console
from rich.table import Table

from rating_ab.core.execution.result_types import ExperimentResult
from rating_ab.core.stats.result_types import TestResult


def _format_number(value: float, digits: int = 4) -> str:
    if math.isnan(value):
        return "undefined"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return f"{value:.{digits}f}"


def _format_p_value(p_value: float) -> str:
    if math.isnan(p_value):
        return "undefined"
    if p_value < 0.0001:
        return "< 0.0001"
    return f"{p_value:.4f}"


def build_statistics_table(result: TestResult, alpha: float) -> Table:
    """Build a table of the inferential statistics."""
    table = Table(title="Welch's t-test", show_header=True)
    table.add_column("Statistic", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("t-statistic", _format_number(result.t_statistic))
    table.add_row("Degrees of freedom", _format_number(result.degrees_of_freedom, 2))
    table.add_row("p-value", _format_p_value(result.p_value))
    table.add_row("Effect size (d)", _format_number(result.effect_size, 3))

    verdict = (
        "[green]significant[/green]"
        if result.is_significant
        else "[yellow]not significant[/yellow]"
    )
    table.add_row(f"Result (alpha={alpha:g})", verdict)
    return table


def build_samples_table(
    labels: tuple[str, str], result: TestResult, sizes: tuple[int, int]
) -> Table:
    """Build a table of the per-sample descriptive statistics."""
    table = Table(show_header=True)
    table.add_column("Sample", style="bold")
    table.add_column("n", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Std dev", justify="right")

    rows = (
        (labels[0], sizes[0], result.mean1, result.std1),
        (labels[1], sizes[1], result.mean2, result.std2),
    )
    for label, size, sample_mean, sample_std in rows:
        table.add_row(
            label, str(size), _format_number(sample_mean), _format_number(sample_std)
        )
    return table


def display_test_result(
    result: TestResult,
    sizes: tuple[int, int],
    alpha: float,
    console: Console | None = None,
) -> None:
    """Print a t-test result as rich tables."""
    console = console or Console()
    console.print(build_samples_table(("A", "B"), result, sizes))
    console.print(build_statistics_table(result, alpha))


def display_experiment_result(
    result: ExperimentResult, alpha: float, console: Console | None = None
) -> None:
    """Print an experiment result as rich tables."""
    console = console or Console()
    provider_name = result.provider.get("name", "unknown")
    console.print(f"\n[bold blue]Provider:[/bold blue] {provider_name}")
    sizes = (len(result.image1.ratings), len(result.image2.ratings))
    console.print(build_samples_table(("Image 1", "Image 2"), result.statistics, sizes))
    console.print(build_statistics_table(result.statistics, alpha))


def render_json(data: dict[str, Any]) -> str:
    """Serialize a result dict; nan and inf are emitted as null."""
    return json.dumps(_replace_non_finite(data), indent=2)


def _replace_non_finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _replace_non_finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_replace_non_finite(v) for v in value]
    return value
