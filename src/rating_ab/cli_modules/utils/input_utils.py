"""Rating input parsing for CLI operations."""

import base64
from pathlib import Path
from typing import Any

import click
import yaml


def parse_values(raw: str | None) -> list[float]:
    """Parse a comma-separated list of numbers.

    Raises:
        click.ClickException: If an entry is not a number
    """
    if raw is None:
        return []
    values: list[float] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            values.append(float(item))
        except ValueError as e:
            raise click.ClickException(f"Not a number: {item!r}") from e
    return values


def load_values_file(file_path: Path | None) -> list[float]:
    """Load ratings from a JSON or YAML array file.

    JSON is a subset of YAML, so one loader serves both.

    Raises:
        click.ClickException: If the file cannot be read or is not a list
            of numbers
    """
    if file_path is None:
        return []

    try:
        with open(file_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Failed to parse file {file_path}: {e}") from e
    except OSError as e:
        raise click.ClickException(f"Failed to read file {file_path}: {e}") from e

    if not isinstance(data, list):
        raise click.ClickException(f"Expected an array of numbers in {file_path}")
    try:
        return [float(v) for v in data]
    except (TypeError, ValueError) as e:
        raise click.ClickException(
            f"Expected an array of numbers in {file_path}: {e}"
        ) from e


def encode_image(image_path: Path) -> str:
    """Read an image file as a base64 string.

    Raises:
        click.ClickException: If the file cannot be read
    """
    try:
        return base64.b64encode(image_path.read_bytes()).decode("ascii")
    except OSError as e:
        raise click.ClickException(f"Failed to read image {image_path}: {e}") from e
