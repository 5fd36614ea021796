"""rating-ab - Compare two populations of judge ratings with Welch's t-test."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rating-ab")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
