"""Core components: statistics, configuration and experiment execution."""
