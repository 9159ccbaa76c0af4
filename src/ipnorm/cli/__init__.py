"""Command-line interface for ipnorm."""

from .main import cli, main

__all__ = ["cli", "main"]
