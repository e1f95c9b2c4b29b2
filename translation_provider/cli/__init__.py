"""Command line interface."""
from .cli_interface import cli

__all__ = ["cli"]
