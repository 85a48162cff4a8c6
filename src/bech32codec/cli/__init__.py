"""Command line interface for bech32codec."""

from .main import cli

__all__ = ["cli"]
