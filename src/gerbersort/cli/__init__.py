"""Command line interface for gerbersort."""

from .main import cli

__all__ = ["cli"]
