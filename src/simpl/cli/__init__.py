"""Command line interface."""

from simpl.cli.app import app

__all__ = ["app"]
