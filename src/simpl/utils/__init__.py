"""Shared utilities."""

from simpl.utils.location import Location

__all__ = ["Location"]
