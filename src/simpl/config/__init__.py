"""Configuration package."""

from simpl.config.settings import Settings, Strategy, load_settings

__all__ = [
    "Settings",
    "Strategy",
    "load_settings",
]
