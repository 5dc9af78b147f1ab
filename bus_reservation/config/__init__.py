"""Configuration helpers."""

from .settings import DEFAULT_TRIPS, Settings, TripSeed, load_settings

__all__ = [
    "DEFAULT_TRIPS",
    "Settings",
    "TripSeed",
    "load_settings",
]
