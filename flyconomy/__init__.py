"""Airline economy model: world data, flights, finances, events, commands and analytics."""

__version__ = "0.1.3"

__all__ = [
    "analytics",
    "commands",
    "config",
    "entities",
    "environment",
    "events",
    "finances",
    "fleet",
    "flight",
    "geodesy",
    "identity",
]