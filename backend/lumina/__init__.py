"""Keyword-driven venue and event search for the Lumina nightlife app."""

__version__ = "0.2.0"
