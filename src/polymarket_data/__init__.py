"""Polymarket data service: cached fetchers and user data aggregation."""

__version__ = "0.1.0"
