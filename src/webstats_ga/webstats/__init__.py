"""Webstats statistics API integration."""
from .client import WebstatsClient

__all__ = ["WebstatsClient"]
