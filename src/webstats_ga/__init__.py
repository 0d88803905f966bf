"""Relay yesterday's Google Analytics page metrics into Webstats.

Pipeline:
- Service account JWT exchanged for a read-only Analytics token
- One Analytics Reporting v4 batchGet for the previous local day
- Rows annotated with the window and the "day" granularity
- Result posted to Webstats via createGoogleAnalyticsStatistic
"""
from .config import Settings, load_settings
from .exceptions import (
    AuthError,
    ConfigError,
    FormatError,
    TransportError,
    WebstatsGraphQLError,
    WebstatsReporterError,
)
from .relay import GoogleAnalyticsRelay, RelayResult, RelayState

__all__ = [
    "GoogleAnalyticsRelay",
    "RelayResult",
    "RelayState",
    "Settings",
    "load_settings",
    "AuthError",
    "ConfigError",
    "FormatError",
    "TransportError",
    "WebstatsGraphQLError",
    "WebstatsReporterError",
]
