"""Environment-driven configuration for the relay."""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .schemas.report import Credentials


DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

REQUIRED_VARIABLES = (
    "WEBSTATS_PROJECT_ID",
    "GOOGLE_ANALYTICS_EMAIL",
    "GOOGLE_ANALYTICS_KEY",
    "GOOGLE_ANALYTICS_VIEW_ID",
    "WEBSTATS_API_URL",
)


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigError(name)
    return value


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one relay run."""

    project_id: str
    analytics_email: str
    analytics_key: str = field(repr=False)
    view_id: str
    webstats_api_url: str
    webstats_api_token: Optional[str] = field(default=None, repr=False)
    token_uri: str = DEFAULT_TOKEN_URI

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from the environment.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Raises:
            ConfigError: If any required variable is missing or empty
        """
        if environ is None:
            environ = os.environ

        values = {name: _require(environ, name) for name in REQUIRED_VARIABLES}

        return cls(
            project_id=values["WEBSTATS_PROJECT_ID"],
            analytics_email=values["GOOGLE_ANALYTICS_EMAIL"],
            analytics_key=values["GOOGLE_ANALYTICS_KEY"],
            view_id=values["GOOGLE_ANALYTICS_VIEW_ID"],
            webstats_api_url=values["WEBSTATS_API_URL"],
            webstats_api_token=environ.get("WEBSTATS_API_TOKEN") or None,
            token_uri=environ.get("GOOGLE_ANALYTICS_TOKEN_URI") or DEFAULT_TOKEN_URI,
        )

    def credentials(self) -> Credentials:
        return Credentials(
            service_account_email=self.analytics_email,
            private_key=self.analytics_key,
        )

    @property
    def secrets(self) -> list[Optional[str]]:
        """Values that must never appear in logs."""
        return [
            self.analytics_key,
            self.credentials().private_key,
            self.webstats_api_token,
        ]


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load ``.env`` (without overriding real env vars) and build Settings."""
    load_dotenv(dotenv_path, override=False)
    return Settings.from_env()
