"""Google Analytics to Webstats relay orchestrator.

Runs one pass of: authenticate, fetch yesterday's report, annotate rows,
submit the statistic. Every failure after start-up is caught here once
and reported through ``actions.set_failed``.
"""
import logging
from datetime import datetime
from enum import Enum
from typing import Optional

import aiohttp
from pydantic import BaseModel

from . import actions
from .analytics.auth import GoogleAnalyticsAuthenticator
from .analytics.dates import Clock, previous_day_window
from .analytics.reporting import GoogleAnalyticsReportingClient
from .analytics.transform import transform_report
from .config import Settings
from .schemas.report import ReportRequest
from .webstats.client import WebstatsClient


logger = logging.getLogger(__name__)


class RelayState(str, Enum):
    START = "start"
    FETCHING = "fetching"
    TRANSFORMING = "transforming"
    SUBMITTING = "submitting"
    DONE = "done"
    FAILED = "failed"


class RelayResult(BaseModel):
    """Outcome of a single relay run."""

    state: RelayState
    failed_stage: Optional[RelayState] = None
    error: Optional[str] = None
    row_count: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.state == RelayState.DONE


def _redact_text(text: str, secrets: list[Optional[str]]) -> str:
    if not text:
        return text
    redacted = text
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "[REDACTED]")
    return redacted


class GoogleAnalyticsRelay:
    """Relays the previous day's page metrics into Webstats."""

    def __init__(
        self,
        settings: Settings,
        authenticator: Optional[GoogleAnalyticsAuthenticator] = None,
        reporting_client: Optional[GoogleAnalyticsReportingClient] = None,
        webstats_client: Optional[WebstatsClient] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize relay.

        Args:
            settings: Resolved configuration
            authenticator: Token source (built from settings if omitted)
            reporting_client: Report fetcher (bound to the run's session if omitted)
            webstats_client: Statistic submitter (bound to the run's session if omitted)
            clock: Returns "now"; the date window is derived from it
        """
        self.settings = settings
        self.authenticator = authenticator or GoogleAnalyticsAuthenticator(
            settings.credentials(), token_uri=settings.token_uri
        )
        self._reporting_client = reporting_client
        self._webstats_client = webstats_client
        self._clock = clock or datetime.now
        self._access_token: Optional[str] = None

    def _redact_error(self, text: str) -> str:
        return _redact_text(text, [*self.settings.secrets, self._access_token])

    async def run(self) -> RelayResult:
        """Run the relay once.

        Returns:
            RelayResult in DONE or FAILED state; exceptions do not escape
        """
        state = RelayState.START
        self._access_token = None

        try:
            window = previous_day_window(self._clock())
            request = ReportRequest.for_window(self.settings.view_id, window)
            logger.info(
                "Reporting window %s -> %s for view %s",
                window.start.isoformat(),
                window.end.isoformat(),
                self.settings.view_id,
            )

            timeout = aiohttp.ClientTimeout(total=60, connect=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                reporting_client = self._reporting_client or (
                    GoogleAnalyticsReportingClient(session)
                )
                webstats_client = self._webstats_client or WebstatsClient(
                    self.settings.webstats_api_url,
                    session,
                    api_token=self.settings.webstats_api_token,
                )

                state = RelayState.FETCHING
                actions.info("Fetching data from Google Analytics")
                self._access_token = await self.authenticator.fetch_access_token()
                raw = await reporting_client.fetch_report(self._access_token, request)

                state = RelayState.TRANSFORMING
                actions.info("Transforming Google Analytics data")
                data = transform_report(raw, window)
                row_count = len(data["reports"][0]["data"]["rows"])

                state = RelayState.SUBMITTING
                actions.info("Posting Google Analytics data to Webstats")
                await webstats_client.create_google_analytics_statistic(
                    self.settings.project_id, data
                )

        except Exception as exc:
            message = self._redact_error(str(exc)) or type(exc).__name__
            logger.debug("Relay failed while %s", state.value, exc_info=True)
            actions.set_failed(message)
            return RelayResult(
                state=RelayState.FAILED, failed_stage=state, error=message
            )

        logger.info("Relayed %s rows for %s", row_count, window.start_date)
        return RelayResult(state=RelayState.DONE, row_count=row_count)
