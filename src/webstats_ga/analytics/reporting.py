"""Analytics Reporting API v4 client."""
import asyncio
import json
import logging
from typing import Optional

import aiohttp

from ..exceptions import TransportError
from ..schemas.report import ReportRequest


REPORTING_API_URL = "https://analyticsreporting.googleapis.com/v4/reports:batchGet"


class GoogleAnalyticsReportingClient:
    """Issues a single reports:batchGet call per request.

    No pagination and no retries: any failure surfaces as TransportError.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_url: str = REPORTING_API_URL,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session
        self.api_url = api_url
        self.logger = logger or logging.getLogger(__name__)

    async def fetch_report(self, access_token: str, request: ReportRequest) -> dict:
        """POST the report request and return the decoded response.

        Args:
            access_token: Bearer token from the authenticator
            request: Report request for one view and date window

        Returns:
            Raw response JSON

        Raises:
            TransportError: On network errors, non-2xx status or bad JSON
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        body = request.to_batch_body()

        try:
            async with self.session.post(
                self.api_url, json=body, headers=headers
            ) as resp:
                response_text = await resp.text(errors="replace")

                if resp.status < 200 or resp.status >= 300:
                    self.logger.error(
                        "Analytics Reporting API error (%s): %s",
                        resp.status,
                        response_text[:500],
                    )
                    raise TransportError(
                        f"Analytics Reporting request failed: HTTP {resp.status}",
                        status=resp.status,
                        body=response_text[:500],
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"Analytics Reporting network error: {exc}") from exc

        try:
            data = json.loads(response_text)
        except ValueError as exc:
            raise TransportError(
                "Analytics Reporting returned invalid JSON",
                status=resp.status,
                body=response_text[:500],
            ) from exc

        self.logger.debug("Fetched report for view %s", request.view_id)
        return data
