"""Async GraphQL client for the Webstats statistics API."""
import asyncio
import logging
from typing import Optional

import aiohttp

from ..exceptions import TransportError, WebstatsGraphQLError
from .graphql_strings import MUTATION_CREATE_GOOGLE_ANALYTICS_STATISTIC


class WebstatsClient:
    """Minimal client for the Webstats GraphQL endpoint.

    Calls are made once; errors are raised, never retried.
    """

    def __init__(
        self,
        api_url: str,
        session: aiohttp.ClientSession,
        api_token: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Webstats client.

        Args:
            api_url: GraphQL endpoint URL
            session: Injected aiohttp ClientSession
            api_token: Optional bearer token (never logged)
            logger: Optional logger instance
        """
        self.api_url = api_url
        self.session = session
        self._api_token = api_token
        self.logger = logger or logging.getLogger(__name__)

    async def create_google_analytics_statistic(
        self, project_id: str, data: dict
    ) -> dict:
        """Submit one Google Analytics statistic for a project.

        Args:
            project_id: Webstats project identifier
            data: Annotated report payload (opaque to this client)

        Returns:
            The ``data`` block of the GraphQL response

        Raises:
            TransportError: On HTTP or network failure
            WebstatsGraphQLError: If GraphQL returns root-level errors
        """
        payload = {
            "query": MUTATION_CREATE_GOOGLE_ANALYTICS_STATISTIC,
            "variables": {"projectId": project_id, "data": data},
        }
        resp_data = await self._post_graphql(payload)
        self.logger.info("Created Google Analytics statistic for project %s", project_id)
        return resp_data.get("data") or {}

    async def _post_graphql(self, payload: dict) -> dict:
        headers = {"Content-Type": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"

        try:
            async with self.session.post(
                self.api_url, json=payload, headers=headers
            ) as resp:
                if resp.status < 200 or resp.status >= 300:
                    response_text = await resp.text(errors="replace")
                    raise TransportError(
                        f"Webstats API request failed: HTTP {resp.status}",
                        status=resp.status,
                        body=response_text[:500],
                    )

                try:
                    json_data = await resp.json(content_type=None)
                except ValueError as exc:
                    raise TransportError(
                        "Webstats API returned invalid JSON", status=resp.status
                    ) from exc

        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"Webstats API network error: {exc}") from exc

        # Root-level errors arrive with HTTP 200
        if isinstance(json_data, dict) and json_data.get("errors"):
            errors = json_data["errors"]
            if not isinstance(errors, list):
                raise WebstatsGraphQLError(errors)
            error_messages = [
                e.get("message", str(e)) if isinstance(e, dict) else str(e)
                for e in errors
            ]
            raise WebstatsGraphQLError(
                f"GraphQL root errors: {'; '.join(error_messages)}"
            )

        if not isinstance(json_data, dict):
            raise TransportError("Webstats API returned a non-object JSON body")

        return json_data
