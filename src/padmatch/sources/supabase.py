"""Read-only data source for the directory's Supabase (PostgREST) backend."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from padmatch.core.config import SourceConfig
from padmatch.core.exceptions import (
    InvalidConfigurationError,
    SourceAuthenticationError,
    SourceConnectionError,
    SourceError,
)
from padmatch.sources.base import DataSource
from padmatch.sources.records import parse_controller_record, parse_game_record
from padmatch.types.common import Controller, Game

logger = logging.getLogger(__name__)

# Approved games with their primary and additional testing controllers joined
GAMES_SELECT = (
    "*,"
    "controllers!testing_controller_id(*),"
    "testing_controllers:games_testing_controllers!game_id(controllers(*))"
)


class SupabaseSource(DataSource):
    """Fetches games and controllers from the directory's REST endpoint.

    Only approved games are requested, so the pool matches what visitors
    can see.

    Example:
        config = SourceConfig(url="https://xyz.supabase.co", api_key="anon-key")
        async with SupabaseSource(config) as source:
            games = await source.fetch_games()
    """

    name = "supabase"

    def __init__(self, config: SourceConfig) -> None:
        if not config.is_configured:
            raise InvalidConfigurationError("supabase source requires url and api_key")
        self.config = config
        self._base_url = config.url.rstrip("/") + "/rest/v1"
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "apikey": self.config.api_key,
                    "Authorization": f"Bearer {self.config.api_key}",
                    "Accept": "application/json",
                    "User-Agent": self.config.user_agent,
                },
                timeout=self.config.timeout,
            )
        return self._client

    async def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Make a GET request against the REST endpoint."""
        client = await self._get_client()

        logger.debug("Supabase API: GET %s%s", self._base_url, endpoint)
        if params:
            logger.debug("Supabase API params: %s", params)

        try:
            response = await client.get(endpoint, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.RequestError as e:
            logger.debug("Supabase API error: %s", e)
            raise SourceConnectionError(self.name, str(e)) from e
        except httpx.HTTPStatusError as e:
            logger.debug("Supabase API HTTP error: %s", e)
            if e.response.status_code in (401, 403):
                raise SourceAuthenticationError(self.name, str(e)) from e
            raise SourceError(
                f"Request to '{endpoint}' failed with status {e.response.status_code}",
                self.name,
            ) from e

        # Log full response body only when debug logging is enabled
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Supabase API response:\n%s", json.dumps(data, indent=2, ensure_ascii=False))

        if not isinstance(data, list):
            raise SourceError(f"Unexpected response from '{endpoint}'", self.name)
        return data

    async def fetch_games(self) -> list[Game]:
        records = await self._request(
            "/games",
            params={"select": GAMES_SELECT, "is_approved": "eq.true", "order": "name"},
        )
        return [parse_game_record(record) for record in records]

    async def fetch_controllers(self) -> list[Controller]:
        records = await self._request(
            "/controllers",
            params={"select": "*", "order": "name"},
        )
        return [parse_controller_record(record) for record in records]

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
