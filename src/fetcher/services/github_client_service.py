# src/fetcher/services/github_client_service.py
import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from readme_api.core.utils.config_loader import AppConfig
from readme_api.exceptions import DecodeError, FetchError

logger = logging.getLogger(__name__)

USER_AGENT = "readme-flattener/0.1"
ERROR_BODY_PREVIEW = 300


class GitHubClientService:
    """
    Thin asynchronous client for the GitHub REST API.
    Owns the aiohttp session and translates transport and decode failures
    into the service's error types.
    """

    def __init__(self, config: AppConfig):
        self.config = config
        self.base_url = config.api_base_url.rstrip("/")
        self.timeout = float(config.request_timeout)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
            default_headers = {
                'Accept': 'application/vnd.github+json',
                'Authorization': f'Bearer {self.config.github_token}',
                'User-Agent': USER_AGENT
            }
            self.session = aiohttp.ClientSession(timeout=timeout_obj, headers=default_headers)
            logger.debug("GitHubClientService: Session initialized for %s.", self.base_url)

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("GitHubClientService: Session closed.")

    async def get_json(self, path: str) -> Dict[str, Any]:
        """
        GETs an API path and returns the decoded JSON object.

        Raises:
            FetchError: On network failure, timeout or a non-200 status.
            DecodeError: If the body is not a JSON object.
        """
        if not self.session or self.session.closed:
            await self.initialize()

        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            async with self.session.get(url) as response:
                status = response.status
                body = await response.text()
        except asyncio.TimeoutError as e:
            raise FetchError(f"request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise FetchError(f"error making request to {url}: {e}") from e

        if status != 200:
            raise FetchError(
                f"API request failed with status code: {status}, body: {body[:ERROR_BODY_PREVIEW]}",
                status=status
            )

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f"error parsing JSON from {url}: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object from {url}, got {type(data).__name__}")
        return data
