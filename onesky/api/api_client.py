# onesky/api/api_client.py
# Created: 2026-10-19 10:05:32

from typing import Any, Dict, Optional
from dataclasses import dataclass
from enum import Enum
import asyncio
import logging
from datetime import datetime, UTC

import aiohttp
import yarl

from ..core.config import Config
from ..core.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)

class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

@dataclass
class ClientConfig:
    """Configuration for the HTTP transport"""
    address: str = "https://platform.api.onesky.io"
    version: str = "1"
    timeout: Optional[float] = None  # seconds, None disables the limit
    user_agent: str = "onesky-python/1.0"

    @classmethod
    def from_config(cls, config: Config) -> "ClientConfig":
        return cls(
            address=config.get("api.address", cls.address),
            version=str(config.get("api.version", cls.version)),
            timeout=config.get("api.timeout"),
            user_agent=config.get("api.user_agent", cls.user_agent)
        )

@dataclass
class APIResponse:
    """Container for a raw API response"""
    status: int
    body: str
    headers: Dict[str, str]
    timestamp: datetime
    duration: float

class APIClient:
    """
    Performs single-shot HTTP requests against already signed URLs.

    A session is opened for each request and closed before returning, so
    one instance can be shared between threads that each run their own
    event loop. Nothing is retried or cached.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()

    def _new_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent}
        )

    async def _read_body(self, response: aiohttp.ClientResponse, target: yarl.URL) -> str:
        try:
            return await response.text()
        except UnicodeDecodeError as e:
            if 200 <= response.status < 300:
                raise DecodeError(f"Response body of {target} is not valid text: {e}") from e
            # error bodies are only kept for diagnostics
            return await response.text(errors="replace")

    async def request(
        self,
        method: RequestMethod,
        url: yarl.URL,
        data: Any = None
    ) -> APIResponse:
        """
        Make an API request

        Args:
            method: HTTP method to use
            url: Fully built URL including the query string
            data: Request body (e.g. ``aiohttp.FormData``)

        Returns:
            APIResponse with the status code and the decoded text body
        """
        # the query carries the signature, keep it out of the logs
        target = url.with_query(None)
        logger.debug("%s %s", method.value, target)
        start_time = datetime.now(UTC)

        try:
            async with self._new_session() as session:
                async with session.request(method.value, url, data=data) as response:
                    status = response.status
                    headers = dict(response.headers)
                    body = await self._read_body(response, target)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("API request failed: %s %s: %s", method.value, target, e)
            raise TransportError(
                f"API request failed: {e}",
                {"url": str(target), "cause": e}
            ) from e

        duration = (datetime.now(UTC) - start_time).total_seconds()
        logger.debug("%s %s -> %d in %.3fs", method.value, target, status, duration)
        return APIResponse(
            status=status,
            body=body,
            headers=headers,
            timestamp=datetime.now(UTC),
            duration=duration
        )
