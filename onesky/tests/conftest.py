"""Global test configuration and fixtures."""
import pytest
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp

from onesky.core.config import Credentials

def make_response(status: int, body: str = "") -> AsyncMock:
    """Build an async context manager standing in for session.request()"""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)
    response.headers = {"Content-Type": "application/json"}

    cm = AsyncMock()
    cm.__aenter__.return_value = response
    cm.__aexit__.return_value = None
    return cm

class HTTPRecorder:
    """Answers every request with a fixed response and records the calls"""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.status = 200
        self.body = ""

    def respond(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return make_response(self.status, self.body)

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]

@pytest.fixture
def credentials():
    """Fixture for client credentials"""
    return Credentials(secret="abcdef", api_key="abcdef", project_id=1)

@pytest.fixture
def http():
    """Patch the aiohttp transport so no request leaves the process"""
    recorder = HTTPRecorder()
    with patch.object(aiohttp.ClientSession, 'request', side_effect=recorder):
        yield recorder

@pytest.fixture
def undecodable_response():
    """Factory for responses whose body is not valid UTF-8"""
    def factory(status: int) -> AsyncMock:
        async def text(errors="strict"):
            if errors == "strict":
                raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
            return "�"

        cm = make_response(status)
        cm.__aenter__.return_value.text = AsyncMock(side_effect=text)
        return cm
    return factory
