from __future__ import annotations
import os
import json
import asyncio
import logging
from typing import Any, Dict, Optional, Tuple
import httpx
from .exceptions import ConfigurationError, classify_error

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api-ru.iiko.services'
DEFAULT_TIMEOUT = 30.0  # seconds


def build_async_client(timeout: float, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Shared ``httpx.AsyncClient`` with JSON headers.

    ``httpx.Timeout(timeout)`` bounds each phase (connect, read, write, pool
    acquisition) separately. Redirects are not followed: a 3xx reaches the
    caller as an error.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=False,
        headers={'Content-Type': 'application/json'},
        transport=transport,
    )


class BaseClient:
    """Base HTTP client: one JSON round trip per call, failures classified, no retries.

    ``timeout`` (seconds) is a deadline for the whole call, from dispatch to
    the fully read body; the same value also caps every individual phase.
    Calls suspend the running task, never the event loop.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.session = build_async_client(timeout, transport=transport)
        self._base_url = base_url
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def _url(self, path: str) -> str:
        if path.startswith('http'):
            return path
        return self._base_url.rstrip('/') + '/' + path.lstrip('/')

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except (json.JSONDecodeError, ValueError):
            return resp.text

    # returns the 2xx status with the decoded body
    async def _request(self, method: str, path: str, *, headers: Dict[str, str] | None = None, json_body: Any | None = None) -> Tuple[int, Any]:
        url = self._url(path)
        logger.debug('%s %s', method.upper(), path)
        try:
            resp = await asyncio.wait_for(
                self.session.request(method.upper(), url, headers=headers, json=json_body),
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.warning('%s %s failed without response: %s', method.upper(), path, e)
            raise classify_error(transport_error=e) from e
        except asyncio.TimeoutError as e:
            timed_out = httpx.TimeoutException(f"Request exceeded the {self._timeout}s timeout")
            logger.warning('%s %s failed without response: %s', method.upper(), path, timed_out)
            raise classify_error(transport_error=timed_out) from e

        body = self._decode(resp)
        if not 200 <= resp.status_code < 300:
            error = classify_error(resp.status_code, resp.headers, body)
            logger.warning('%s %s -> %s (%s)', method.upper(), path, resp.status_code, type(error).__name__)
            raise error
        return resp.status_code, body

    async def aclose(self) -> None:
        await self.session.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @staticmethod
    def env(name: str, required: bool = True) -> Optional[str]:
        val = os.getenv(name)
        if required and (val is None or val.strip() == ''):
            raise ConfigurationError(f"Missing required environment variable: {name}")
        return val
