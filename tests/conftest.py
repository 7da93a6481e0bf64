import json
from collections import deque

import httpx
import pytest
import pytest_asyncio

from iiko_api import IikoClient

MOCK_API_KEY = 'mock-api-key-12345'
MOCK_ACCESS_TOKEN = 'mock-access-token-67890'
MOCK_CORRELATION_ID = 'mock-correlation-id-12345'
BASE_URL = 'https://api-ru.iiko.services'


def make_response(status=200, json_body=None, text=None, headers=None):
    if json_body is not None:
        resp = httpx.Response(status, json=json_body, headers=headers)
    elif text is not None:
        resp = httpx.Response(status, text=text, headers=headers)
    else:
        resp = httpx.Response(status, headers=headers)
    return resp


class FakeApi:
    """Behind an httpx.MockTransport: records requests, replays queued replies."""

    def __init__(self):
        self.calls = []
        self._replies = deque()
        self.transport = httpx.MockTransport(self._handle)

    def queue(self, reply):
        # an httpx.Response, an exception instance to raise, or an async callable(request)
        self._replies.append(reply)
        return self

    async def _handle(self, request):
        self.calls.append({
            'method': request.method,
            'url': str(request.url),
            'headers': request.headers,
            'json': json.loads(request.content) if request.content else None,
            'timeout': request.extensions.get('timeout'),
        })
        if not self._replies:
            raise AssertionError(f'unexpected request: {request.method} {request.url}')
        reply = self._replies.popleft()
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            reply = await reply(request)
        return reply


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest_asyncio.fixture
async def client(fake_api):
    c = IikoClient(MOCK_API_KEY, transport=fake_api.transport)
    yield c
    await c.aclose()


@pytest_asyncio.fixture
async def authenticated_client(client, fake_api):
    fake_api.queue(make_response(200, {'correlationId': MOCK_CORRELATION_ID, 'token': MOCK_ACCESS_TOKEN}))
    await client.authenticate()
    fake_api.calls.clear()
    return client
