"""Tests against the real iiko Cloud API.

Skipped unless IIKO_API_KEY is set (IIKO_BASE_URL optional):
    IIKO_API_KEY=your-key pytest tests/test_live_api.py
"""
import os
import pytest
import pytest_asyncio

from iiko_api import IikoClient

API_KEY = os.getenv('IIKO_API_KEY')

pytestmark = pytest.mark.skipif(not API_KEY, reason='IIKO_API_KEY not set')


@pytest_asyncio.fixture
async def live_client():
    async with IikoClient.from_env() as client:
        yield client


@pytest.mark.asyncio
@pytest.mark.dependency()
async def test_authenticate(live_client):
    result = await live_client.authenticate()
    assert isinstance(result.token, str) and len(result.token) > 0
    assert live_client.is_authenticated


@pytest.mark.asyncio
@pytest.mark.dependency(depends=['test_authenticate'])
async def test_organizations(live_client):
    await live_client.authenticate()
    result = await live_client.get_organizations()
    assert result.correlation_id
    assert isinstance(result.organizations, list)


@pytest.mark.asyncio
@pytest.mark.dependency(depends=['test_authenticate'])
async def test_organizations_with_additional_info(live_client):
    await live_client.authenticate()
    result = await live_client.get_organizations({'returnAdditionalInfo': True})
    for org in result.organizations[:1]:
        assert org.id and org.name
