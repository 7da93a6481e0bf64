"""Client for the iiko Cloud API (organizations, external menus).

Usage example:
    import asyncio
    from iiko_api import IikoClient

    async def main():
        async with IikoClient.from_env() as client:
            await client.authenticate()
            orgs = await client.get_organizations()
            menus = await client.get_menu({'organizationIds': [orgs.organizations[0].id]})

    asyncio.run(main())
"""
from .exceptions import (  # noqa: F401
    ApiError,
    AuthenticationError,
    AuthRequiredError,
    ConfigurationError,
    ErrorKind,
    IikoError,
    RateLimitError,
    classify_error,
)
from .base_client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT  # noqa: F401
from .iiko_client import Authenticated, IikoClient, SessionState, Unauthenticated  # noqa: F401
