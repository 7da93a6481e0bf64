from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import ValidationError

from .base_client import BaseClient, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import ApiError, AuthRequiredError, ConfigurationError
from .schemas import (
    AuthResponse,
    GetMenuByIdRequest,
    GetMenuByIdResponse,
    GetMenuRequest,
    GetMenuResponse,
    GetOrganizationsRequest,
    GetOrganizationsResponse,
    IikoModel,
    IikoRequest,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=IikoModel)
RequestT = TypeVar('RequestT', bound=IikoRequest)


@dataclass(frozen=True)
class Unauthenticated:
    pass


@dataclass(frozen=True)
class Authenticated:
    token: str


SessionState = Union[Unauthenticated, Authenticated]


class IikoClient(BaseClient):
    """iiko Cloud API client (organizations and external menus).

    authenticate() must succeed once before any resource call; the bearer
    token it stores is attached to every later request. A failed
    authenticate() keeps whatever session was there before. The token is read
    when a request is dispatched, so calls already in flight keep the token
    they were sent with.

    All network operations are coroutines; use ``async with`` or ``aclose()``.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not api_key or api_key.strip() == '':
            raise ConfigurationError('API key is required')
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self._api_key = api_key
        self._state: SessionState = Unauthenticated()

    @classmethod
    def from_env(cls) -> 'IikoClient':
        api_key = BaseClient.env('IIKO_API_KEY')
        base_url = BaseClient.env('IIKO_BASE_URL', required=False) or DEFAULT_BASE_URL
        timeout_raw = BaseClient.env('IIKO_TIMEOUT', required=False)
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"IIKO_TIMEOUT must be a number of seconds, got {timeout_raw!r}") from None
        return cls(api_key, base_url=base_url, timeout=timeout)  # type: ignore[arg-type]

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return isinstance(self._state, Authenticated)

    @property
    def access_token(self) -> Optional[str]:
        if isinstance(self._state, Authenticated):
            return self._state.token
        return None

    async def authenticate(self) -> AuthResponse:
        """Obtain a new access token and replace the stored one."""
        status, data = await self._request('POST', '/api/1/access_token', json_body={'apiLogin': self._api_key})
        # the token comes either as {"token": ..., "correlationId": ...} or as a bare string
        if isinstance(data, str):
            data = {'token': data.strip().strip('"')}
        auth = self._parse(AuthResponse, status, data)
        if not auth.token:
            raise ApiError('Authentication response did not contain a token', status_code=status, error_code='INVALID_RESPONSE', response=data)
        self._state = Authenticated(auth.token)
        logger.info('Authenticated against %s', self.base_url)
        return auth

    def _ensure_authenticated(self) -> str:
        if not isinstance(self._state, Authenticated):
            raise AuthRequiredError()
        return self._state.token

    @staticmethod
    def _parse(model: Type[ModelT], status: int, data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ApiError(f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)", status_code=status, error_code='INVALID_RESPONSE', response=data) from e

    @staticmethod
    def _coerce(request_type: Type[RequestT], request: Union[RequestT, Mapping[str, Any], None]) -> RequestT:
        if request is None:
            return request_type()
        if isinstance(request, request_type):
            return request
        return request_type.model_validate(request)

    async def _post(self, path: str, request: IikoRequest, response_type: Type[ModelT]) -> ModelT:
        headers = {'Authorization': f"Bearer {self._ensure_authenticated()}"}
        status, data = await self._request('POST', path, headers=headers, json_body=request.to_body())
        return self._parse(response_type, status, data)

    async def get_organizations(self, request: Union[GetOrganizationsRequest, Mapping[str, Any], None] = None) -> GetOrganizationsResponse:
        """List organizations available to the API key.

        With no request the body is ``{}`` (all organizations, no additional
        info, disabled ones excluded).
        """
        self._ensure_authenticated()
        req = self._coerce(GetOrganizationsRequest, request)
        return await self._post('/api/1/organizations', req, GetOrganizationsResponse)

    async def get_menu(self, request: Union[GetMenuRequest, Mapping[str, Any]]) -> GetMenuResponse:
        """List external menus and price categories for the given organizations."""
        self._ensure_authenticated()
        req = self._coerce(GetMenuRequest, request)
        return await self._post('/api/2/menu', req, GetMenuResponse)

    async def get_menu_by_id(self, request: Union[GetMenuByIdRequest, Mapping[str, Any]]) -> GetMenuByIdResponse:
        self._ensure_authenticated()
        req = self._coerce(GetMenuByIdRequest, request)
        return await self._post('/api/2/menu/by_id', req, GetMenuByIdResponse)
