from __future__ import annotations
import re
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .schemas.common import ApiErrorResponse


UNKNOWN_ERROR_MESSAGE = 'An unknown error occurred'
_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


class ConfigurationError(ValueError):
    """Invalid client construction arguments (e.g. blank API key)."""


class ErrorKind(str, Enum):
    AUTH_REQUIRED = 'auth_required'
    AUTHENTICATION = 'authentication'
    RATE_LIMIT = 'rate_limit'
    API = 'api'


class IikoError(Exception):
    """Common base of every error kind raised by the client."""
    kind: ErrorKind

    def __init__(self, message: str, *, status_code: Optional[int] = None, error_code: Optional[str] = None, response: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.response = response

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r}, error_code={self.error_code!r})"


class AuthRequiredError(IikoError):
    """Resource call attempted before authenticate(); raised without network I/O."""
    kind = ErrorKind.AUTH_REQUIRED

    def __init__(self, message: str = 'Not authenticated. Call authenticate() first.'):
        super().__init__(message)


class AuthenticationError(IikoError):
    """Server rejected the credentials or token (401)."""
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str, response: Any = None):
        super().__init__(message, status_code=401, error_code='AUTH_ERROR', response=response)


class RateLimitError(IikoError):
    """Rate limiting encountered (429). retry_after is advisory, in seconds."""
    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str, retry_after: Optional[int] = None, response: Any = None):
        super().__init__(message, status_code=429, error_code='RATE_LIMIT', response=response)
        self.retry_after = retry_after


class ApiError(IikoError):
    """Generic API request error (any failure not otherwise classified)."""
    kind = ErrorKind.API

    def __init__(self, message: str, status_code: int = 500, error_code: Optional[str] = None, response: Any = None):
        super().__init__(message, status_code=status_code, error_code=error_code, response=response)


def _header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    if not headers:
        return None
    # httpx.Headers handles case itself; plain dicts do not
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, val in headers.items():
        if key.lower() == lowered:
            return val
    return None


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Leading integer of a Retry-After value ('1.5' -> 1, '60s' -> 60).

    HTTP-date values carry no leading digits and give None.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _error_payload(body: Any) -> Optional[ApiErrorResponse]:
    if not isinstance(body, Mapping):
        return None
    try:
        return ApiErrorResponse.model_validate(body)
    except ValidationError:
        return None


def _message(payload: Optional[ApiErrorResponse], status: Optional[int], transport_error: Optional[BaseException]) -> str:
    if payload is not None and payload.message:
        return payload.message
    if transport_error is not None and str(transport_error):
        return str(transport_error)
    if status is not None:
        return f"Request failed with status code {status}"
    return UNKNOWN_ERROR_MESSAGE


def classify_error(status: Optional[int] = None, headers: Optional[Mapping[str, str]] = None, body: Any = None, transport_error: Optional[BaseException] = None) -> IikoError:
    """Map a failed dispatch to exactly one error kind.

    Precedence is strict: 401 -> AuthenticationError, 429 -> RateLimitError,
    anything else -> ApiError (status 500 when no response was received).
    """
    payload = _error_payload(body)
    message = _message(payload, status, transport_error)
    if status == 401:
        return AuthenticationError(message, response=body)
    if status == 429:
        retry_after = parse_retry_after(_header(headers, 'retry-after'))
        return RateLimitError(message, retry_after=retry_after, response=body)
    error_code = payload.error_code if payload is not None else None
    return ApiError(message, status_code=status if status is not None else 500, error_code=error_code, response=body)
