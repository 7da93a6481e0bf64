import pytest
import httpx

from iiko_api.exceptions import (
    ApiError,
    AuthenticationError,
    AuthRequiredError,
    ConfigurationError,
    ErrorKind,
    IikoError,
    RateLimitError,
    UNKNOWN_ERROR_MESSAGE,
    classify_error,
    parse_retry_after,
)


def test_401_is_authentication_error():
    body = {'message': 'Invalid API key'}
    err = classify_error(401, {}, body)
    assert isinstance(err, AuthenticationError)
    assert err.kind is ErrorKind.AUTHENTICATION
    assert err.status_code == 401
    assert err.error_code == 'AUTH_ERROR'
    assert err.message == 'Invalid API key'
    assert err.response == body


def test_429_with_retry_after():
    err = classify_error(429, {'retry-after': '60'}, {'message': 'Rate limit exceeded'})
    assert isinstance(err, RateLimitError)
    assert err.status_code == 429
    assert err.error_code == 'RATE_LIMIT'
    assert err.retry_after == 60


def test_429_retry_after_header_lookup_ignores_case():
    err = classify_error(429, {'Retry-After': '15'}, None)
    assert err.retry_after == 15


@pytest.mark.parametrize('headers', [{}, None, {'retry-after': 'soon'}, {'retry-after': ''}])
def test_429_without_usable_retry_after(headers):
    err = classify_error(429, headers, {'message': 'slow down'})
    assert isinstance(err, RateLimitError)
    assert err.retry_after is None


def test_other_status_is_generic_api_error_with_code():
    body = {'errorCode': 'BAD_REQUEST', 'message': 'organizationIds required', 'details': {'field': 'organizationIds'}}
    err = classify_error(400, {}, body)
    assert type(err) is ApiError
    assert err.kind is ErrorKind.API
    assert err.status_code == 400
    assert err.error_code == 'BAD_REQUEST'
    assert err.message == 'organizationIds required'
    assert err.response == body


def test_500_message_from_body():
    err = classify_error(500, {}, {'message': 'Internal server error'})
    assert isinstance(err, ApiError)
    assert err.status_code == 500
    assert err.message == 'Internal server error'


def test_429_fractional_retry_after_keeps_whole_seconds():
    err = classify_error(429, httpx.Headers({'Retry-After': '2.9'}), None)
    assert err.retry_after == 2


def test_error_body_with_unexpected_types_is_not_trusted():
    body = {'errorCode': 42, 'message': ['not', 'a', 'string']}
    err = classify_error(400, {}, body)
    assert err.message == 'Request failed with status code 400'
    assert err.error_code is None
    assert err.response == body


def test_error_body_extra_fields_are_kept_in_response():
    body = {'errorCode': 'NOT_FOUND', 'message': 'Menu not found', 'correlationId': 'c-1'}
    err = classify_error(404, {}, body)
    assert err.error_code == 'NOT_FOUND'
    assert err.message == 'Menu not found'
    assert err.response['correlationId'] == 'c-1'


def test_message_falls_back_to_status_description():
    err = classify_error(503, {}, '<html>unavailable</html>')
    assert err.message == 'Request failed with status code 503'
    assert err.response == '<html>unavailable</html>'
    assert err.error_code is None


def test_transport_failure_defaults_to_500():
    exc = httpx.ConnectError('Connection refused')
    err = classify_error(transport_error=exc)
    assert isinstance(err, ApiError)
    assert err.status_code == 500
    assert err.message == 'Connection refused'
    assert err.response is None


def test_unknown_error_message_when_nothing_available():
    err = classify_error(transport_error=httpx.TransportError(''))
    assert err.message == UNKNOWN_ERROR_MESSAGE == 'An unknown error occurred'


def test_kinds_are_siblings():
    # one kind per failure; none of the kinds is a subtype of another
    kinds = [AuthRequiredError, AuthenticationError, RateLimitError, ApiError]
    for a in kinds:
        assert issubclass(a, IikoError)
        for b in kinds:
            if a is not b:
                assert not issubclass(a, b)
    assert {k.kind for k in kinds} == set(ErrorKind)


def test_auth_required_default_message():
    err = AuthRequiredError()
    assert err.kind is ErrorKind.AUTH_REQUIRED
    assert 'Not authenticated' in str(err)
    assert err.status_code is None


def test_configuration_error_is_not_an_api_error():
    assert issubclass(ConfigurationError, ValueError)
    assert not issubclass(ConfigurationError, IikoError)


@pytest.mark.parametrize('value, expected', [
    ('60', 60),
    (' 7 ', 7),
    ('0', 0),
    ('1.5', 1),
    ('60s', 60),
    ('abc', None),
    ('Wed, 21 Oct 2015 07:28:00 GMT', None),
    (None, None),
])
def test_parse_retry_after(value, expected):
    assert parse_retry_after(value) == expected
