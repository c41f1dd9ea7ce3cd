"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. base_url() configuration
   - 1.1. Reads BASE_URL from the environment and strips trailing slashes.
   - 1.2. Falls back to the local development origin.

2. get_short_url() retrieves short URL string representation

3. require_environment() decorator behavior
   - 3.1. Ensures decorated functions execute when all env vars are present.
   - 3.2. Ensures missing or empty env vars raise a descriptive MissingEnvironmentVariableError.

4. guarantee_500_response() behavior
"""

import json

import pytest

from shortlinks.exceptions import MissingEnvironmentVariableError
from shortlinks.utils.helpers import (
    base_url,
    get_short_url,
    require_environment,
    guarantee_500_response,
)


# -------------------------------
# 1.1. Configured base URL
# -------------------------------


@pytest.mark.parametrize(
    'configured, expected',
    [
        ('https://sho.rt', 'https://sho.rt'),
        ('https://sho.rt/', 'https://sho.rt'),
        ('https://abc123.execute-api.us-east-1.amazonaws.com/Prod/', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'),
    ],
)
def test_base_url_from_environment(monkeypatch, configured, expected):
    """Ensure base_url() reads BASE_URL without a trailing slash."""
    monkeypatch.setenv('BASE_URL', configured)
    assert base_url() == expected


# -------------------------------
# 1.2. Local fallback behavior
# -------------------------------


@pytest.mark.parametrize('configured', [None, ''])
def test_base_url_local_fallback(monkeypatch, configured):
    """Ensure base_url() returns localhost URL when BASE_URL is not set."""
    if configured is None:
        monkeypatch.delenv('BASE_URL', raising=False)
    else:
        monkeypatch.setenv('BASE_URL', configured)
    assert base_url() == 'http://localhost:3000'


# -------------------------------
# 2. Get short url string representation
# -------------------------------


@pytest.mark.parametrize(
    'key, origin, expected',
    [
        ('abc123', 'https://lambda.hello.com', 'https://lambda.hello.com/abc123'),
        ('xyz789', 'https://lambda.hello.com/', 'https://lambda.hello.com/xyz789'),
        ('my-key', 'https://lambda.api.com', 'https://lambda.api.com/my-key'),
    ],
)
def test_get_short_url(key, origin, expected):
    """Ensure get_short_url() returns the correct short URL string."""
    assert get_short_url(key, origin) == expected


def test_get_short_url_defaults_to_base_url(monkeypatch):
    monkeypatch.setenv('BASE_URL', 'https://sho.rt/')
    assert get_short_url('abc123') == 'https://sho.rt/abc123'


# -------------------------------
# 3.1. require_environment() happy path
# -------------------------------


def test_require_environment_happy_path(monkeypatch):
    """3.1. Decorated function executes when all env vars are present."""
    monkeypatch.setenv('ENV1', 'value1')
    monkeypatch.setenv('ENV2', 'value2')

    @require_environment('ENV1', 'ENV2')
    def sample_function(x: int) -> int:
        return x + 1

    assert sample_function(1) == 2


# -------------------------------
# 3.2. require_environment() missing or empty env vars
# -------------------------------


@pytest.mark.parametrize(
    'env_setup, missing_names',
    [
        ({'ENV1': None, 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': '', 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': None, 'ENV2': None}, ["'ENV1'", "'ENV2'"]),
        ({'ENV1': '', 'ENV2': ''}, ["'ENV1'", "'ENV2'"]),
    ],
)
def test_require_environment_missing_or_empty(monkeypatch, env_setup, missing_names):
    """3.2. Missing or empty env vars raise a descriptive MissingEnvironmentVariableError."""
    for name, value in env_setup.items():
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    @require_environment('ENV1', 'ENV2')
    def sample_function() -> None:
        pass

    expected_message = f'Missing required environment variables: {", ".join(missing_names)}'
    with pytest.raises(MissingEnvironmentVariableError, match=expected_message):
        sample_function()


# -------------------------------
# 4. guarantee_500_response() behavior
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """4.1. Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('shortlinks.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['error_code'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """4.2. Faulty lambda handler reraises the original exception when running locally."""
    monkeypatch.setattr('shortlinks.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_responses():
    @guarantee_500_response
    def lambda_handler(event, context):
        return {'statusCode': 200, 'body': '{}'}

    assert lambda_handler({}, None) == {'statusCode': 200, 'body': '{}'}
