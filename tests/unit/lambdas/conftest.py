"""Fixtures shared by the lambda handler tests

Handlers build their use cases from module-level names (load_config, the
Redis DAOs, app_prefix, base_url) and from shortlinks.lambdas.dependencies.
`wire_handler` points all of them at the in-memory fakes and clears the
per-cold-start caches around each test.
"""

import json

import pytest

from shortlinks.auth import AuthorizationPolicy
from shortlinks.lambdas import dependencies


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture
def wire_handler(monkeypatch, short_link_dao, user_dao, password_hasher, token_provider):
    cached = []

    def wire(app, *builders: str):
        monkeypatch.setattr(app, 'load_config', lambda lambda_name: {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})
        monkeypatch.setattr(app, 'app_prefix', lambda: 'testapp:test')
        if hasattr(app, 'base_url'):
            monkeypatch.setattr(app, 'base_url', lambda: 'https://sho.rt')
        if hasattr(app, 'ShortLinkRedisDAO'):
            monkeypatch.setattr(app, 'ShortLinkRedisDAO', lambda **kwargs: short_link_dao)
        if hasattr(app, 'UserRedisDAO'):
            monkeypatch.setattr(app, 'UserRedisDAO', lambda **kwargs: user_dao)

        monkeypatch.setattr(dependencies, 'authorization_policy', lambda: AuthorizationPolicy(token_provider))
        monkeypatch.setattr(dependencies, 'password_hasher', lambda: password_hasher)
        monkeypatch.setattr(dependencies, 'token_provider', lambda: token_provider)

        for name in builders:
            builder = getattr(app, name)
            builder.cache_clear()
            cached.append(builder)
        return app

    yield wire

    for builder in cached:
        builder.cache_clear()


def make_event(body=None, key=None, token=None, headers=None) -> dict:
    """Build a minimal API Gateway proxy event"""
    event = {'headers': dict(headers or {}), 'pathParameters': None, 'body': None}
    if body is not None:
        event['body'] = body if isinstance(body, str) else json.dumps(body)
    if key is not None:
        event['pathParameters'] = {'key': key}
    if token is not None:
        event['headers']['Authorization'] = f'Bearer {token}'
    return event


@pytest.fixture
def event():
    return make_event


def errors_of(response: dict) -> list[dict]:
    return json.loads(response['body'])['errors']


@pytest.fixture
def errors():
    return errors_of
