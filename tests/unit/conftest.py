"""In-memory collaborators for use case and lambda handler tests

The fakes implement the same DAO and provider interfaces as production code
and record their write calls, so tests can assert on what was (not) persisted.
"""

import copy

import pytest

from shortlinks.auth import PasswordHasher, TokenProvider
from shortlinks.dao.base import ShortLinkBaseDAO, UserBaseDAO
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError, UserAlreadyExistsError
from shortlinks.exceptions import InvalidTokenError
from shortlinks.models import ShortLinkModel, UserModel


class InMemoryShortLinkDAO(ShortLinkBaseDAO):
    def __init__(self):
        self.records: dict[str, ShortLinkModel] = {}
        self.created: list[ShortLinkModel] = []
        self.updated: list[ShortLinkModel] = []
        self.deleted: list[ShortLinkModel] = []
        self.clicked: list[str] = []

    def find_by_key(self, key, **kwargs):
        record = self.records.get(key)
        if record is None or record.is_deleted:
            return None
        return copy.copy(record)

    def find_by_key_and_owner(self, key, owner_id, **kwargs):
        link = self.find_by_key(key)
        return link if link is not None and link.owner_id == owner_id else None

    def find_by_owner(self, owner_id, **kwargs):
        links = [copy.copy(r) for r in self.records.values() if r.owner_id == owner_id and not r.is_deleted]
        return sorted(links, key=lambda link: link.created_at, reverse=True)

    def create(self, short_link, owner_id=None, **kwargs):
        if owner_id is not None:
            short_link.owner_id = owner_id
        if short_link.key in self.records:
            raise ShortLinkAlreadyExistsError(f"Short link with key '{short_link.key}' already exists.")
        self.records[short_link.key] = copy.copy(short_link)
        self.created.append(short_link)
        return self

    def update(self, short_link, **kwargs):
        if short_link.key not in self.records:
            raise ShortLinkNotFoundError(f"Short link with key '{short_link.key}' not found.")
        self.records[short_link.key] = copy.copy(short_link)
        self.updated.append(short_link)
        return self

    def record_click(self, short_link, **kwargs):
        if short_link.key not in self.records:
            raise ShortLinkNotFoundError(f"Short link with key '{short_link.key}' not found.")
        record = self.records[short_link.key]
        record.click_count += 1
        self.clicked.append(short_link.key)
        return record.click_count

    def delete(self, short_link, **kwargs):
        if short_link.key not in self.records:
            raise ShortLinkNotFoundError(f"Short link with key '{short_link.key}' not found.")
        self.records[short_link.key] = copy.copy(short_link)
        self.deleted.append(short_link)
        return self


class InMemoryUserDAO(UserBaseDAO):
    def __init__(self):
        self.records: dict[str, UserModel] = {}

    def find_by_id(self, user_id, **kwargs):
        return self.records.get(user_id)

    def find_by_email(self, email, **kwargs):
        return next((user for user in self.records.values() if user.email == email.lower()), None)

    def create(self, user, **kwargs):
        if user.id in self.records or self.find_by_email(user.email) is not None:
            raise UserAlreadyExistsError(f"User with email '{user.email}' already exists.")
        self.records[user.id] = user
        return self


class FakePasswordHasher(PasswordHasher):
    def hash(self, password):
        return f'hashed:{password}'

    def compare(self, password, hashed):
        return hashed == f'hashed:{password}'


class FakeTokenProvider(TokenProvider):
    def __init__(self):
        self.issued: list[dict] = []

    def generate(self, claims):
        self.issued.append(claims)
        return f'token-for:{claims["sub"]}'

    def verify(self, token):
        if not token.startswith('token-for:'):
            raise InvalidTokenError('Access token is invalid.')
        return token.removeprefix('token-for:')


@pytest.fixture
def short_link_dao() -> InMemoryShortLinkDAO:
    return InMemoryShortLinkDAO()


@pytest.fixture
def user_dao() -> InMemoryUserDAO:
    return InMemoryUserDAO()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def token_provider() -> FakeTokenProvider:
    return FakeTokenProvider()


@pytest.fixture
def owner(user_dao: InMemoryUserDAO) -> UserModel:
    user = UserModel(id='user-1', name='Ada', email='ada@example.com', password='hashed:Str0ng!pass')
    user_dao.create(user)
    return user


@pytest.fixture
def stranger(user_dao: InMemoryUserDAO) -> UserModel:
    user = UserModel(id='user-2', name='Bob', email='bob@example.com', password='hashed:Str0ng!pass')
    user_dao.create(user)
    return user


@pytest.fixture
def owned_link(short_link_dao: InMemoryShortLinkDAO, owner: UserModel) -> ShortLinkModel:
    short_link = ShortLinkModel(destination_url='https://example.com/a', key='abc123', base_url='https://sho.rt', click_count=5)
    short_link_dao.create(short_link, owner_id=owner.id)
    short_link_dao.created.clear()
    return short_link
