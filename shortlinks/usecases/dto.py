"""Projections returned by the use cases

Every projection renders to a JSON-serializable dict via to_dict(), with
datetimes as ISO 8601 strings.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any

from shortlinks.models import ShortLinkModel, UserModel


def _serialize(data: dict[str, Any]) -> dict[str, Any]:
    return {name: value.isoformat() if isinstance(value, datetime) else value for name, value in data.items()}


@dataclass(frozen=True)
class CreatedShortLink:
    key: str
    short_url: str
    destination_url: str

    @classmethod
    def from_model(cls, short_link: ShortLinkModel) -> 'CreatedShortLink':
        return cls(key=short_link.key, short_url=short_link.short_url, destination_url=short_link.destination_url)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ResolvedShortLink:
    destination_url: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ShortLinkDetails:
    key: str
    short_url: str
    destination_url: str
    click_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, short_link: ShortLinkModel) -> 'ShortLinkDetails':
        return cls(
            key=short_link.key,
            short_url=short_link.short_url,
            destination_url=short_link.destination_url,
            click_count=short_link.click_count,
            created_at=short_link.created_at,
            updated_at=short_link.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return _serialize(asdict(self))


@dataclass(frozen=True)
class CreatedUser:
    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_model(cls, user: UserModel) -> 'CreatedUser':
        return cls(id=user.id, name=user.name, email=user.email, created_at=user.created_at)

    def to_dict(self) -> dict[str, Any]:
        return _serialize(asdict(self))


@dataclass(frozen=True)
class AccessToken:
    access_token: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
