from datetime import datetime

from beartype import beartype

from shortlinks.models import UserModel
from shortlinks.dao.base import UserBaseDAO
from shortlinks.dao.redis.mixins import RedisClientMixin
from shortlinks.dao.redis.helpers import handle_redis_connection_error
from shortlinks.dao.exceptions import UserAlreadyExistsError


class UserRedisDAO(RedisClientMixin, UserBaseDAO):
    """Redis-based DAO for users

    Users are stored as hashes under users:<id>, with a users:email:<email>
    string pointing back to the id for lookups by email.
    """

    @handle_redis_connection_error
    @beartype
    def find_by_id(self, user_id: str, **kwargs) -> UserModel | None:
        data = self.redis.hgetall(self.keys.user_key(user_id))
        if not data:
            return None
        return UserModel(
            id=data['id'],
            name=data['name'],
            email=data['email'],
            password=data['password'],
            created_at=datetime.fromisoformat(data['created_at']),
            updated_at=datetime.fromisoformat(data['updated_at']),
        )

    @handle_redis_connection_error
    @beartype
    def find_by_email(self, email: str, **kwargs) -> UserModel | None:
        user_id = self.redis.get(self.keys.user_email_key(email))
        if user_id is None:
            return None
        return self.find_by_id(user_id)

    @handle_redis_connection_error
    @beartype
    def create(self, user: UserModel, **kwargs) -> 'UserRedisDAO':
        """Insert a user and its email index entry

        NOTE: The email index is claimed with SET NX before the user hash is
              written, so two concurrent sign-ups with the same email can't
              both succeed.

        Raises:
            UserAlreadyExistsError:
                If the email or the id is already taken.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        user_key = self.keys.user_key(user.id)
        user_email_key = self.keys.user_email_key(user.email)

        if self.redis.exists(user_key):
            raise UserAlreadyExistsError(f"User with ID '{user.id}' already exists.")
        if not self.redis.set(user_email_key, user.id, nx=True):
            raise UserAlreadyExistsError(f"User with email '{user.email}' already exists.")

        # fmt: off
        self.redis.hset(user_key, mapping={
            'id': user.id,
            'name': user.name,
            'email': user.email,
            'password': user.password,
            'created_at': user.created_at.isoformat(),
            'updated_at': user.updated_at.isoformat(),
        })
        # fmt: on
        return self
