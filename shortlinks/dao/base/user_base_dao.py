"""Abstract base class for user data access objects (DAOs).

This interface defines the contract for storing and looking up users across
different storage systems (e.g., Redis, DynamoDB, PostgreSQL). Users are
referenced by short links for ownership checks.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinks.dao.redis import UserRedisDAO
        >>> dao = UserRedisDAO(...)

        >>> dao.create(UserModel(name='Ada', email='Ada@Example.com', password='<hash>'))
        >>> dao.find_by_email('ada@example.com').name
        'Ada'
"""

from abc import ABC, abstractmethod

from shortlinks.models import UserModel


class UserBaseDAO(ABC):
    """Interface for user data access objects (DAOs)

    Methods:
        find_by_id(user_id: str, **kwargs) -> UserModel | None:
            Retrieve a user by id.

        find_by_email(email: str, **kwargs) -> UserModel | None:
            Retrieve a user by (lowercase) email.

        create(user: UserModel, **kwargs) -> UserBaseDAO:
            Insert a new user.
            Raises UserAlreadyExistsError if the email is taken.

        All methods raise DataStoreError on connection or I/O failure.
    """

    @abstractmethod
    def find_by_id(self, user_id: str, **kwargs) -> UserModel | None:
        pass

    @abstractmethod
    def find_by_email(self, email: str, **kwargs) -> UserModel | None:
        """Retrieve a user by email.

        NOTE: Emails are stored lowercase. Implementations must lowercase the
              lookup value so that lookups are case-insensitive.
        """
        pass

    @abstractmethod
    def create(self, user: UserModel, **kwargs) -> 'UserBaseDAO':
        pass
