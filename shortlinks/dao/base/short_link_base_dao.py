"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all ShortLink DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB, PostgreSQL).

Responsibilities:
    - Provide an interface for inserting, updating, soft-deleting and retrieving
      ShortLinkModel objects.
    - Hide soft-deleted links from every read path.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinks.models import ShortLinkModel
        >>> from shortlinks.dao.redis import ShortLinkRedisDAO

        >>> dao = ShortLinkRedisDAO(...)

        >>> short_link = ShortLinkModel(
        ...     destination_url="https://example.com/blog/article-123",
        ...     key="a1b2c3",
        ... )
        >>> dao.create(short_link, owner_id="user-123")

        >>> retrieved = dao.find_by_key("a1b2c3")
        >>> print(retrieved.destination_url)
        https://example.com/blog/article-123

        >>> dao.find_by_key_and_owner("a1b2c3", "someone-else") is None
        True
"""

from abc import ABC, abstractmethod

from shortlinks.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        find_by_key(key: str) -> ShortLinkModel | None:
            Retrieve an active link by key.

        find_by_key_and_owner(key: str, owner_id: str) -> ShortLinkModel | None:
            Retrieve an active link by key, only if it belongs to owner_id.

        find_by_owner(owner_id: str) -> list[ShortLinkModel]:
            Retrieve all active links of an owner, newest first.

        create(short_link: ShortLinkModel, owner_id: str | None = None) -> ShortLinkBaseDAO:
            Insert a new link, optionally attached to an owner.
            Raises ShortLinkAlreadyExistsError if the key is taken.

        update(short_link: ShortLinkModel) -> ShortLinkBaseDAO:
            Persist destination_url, click_count and updated_at.
            Raises ShortLinkNotFoundError if the link does not exist.

        record_click(short_link: ShortLinkModel) -> int:
            Atomically add one to the stored click_count, return the new count.
            Raises ShortLinkNotFoundError if the link does not exist.

        delete(short_link: ShortLinkModel) -> ShortLinkBaseDAO:
            Persist the soft-delete fields (deleted_at, updated_at).
            Raises ShortLinkNotFoundError if the link does not exist.

        All methods raise DataStoreError on connection or I/O failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortLinkRedisDAO) must
        extend this class and implement all abstract methods.

    NOTE:
        - Reads never return a link whose deleted_at is set.
        - Records are never physically removed by this interface.
    """

    @abstractmethod
    def find_by_key(self, key: str, **kwargs) -> ShortLinkModel | None:
        """Retrieve an active ShortLinkModel by its key.

        Args:
            key (str):
                The key of the short link.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel | None: The link if found and not deleted, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_key_and_owner(self, key: str, owner_id: str, **kwargs) -> ShortLinkModel | None:
        """Retrieve an active ShortLinkModel by key, scoped to its owner.

        Returns None both when the link does not exist and when it belongs to
        another owner, so callers cannot tell the two cases apart.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_owner(self, owner_id: str, **kwargs) -> list[ShortLinkModel]:
        """Retrieve all active links of an owner, ordered newest first.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def create(self, short_link: ShortLinkModel, owner_id: str | None = None, **kwargs) -> 'ShortLinkBaseDAO':
        """Insert a new ShortLinkModel into the data store.

        Args:
            short_link (ShortLinkModel):
                The ShortLinkModel instance to be inserted.

            owner_id (str | None):
                Owner to attach the link to. Defaults to short_link.owner_id.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a ShortLinkModel with the same key already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def update(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Persist the mutable fields of an existing ShortLinkModel.

        Raises:
            ShortLinkNotFoundError:
                If no link with the given key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def record_click(self, short_link: ShortLinkModel, **kwargs) -> int:
        """Add one click to the stored short link.

        Implementations must increment the stored counter in place and write
        no other field, so concurrent updates of the same link are kept.

        Returns:
            int: The stored click count after the increment.

        Raises:
            ShortLinkNotFoundError:
                If no link with the given key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Persist the soft-delete fields of an existing ShortLinkModel.

        Raises:
            ShortLinkNotFoundError:
                If no link with the given key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
