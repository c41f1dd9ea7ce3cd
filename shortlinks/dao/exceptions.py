from shortlinks.exceptions import ShortLinksError


class DAOError(ShortLinksError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortLinkNotFoundError(DAOError):
    """Raised when a ShortLinkModel is not found in the data store."""

    error_code = 'dao:short_link_not_found_error'


class ShortLinkAlreadyExistsError(DAOError):
    """Raised when inserting a ShortLinkModel whose key is already taken."""

    error_code = 'dao:short_link_already_exists_error'


class UserAlreadyExistsError(DAOError):
    """Raised when inserting a UserModel whose id or email is already taken."""

    error_code = 'dao:user_already_exists_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'
