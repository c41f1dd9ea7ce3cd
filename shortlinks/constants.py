from enum import StrEnum


class Defaults:
    """Default values for generated data."""

    KEY_LENGTH = 6  # Length of generated short link keys
    BASE_URL = 'http://localhost:3000'  # Public origin used when BASE_URL is not set
    TOKEN_TTL = 86_400  # Access token lifetime (1 day in seconds)


class Limits:
    """Length bounds for validated fields."""

    KEY_MAX_LENGTH = 64
    NAME_MAX_LENGTH = 255
    EMAIL_MAX_LENGTH = 255
    PASSWORD_MAX_LENGTH = 255
    PASSWORD_STRENGTH_MIN_LENGTH = 8
    PASSWORD_STRENGTH_MAX_LENGTH = 30


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        BASE_URL = 'BASE_URL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'

    class Auth(StrEnum):
        JWT_SECRET = 'JWT_SECRET'  # noqa: S105
        JWT_EXPIRES_IN = 'JWT_EXPIRES_IN_SECONDS'


class Event(StrEnum):
    """Structured log event names."""

    SHORT_LINK_CREATED = 'SHORT_LINK_CREATED'
    SHORT_LINK_RESOLVED = 'SHORT_LINK_RESOLVED'
    SHORT_LINK_UPDATED = 'SHORT_LINK_UPDATED'
    SHORT_LINK_DELETED = 'SHORT_LINK_DELETED'
    SHORT_LINK_NOT_FOUND = 'SHORT_LINK_NOT_FOUND'
    OWNER_NOT_FOUND = 'OWNER_NOT_FOUND'
    USER_CREATED = 'USER_CREATED'
    LOGIN_SUCCEEDED = 'LOGIN_SUCCEEDED'
    LOGIN_FAILED = 'LOGIN_FAILED'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
