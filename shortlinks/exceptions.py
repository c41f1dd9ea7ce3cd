class ShortLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinks_error'


class ConfigurationError(ShortLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class AuthError(ShortLinksError):
    """Base exception for credential handling errors."""

    error_code = 'auth:auth_error'


class InvalidTokenError(AuthError):
    """Raised when an access token is malformed, expired or has a bad signature."""

    error_code = 'auth:invalid_token_error'
