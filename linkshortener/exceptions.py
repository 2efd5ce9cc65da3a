class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:link_shortener_error'


class ValidationError(LinkShortenerError):
    """Raised when caller-provided input is rejected."""

    error_code = 'app:validation_error'


class InvalidURLError(ValidationError):
    """Raised when a URL to shorten is empty or malformed."""

    error_code = 'app:invalid_url_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError, KeyError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'
