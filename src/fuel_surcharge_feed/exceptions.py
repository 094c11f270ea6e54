"""Custom exceptions for the fuel surcharge feed client."""


class FuelFeedException(Exception):
    """Base exception for the fuel surcharge feed client.

    All custom exceptions in this package should inherit from this base class.
    """

    pass


class TransportException(FuelFeedException):
    """Raised when the feed cannot be downloaded.

    This exception is raised when:
    - The host cannot be reached or the connection drops
    - The request times out
    - The server answers with a non-2xx status

    Attributes:
        url: The feed URL that was requested
        status_code: HTTP status code, if a response was received
        original_error: The original exception from the HTTP library
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class MalformedFeedException(FuelFeedException):
    """Raised when the feed text is not parseable as XML.

    Individual bad ``rate`` elements never raise; they are skipped and
    reported as diagnostics instead.

    Attributes:
        position: (line, column) of the syntax error, when known
        original_error: The original exception from the XML parser
    """

    def __init__(
        self,
        message: str,
        position: tuple[int, int] | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.position = position
        self.original_error = original_error


class ConfigurationException(FuelFeedException):
    """Raised when configuration errors occur.

    This exception is raised when:
    - The feed URL is not configured
    - A configured value fails validation

    Attributes:
        config_key: The configuration key that caused the error
        config_value: The invalid configuration value
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: str | None = None,
    ):
        super().__init__(message)
        self.config_key = config_key
        self.config_value = config_value


# Short names used throughout the docs and by callers
TransportError = TransportException
MalformedFeedError = MalformedFeedException
