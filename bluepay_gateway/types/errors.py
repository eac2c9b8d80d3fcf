"""Client error types.

Expected failures (gateway rejections, network problems) are reported through
the STATUS and MESSAGE fields of the returned FieldSet, never raised. The
exceptions here cover misuse of the library and the internal hand-off between
the transport and the synthetic error response.
"""

from typing import Optional


class BluePayError(Exception):
    """Base error for the gateway client."""
    pass


class ConfigurationError(BluePayError):
    """Client constructed without usable credentials or settings."""
    pass


class TransportError(BluePayError):
    """HTTP exchange with the gateway failed before a response body was read.

    Raised by the transport layer and converted by the client into a
    ``STATUS=E`` response; it does not escape ``submit``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        """Initialize transport error.

        Args:
            message: Human-readable failure description
            cause: Underlying exception raised by the HTTP library
        """
        super().__init__(message)
        self.cause = cause


def map_error_to_message(error: BaseException) -> str:
    """Renders a failure description for the synthetic MESSAGE field.

    Some httpx exceptions (timeouts in particular) carry an empty message, in
    which case the exception class name is used.
    """
    if isinstance(error, TransportError) and error.cause is not None:
        return map_error_to_message(error.cause)
    message = str(error).strip()
    return message or type(error).__name__
