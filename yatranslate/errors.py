"""Exceptions raised by the yatranslate client."""


class TranslateError(Exception):
    """Base class for errors raised by yatranslate.

    Transport failures (DNS, connection, timeout) are not wrapped and
    surface as the transport's own exceptions.
    """


class MissingKeyError(TranslateError):
    """Raised when a client is constructed without an API key."""

    def __init__(self, message: str = "empty API key") -> None:
        super().__init__(message)


class MalformedResponseError(TranslateError):
    """Exception raised when a response body is not a valid envelope.

    Attributes:
        cause: The underlying decoding or validation error.
        raw_body: The response body exactly as received.
    """

    def __init__(self, cause: Exception, raw_body: bytes) -> None:
        self.cause = cause
        self.raw_body = raw_body
        super().__init__(f"malformed response: {cause}: {self.body_text!r}")

    @property
    def body_text(self) -> str:
        """The raw body decoded for display."""
        return self.raw_body.decode("utf-8", errors="replace")


class ApiError(TranslateError):
    """Exception raised when the service answers with a failing status code.

    Attributes:
        status_code: The ``code`` field of the response.
        message: The ``message`` field of the response.
    """

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")
