"""Error taxonomy for enka.network requests.

Every fetch either returns a decoded value or raises exactly one of:

    RequestSubmissionError   the transport failed before a response arrived
    HttpStatusError          the service answered with a non-2xx status
    JsonParseError           the body is not JSON
    StructuralDecodeError    the JSON does not match the expected shape
    UnknownVariantError      a union tag matched no known variant
"""

STATUS_MESSAGES = {
    400: "Bad Request: Wrong UID format",
    404: "Not Found: Player does not exist (MHY server response)",
    424: "Failed Dependency: Game maintenance or broken after update",
    429: "Too Many Requests: Rate-limited (by enka server or MHY server)",
    500: "Internal Server Error: General server issue",
    503: "Service Unavailable: Possible major failure on enka end",
}

UNKNOWN_ERROR = "Unknown Error"
UNREADABLE_BODY = "Failed to retrieve error body"


def status_message(status_code: int, reason_phrase: str | None = None) -> str:
    """Map a non-success status code to a human-readable message.

    Codes outside the table fall back to the transport's reason phrase,
    then to ``"Unknown Error"``.
    """
    message = STATUS_MESSAGES.get(status_code)
    if message is not None:
        return message
    return reason_phrase or UNKNOWN_ERROR


class EnkaError(Exception):
    """Base class for every failure raised by the fetch functions."""


class RequestSubmissionError(EnkaError):
    """The request could not be sent or no response was received."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {type(cause).__name__}: {cause}")


class HttpStatusError(EnkaError):
    """The service answered with a non-success status code."""

    def __init__(self, status_code: int, message: str, body: str = ""):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"HTTP {status_code}: {message}")


class DecodeError(EnkaError):
    """The response body could not be decoded into the target type."""

    def __init__(self, target: str, errors: list[dict] | None = None, detail: str = ""):
        self.target = target
        self.errors = errors or []
        self.detail = detail
        super().__init__(f"Failed to decode {target}: {detail}" if detail else f"Failed to decode {target}")


class JsonParseError(DecodeError):
    """The response body is not valid JSON."""


class StructuralDecodeError(DecodeError):
    """The JSON is valid but does not match the target shape."""


class UnknownVariantError(StructuralDecodeError):
    """A polymorphic value carried a tag no variant is registered for."""
