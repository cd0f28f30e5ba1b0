"""Exception hierarchy.

Every failure inside a request lifecycle is one of these. The orchestrator
catches them at its boundary; none of them reach the display.
"""


class RxLensError(Exception):
    """Base class for rxlens errors."""


class EncodingError(RxLensError):
    """Asset content could not be converted to the transport representation."""


class TransportError(RxLensError):
    """The inference API answered with a non-success status or was unreachable.

    Attributes:
        status_code: HTTP status when the API answered, None for network failures
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {super().__str__()}"
        return super().__str__()


class MalformedReplyError(RxLensError):
    """The response envelope did not contain the expected text field."""
