"""
Failure classification.

Every error the service knows how to explain derives from KnownError. The
catalog endpoint is the boundary that turns these into a JSON envelope;
nothing below it catches them.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Upstream catalog failures
    EXTERNAL_API_ERROR = "external_api_error"
    INVALID_RESPONSE = "invalid_response"

    # Transport-level refusals
    METHOD_NOT_ALLOWED = "method_not_allowed"

    # Unknown
    UNKNOWN = "unknown"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.status_code = status_code
        super().__init__(message)


class CatalogFetchError(KnownError):
    """Raised when the upstream skins catalog cannot be loaded."""


class TransportError(CatalogFetchError):
    """
    The catalog request did not produce a successful response.

    Covers non-2xx statuses, connection failures and timeouts.
    """

    def __init__(self, message: str, status: int | None = None, detail: str | None = None):
        self.status = status
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message=message,
            detail=detail,
            status_code=502,
        )


class ParseError(CatalogFetchError):
    """The catalog body was not JSON, or not a list of skins."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_RESPONSE,
            message=message,
            detail=detail,
            status_code=502,
        )


class MethodNotAllowedError(KnownError):
    """An endpoint was called with a verb it does not serve."""

    def __init__(self, method: str, allowed: tuple[str, ...]):
        self.method = method
        self.allowed = allowed
        super().__init__(
            kind=FailureKind.METHOD_NOT_ALLOWED,
            message="Method not allowed",
            detail=f"{method} is not supported; use one of {', '.join(allowed)}",
            status_code=405,
        )
