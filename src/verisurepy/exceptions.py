"""Exceptions for the verisurepy library."""


class VerisureError(Exception):
    """Base exception for verisurepy."""


class VerisureConnectionError(VerisureError):
    """Raised when unable to connect to the Verisure API."""


class VerisureTimeoutError(VerisureConnectionError):
    """Raised when a request to the Verisure API times out."""


class VerisureApiError(VerisureError):
    """Raised when an API call returns a non-200 response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class VerisureAuthError(VerisureApiError):
    """Raised when an endpoint refuses the login request."""


class VerisureDecodeError(VerisureError):
    """Raised when a response body is not the expected JSON."""


class VerisureProtocolError(VerisureError):
    """Raised when a valid response lacks data the client needs."""


class VerisureNoInstallationsError(VerisureProtocolError):
    """Raised when the account has no installations."""


class VerisureNoGiidError(VerisureProtocolError):
    """Raised when the first installation record carries no giid."""


class VerisureSerializationError(VerisureError):
    """Raised when a request payload cannot be encoded."""
