"""Tests for verisurepy exceptions."""

from verisurepy.exceptions import (
    VerisureApiError,
    VerisureAuthError,
    VerisureConnectionError,
    VerisureDecodeError,
    VerisureError,
    VerisureNoGiidError,
    VerisureNoInstallationsError,
    VerisureProtocolError,
    VerisureSerializationError,
    VerisureTimeoutError,
)


def test_exception_hierarchy() -> None:
    assert issubclass(VerisureConnectionError, VerisureError)
    assert issubclass(VerisureTimeoutError, VerisureConnectionError)
    assert issubclass(VerisureApiError, VerisureError)
    assert issubclass(VerisureAuthError, VerisureApiError)
    assert issubclass(VerisureDecodeError, VerisureError)
    assert issubclass(VerisureProtocolError, VerisureError)
    assert issubclass(VerisureNoInstallationsError, VerisureProtocolError)
    assert issubclass(VerisureNoGiidError, VerisureProtocolError)
    assert issubclass(VerisureSerializationError, VerisureError)


def test_timeout_is_not_builtin_timeout() -> None:
    # Task cancellation deadlines raise the builtin TimeoutError
    assert not issubclass(VerisureTimeoutError, TimeoutError)


def test_api_error_status() -> None:
    err = VerisureApiError("overview: 500 Internal Server Error", 500, "Internal Server Error")
    assert err.status_code == 500
    assert err.reason == "Internal Server Error"
    assert str(err) == "overview: 500 Internal Server Error"


def test_api_error_no_status() -> None:
    err = VerisureApiError("test error")
    assert err.status_code is None
    assert err.reason is None
