import pytest

from authsvc.core.errors import (
    AccountError,
    DuplicateUsername,
    InvalidCredentials,
    InvalidInput,
    StoreUnavailable,
)


@pytest.mark.parametrize(
    "error_class,status_code,message",
    [
        (InvalidInput, 400, "Invalid request body"),
        (DuplicateUsername, 400, "Username already taken"),
        (InvalidCredentials, 401, "Invalid credentials"),
        (StoreUnavailable, 500, "Internal server error"),
    ],
)
def test_default_status_and_message(error_class, status_code, message):
    err = error_class()
    assert isinstance(err, AccountError)
    assert err.status_code == status_code
    assert err.message == message
    assert str(err) == message


def test_explicit_message_overrides_default():
    err = InvalidInput("Password must be at least 6 characters")
    assert err.message == "Password must be at least 6 characters"
    # class default untouched
    assert InvalidInput.message == "Invalid request body"
