from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from authsvc.auth import TokenCodec
from authsvc.core.errors import InvalidToken, TokenExpired


def test_issue_and_verify_round_trip(codec):
    token = codec.issue(7, "alice")
    claims = codec.verify(token)
    assert claims.user_id == 7
    assert claims.username == "alice"
    assert claims.expires_at > datetime.now(timezone.utc) + timedelta(days=6)


def test_expired_token_is_distinguished(codec):
    token = codec.issue(7, "alice", ttl=timedelta(seconds=-5))
    with pytest.raises(TokenExpired):
        codec.verify(token)


def test_tampered_token_is_invalid_not_expired(codec):
    token = codec.issue(7, "alice")
    head, payload, sig = token.split(".")
    forged = ".".join([head, payload, sig[:-2] + ("AA" if sig[-2:] != "AA" else "BB")])
    with pytest.raises(InvalidToken) as excinfo:
        codec.verify(forged)
    assert not isinstance(excinfo.value, TokenExpired)


def test_signature_checked_before_expiry(codec):
    other = TokenCodec("another-secret")
    token = other.issue(7, "alice", ttl=timedelta(seconds=-5))
    with pytest.raises(InvalidToken) as excinfo:
        codec.verify(token)
    assert not isinstance(excinfo.value, TokenExpired)


def test_rotating_secret_invalidates_tokens(codec):
    token = codec.issue(7, "alice")
    with pytest.raises(InvalidToken):
        TokenCodec("rotated-secret").verify(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_invalid(codec, token):
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_missing_claims_are_invalid(codec):
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "alice", "exp": exp}, "test-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_token_without_expiry_is_invalid(codec):
    token = jwt.encode({"userId": 7, "username": "alice"}, "test-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        TokenCodec("")
