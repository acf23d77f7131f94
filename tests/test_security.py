import pytest
from passlib.hash import pbkdf2_sha256

from authsvc.security import PasswordHasher


PAIRS = [
    ("secret1", "secret2"),
    ("hunter22", "Hunter22"),
    ("pässwörd", "passwort"),
    ("a" * 80, "b" * 80),
]


@pytest.mark.parametrize("password,other", PAIRS)
def test_verify_matches_only_the_hashed_password(hasher, password, other):
    hashed = hasher.hash(password)
    assert hasher.verify(password, hashed)
    assert not hasher.verify(password, hasher.hash(other))


def test_hash_is_salted_and_never_plaintext(hasher):
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")
    assert first != second
    assert first != "secret1"
    assert first


def test_cost_factor_is_applied():
    hashed = PasswordHasher(rounds=5).hash("secret1")
    assert hashed.startswith("$2b$05$")


def test_unrecognized_hash_fails_verification(hasher):
    assert hasher.verify("secret1", "not-a-hash") is False


def test_only_bcrypt_hashes_are_accepted(hasher):
    # a stored hash of another scheme must not bypass the bcrypt cost
    other_scheme = pbkdf2_sha256.hash("secret1")
    assert hasher.verify("secret1", other_scheme) is False


def test_dummy_verify_runs_without_a_hash(hasher):
    hasher.dummy_verify()
