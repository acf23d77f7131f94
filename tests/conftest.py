import os
import sys
import tempfile
from datetime import timedelta
from pathlib import Path

import pytest

# Ensure project root is on sys.path so tests can import 'authsvc' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read once at import, so the test environment must be set first
TEST_DB = Path(tempfile.gettempdir()) / "authsvc_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

from authsvc.db import Base, engine, SessionLocal  # noqa: E402
from authsvc import models  # noqa: E402,F401
from authsvc.auth import TokenCodec  # noqa: E402
from authsvc.core.accounts import AccountService  # noqa: E402
from authsvc.crud.user import UserStore  # noqa: E402
from authsvc.security import PasswordHasher  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts from an empty users table
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return TokenCodec("test-secret", ttl=timedelta(days=7))


@pytest.fixture
def service(db, hasher, codec):
    return AccountService(UserStore(db), hasher, codec)
