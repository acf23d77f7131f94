"""应用模块入口

提供统一的模块导入接口
"""

from .config.settings import settings
from .db import get_db, engine, Base
from .auth import TokenCodec, token_codec
from .security import PasswordHasher, pwd_hasher
from .core.accounts import AccountService

__all__ = [
    "settings",
    "get_db",
    "engine",
    "Base",
    "TokenCodec",
    "token_codec",
    "PasswordHasher",
    "pwd_hasher",
    "AccountService",
]
