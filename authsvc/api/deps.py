"""路由依赖

进程级的哈希器和令牌编解码器在启动时构建一次，每个请求拿到绑定自己会话的账户服务。
测试可通过 app.dependency_overrides 替换其中任意一项。
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from ..auth import TokenCodec, token_codec
from ..core.accounts import AccountService
from ..crud.user import UserStore
from ..database.connection import get_db
from ..security import PasswordHasher, pwd_hasher


def get_password_hasher() -> PasswordHasher:
    return pwd_hasher


def get_token_codec() -> TokenCodec:
    return token_codec


def get_account_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenCodec = Depends(get_token_codec),
) -> AccountService:
    return AccountService(UserStore(db), hasher, tokens)


def get_bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """从 Authorization: Bearer <token> 中取出令牌，缺失或格式不对时返回None"""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]
