"""账户服务

实现注册、登录和登录状态检查三条线性流程：
- 每一步失败都直接抛出业务异常，后续步骤不会执行
- 存储、密码哈希器和令牌编解码器在构造时注入，便于测试替换
- 服务端不保存会话，令牌是唯一的会话状态
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..auth import TokenCodec
from ..crud.user import UserStore
from ..security import PasswordHasher
from .errors import (
    DuplicateUsername,
    InvalidCredentials,
    InvalidInput,
    InvalidToken,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
USERNAME_RE = re.compile(r"^[A-Za-z0-9_]+$")


@dataclass(frozen=True)
class AuthResult:
    user_id: int
    username: str
    token: str


@dataclass(frozen=True)
class AuthStatus:
    is_logged_in: bool
    user_id: Optional[int] = None
    username: Optional[str] = None


NOT_LOGGED_IN = AuthStatus(is_logged_in=False)


def normalize_username(username: Optional[str]) -> str:
    return (username or "").strip()


def validate_username(username: str) -> None:
    """校验原始用户名，不满足时抛出 InvalidInput（只报告第一条规则）

    长度下限按去除首尾空白后计算；字符集校验针对原始值，带空白的用户名会被拒绝。
    """
    if len(username.strip()) < USERNAME_MIN_LENGTH:
        raise InvalidInput(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(username) > USERNAME_MAX_LENGTH:
        raise InvalidInput(f"Username must be at most {USERNAME_MAX_LENGTH} characters")
    if not USERNAME_RE.match(username):
        raise InvalidInput("Username can only contain letters, numbers, and underscores")


def validate_password(password: Optional[str]) -> None:
    if not password or len(password) < PASSWORD_MIN_LENGTH:
        raise InvalidInput(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")


class AccountService:

    def __init__(self, store: UserStore, hasher: PasswordHasher, tokens: TokenCodec):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def register(self, username: Optional[str], password: Optional[str]) -> AuthResult:
        """注册新用户并签发令牌"""
        username = username or ""
        validate_username(username)
        validate_password(password)

        # 快速路径；并发注册时由插入的唯一约束兜底
        if self.store.find_by_username(username) is not None:
            logger.info("Registration rejected, username %r already taken", username)
            raise DuplicateUsername()

        password_hash = self.hasher.hash(password)
        user_id = self.store.insert(username, password_hash)
        token = self.tokens.issue(user_id, username)
        logger.info("User registered: id=%s username=%r", user_id, username)
        return AuthResult(user_id=user_id, username=username, token=token)

    def login(self, username: Optional[str], password: Optional[str]) -> AuthResult:
        """校验凭据并签发令牌"""
        username = normalize_username(username)
        if not username or not password:
            raise InvalidInput("Username and password required")

        user = self.store.find_by_username(username)
        if user is None:
            self.hasher.dummy_verify()
            logger.info("Login failed for username %r", username)
            raise InvalidCredentials()
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed for username %r", username)
            raise InvalidCredentials()

        token = self.tokens.issue(user.id, user.username)
        logger.info("User logged in: id=%s username=%r", user.id, user.username)
        return AuthResult(user_id=user.id, username=user.username, token=token)

    def check_auth(self, token: Optional[str]) -> AuthStatus:
        """检查令牌；任何失败都视为未登录而不是错误"""
        if not token:
            return NOT_LOGGED_IN
        try:
            claims = self.tokens.verify(token)
        except InvalidToken as exc:
            logger.debug("Token rejected: %s", exc)
            return NOT_LOGGED_IN

        try:
            user = self.store.find_by_id(claims.user_id)
        except StoreUnavailable:
            logger.warning("Auth check could not confirm user id=%s", claims.user_id)
            return NOT_LOGGED_IN
        if user is None:
            return NOT_LOGGED_IN

        return AuthStatus(is_logged_in=True, user_id=claims.user_id, username=claims.username)
