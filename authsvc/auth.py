"""认证模块

该模块负责会话令牌（JWT）的签发与校验。令牌本身就是唯一的会话状态，
服务端不保存任何会话。
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from .config.settings import settings
from .core.errors import InvalidToken, TokenExpired


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str
    expires_at: datetime


class TokenCodec:
    """使用进程级密钥签发和校验会话令牌"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl: timedelta = timedelta(days=7)):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, username: str, ttl: Optional[timedelta] = None) -> str:
        """签发包含 userId、username 与过期时间的令牌"""
        now = datetime.now(timezone.utc)
        expire = now + (ttl if ttl is not None else self.ttl)
        to_encode = {
            "userId": user_id,
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """校验签名后再校验过期时间

        签名无效或格式错误抛出 InvalidToken，已过期抛出 TokenExpired。
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpired("token expired") from exc
        except JWTError as exc:
            raise InvalidToken("token invalid") from exc

        user_id = payload.get("userId")
        username = payload.get("username")
        # bool 是 int 的子类，需要单独排除
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
            raise InvalidToken("token claims malformed")
        return TokenClaims(
            user_id=user_id,
            username=username,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


# 进程级默认实例，密钥在启动时读取一次
token_codec = TokenCodec(
    settings.SECRET_KEY,
    algorithm=settings.ALGORITHM,
    ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
)
