"""业务异常定义

每个异常携带返回给客户端的状态码和安全的错误信息，详细原因只写入服务端日志。
"""

from typing import Optional


class AccountError(Exception):
    """账户操作失败的基类"""

    status_code = 400
    message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(AccountError):
    status_code = 400
    message = "Invalid request body"


class DuplicateUsername(AccountError):
    status_code = 400
    message = "Username already taken"


class InvalidCredentials(AccountError):
    """未知用户与密码错误共用同一个错误，避免用户名枚举"""

    status_code = 401
    message = "Invalid credentials"


class StoreUnavailable(AccountError):
    status_code = 500
    message = "Internal server error"


class InvalidToken(Exception):
    """令牌签名无效或格式错误"""


class TokenExpired(InvalidToken):
    """令牌签名有效但已过期"""
