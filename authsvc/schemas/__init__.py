"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .user import (
    Credentials,
    UserRead,
    AuthResponse,
    AuthStatusResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "Credentials",
    "UserRead",
    "AuthResponse",
    "AuthStatusResponse",
    "ErrorResponse",
    "HealthResponse",
]
