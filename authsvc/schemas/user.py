"""用户数据结构定义

定义用户相关的Pydantic模型
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """注册/登录请求体

    字段允许缺失，具体规则由业务层校验并返回第一条不满足的规则。
    """
    username: Optional[str] = None
    password: Optional[str] = None


class UserRead(BaseModel):
    """读取用户时的模型"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    token: str
    user: UserRead


class AuthStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_logged_in: bool = Field(alias="isLoggedIn")
    user: Optional[UserRead] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    database: str
