from typing import Optional

from fastapi import APIRouter, Depends

from ... import schemas
from ...core.accounts import AccountService
from ..deps import get_account_service, get_bearer_token

router = APIRouter(tags=["auth"])

ERROR_RESPONSES = {
    400: {"model": schemas.ErrorResponse},
    500: {"model": schemas.ErrorResponse},
}


@router.post(
    "/register",
    status_code=201,
    response_model=schemas.AuthResponse,
    responses=ERROR_RESPONSES,
)
def register(payload: schemas.Credentials, service: AccountService = Depends(get_account_service)):
    """注册新用户并返回令牌"""
    result = service.register(payload.username, payload.password)
    return schemas.AuthResponse(
        message="Registration successful!",
        token=result.token,
        user=schemas.UserRead(id=result.user_id, username=result.username),
    )


@router.post(
    "/login",
    response_model=schemas.AuthResponse,
    responses={**ERROR_RESPONSES, 401: {"model": schemas.ErrorResponse}},
)
def login(payload: schemas.Credentials, service: AccountService = Depends(get_account_service)):
    """用户名密码登录"""
    result = service.login(payload.username, payload.password)
    return schemas.AuthResponse(
        message="Login successful",
        token=result.token,
        user=schemas.UserRead(id=result.user_id, username=result.username),
    )


@router.get(
    "/check-auth",
    response_model=schemas.AuthStatusResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def check_auth(
    token: Optional[str] = Depends(get_bearer_token),
    service: AccountService = Depends(get_account_service),
):
    """检查登录状态；未登录是正常结果，始终返回200"""
    status = service.check_auth(token)
    if not status.is_logged_in:
        return schemas.AuthStatusResponse(is_logged_in=False)
    return schemas.AuthStatusResponse(
        is_logged_in=True,
        user=schemas.UserRead(id=status.user_id, username=status.username),
    )
