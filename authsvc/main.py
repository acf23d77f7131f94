"""FastAPI主应用入口

提供注册、登录和登录状态检查接口
- 使用依赖注入管理数据库会话和账户服务
- 业务异常统一映射为状态码与 {"success": false, "error": ...} 响应
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1 import auth_router, health_router
from .config.settings import settings
from .core.errors import AccountError, InvalidInput, StoreUnavailable
from .database.connection import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 建表失败不阻止启动，健康检查会报告数据库不可用
    init_db()
    logger.info("%s %s started", settings.APP_TITLE, settings.APP_VERSION)
    yield


# 创建FastAPI应用实例
app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 挂载API路由
app.include_router(auth_router, prefix="/api")
app.include_router(health_router, prefix="/api")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return error_response(InvalidInput.status_code, InvalidInput.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(StoreUnavailable.status_code, StoreUnavailable.message)


@app.get("/")
def root():
    return {"message": "Backend is running"}
