"""数据库连接模块

统一管理数据库引擎、会话和模型基类的创建
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from ..config.settings import settings

logger = logging.getLogger(__name__)


def build_engine(url: str):
    """根据URL创建引擎；非SQLite数据库使用有界连接池"""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=settings.ECHO_SQL,
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo=settings.ECHO_SQL,
    )


# 创建数据库引擎
engine = build_engine(settings.database_url)

# 创建会话工厂
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建模型基类
Base = declarative_base()


def init_db() -> bool:
    """创建缺失的表，失败时记录日志并返回False"""
    from .. import models  # noqa: F401  注册模型到 Base.metadata

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Database initialization failed")
        return False
    logger.info("Database ready")
    return True


def get_db():
    """获取数据库会话的依赖函数"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
