"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JWT配置
    SECRET_KEY: str = "change-me-in-production"  # 生产环境必须通过环境变量设置
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 天

    # 密码哈希成本
    BCRYPT_ROUNDS: int = 12

    # 应用配置
    APP_TITLE: str = "Account Service"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # MySQL 配置 - 从环境变量加载
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = ""
    MYSQL_HOST: str = ""
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "accounts"

    # 数据库配置 - 优先使用DATABASE_URL，否则从MySQL配置构建
    DATABASE_URL: str = ""
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 30  # 获取连接的最长等待秒数
    ECHO_SQL: bool = False  # 是否打印SQL日志

    @property
    def database_url(self) -> str:
        """Return the DB URL. Priority:
        1. `DATABASE_URL`
        2. MySQL vars when `MYSQL_HOST` is set
        3. Fallback to a local SQLite DB for development
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.MYSQL_HOST:
            return (
                f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
                f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
            )
        return "sqlite:///./dev.db"


# 创建全局配置实例
settings = Settings()
