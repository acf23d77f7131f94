"""用户表模型

定义用户相关的数据模型
"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.dialects import mysql
from sqlalchemy.sql import func

from ..database.connection import Base

# MySQL 默认排序规则不区分大小写，用户名列使用二进制排序规则
USERNAME_TYPE = String(50).with_variant(mysql.VARCHAR(50, collation="utf8mb4_bin"), "mysql")


class User(Base):
    """用户表"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(USERNAME_TYPE, unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r}>"
