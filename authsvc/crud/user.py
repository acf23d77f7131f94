"""用户数据操作

定义对用户表的点查询与插入。UserStore 把会话绑定到这些函数上，
并把数据库异常翻译为业务异常。
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import DuplicateUsername, StoreUnavailable
from ..models import User

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """根据用户名获取用户（区分大小写）"""
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """根据ID获取用户"""
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, username: str, password_hash: str) -> User:
    """创建用户；用户名唯一约束冲突时抛出 IntegrityError"""
    db_user = User(username=username, password_hash=password_hash)
    db.add(db_user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(db_user)
    return db_user


class UserStore:
    """凭据存储

    唯一约束是判断重复用户名的最终依据，插入前的查询只是快速路径。
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        try:
            return get_user_by_username(self.db, username)
        except SQLAlchemyError as exc:
            logger.error("User lookup by username failed", exc_info=True)
            raise StoreUnavailable() from exc

    def find_by_id(self, user_id: int) -> Optional[User]:
        try:
            return get_user_by_id(self.db, user_id)
        except SQLAlchemyError as exc:
            logger.error("User lookup by id failed", exc_info=True)
            raise StoreUnavailable() from exc

    def insert(self, username: str, password_hash: str) -> int:
        try:
            return create_user(self.db, username, password_hash).id
        except IntegrityError as exc:
            logger.info("Insert rejected by unique constraint for username %r", username)
            raise DuplicateUsername() from exc
        except SQLAlchemyError as exc:
            logger.error("User insert failed", exc_info=True)
            raise StoreUnavailable() from exc
